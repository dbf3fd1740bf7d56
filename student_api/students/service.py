"""
Student business logic.

Create validates every field and fails on the first bad one. Update stages
only present, valid fields; a present `birthDate` that does not parse is an
error rather than a skip.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status

from student_api.core import db, validation

from . import repository, schemas

logger = logging.getLogger(__name__)

_STRING_FIELDS = ("firstName", "lastName", "studentId", "gender")


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")


def _birth_date(payload: dict[str, Any]) -> str:
    raw = payload.get("birthDate")
    if not validation.is_non_empty_string(raw):
        raise _bad_request("birthDate is required")
    parsed = validation.parse_date(raw)
    if parsed is None:
        raise _bad_request("birthDate must be a valid date")
    return parsed


async def list_students(store: db.Store) -> list[dict]:
    return await repository.list_students(store)


async def get_student(store: db.Store, student_id: str) -> dict:
    row = await repository.get_student(store, student_id)
    if row is None:
        raise _not_found()
    return row


async def create_student(store: db.Store, payload: dict[str, Any]) -> dict:
    # Declaration order decides which field is reported first.
    for field in ("firstName", "lastName", "studentId"):
        if not validation.is_non_empty_string(payload.get(field)):
            raise _bad_request(f"{field} is required")
    birth_date = _birth_date(payload)
    if not validation.is_non_empty_string(payload.get("gender")):
        raise _bad_request("gender is required")

    student = schemas.StudentCreate(
        firstName=payload["firstName"],
        lastName=payload["lastName"],
        studentId=payload["studentId"],
        birthDate=birth_date,
        gender=payload["gender"],
    )
    row = await repository.create_student(store, student.model_dump())
    logger.info("Created student %s (id=%s).", row["studentId"], row["id"])
    return row


async def update_student(store: db.Store, student_id: str, payload: dict[str, Any]) -> dict:
    staged: dict[str, Any] = {}
    for field in _STRING_FIELDS:
        if field in payload and validation.is_non_empty_string(payload[field]):
            staged[field] = payload[field]

    if "birthDate" in payload:
        parsed = validation.parse_date(payload["birthDate"])
        if parsed is None:
            raise _bad_request("birthDate must be a valid date")
        staged["birthDate"] = parsed

    changes = schemas.StudentPatch(**staged).model_dump(exclude_unset=True)
    if not changes:
        raise _bad_request("No valid fields to update")

    row = await repository.update_student(store, student_id, changes)
    if row is None:
        raise _not_found()
    logger.info("Updated student %s: %s.", student_id, ", ".join(changes))
    return row


async def delete_student(store: db.Store, student_id: str) -> dict:
    row = await repository.delete_student(store, student_id)
    if row is None:
        raise _not_found()
    logger.info("Deleted student %s (id=%s).", student_id, row["id"])
    return row
