"""
Book business logic.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from fastapi import HTTPException, status

from student_api.core import db, validation

from . import repository, schemas

logger = logging.getLogger(__name__)

_STRING_FIELDS = ("title", "author", "detail", "synopsis", "type")


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")


def _published_at(raw: Any) -> datetime:
    parsed = validation.parse_timestamp(raw)
    if parsed is None:
        raise _bad_request("publishedAt must be a valid date")
    return parsed


async def list_books(store: db.Store) -> list[dict]:
    return await repository.list_books(store)


async def get_book(store: db.Store, book_id: int) -> dict:
    row = await repository.get_book(store, book_id)
    if row is None:
        raise _not_found()
    return row


async def create_book(store: db.Store, payload: dict[str, Any]) -> dict:
    for field in _STRING_FIELDS:
        if not validation.is_non_empty_string(payload.get(field)):
            raise _bad_request(f"{field} is required")
    if not validation.is_non_empty_string(payload.get("publishedAt")):
        raise _bad_request("publishedAt is required")

    book = schemas.BookCreate(
        title=payload["title"],
        author=payload["author"],
        detail=payload["detail"],
        synopsis=payload["synopsis"],
        type=payload["type"],
        publishedAt=_published_at(payload["publishedAt"]),
    )
    row = await repository.create_book(store, book.model_dump())
    logger.info("Created book id=%s.", row["id"])
    return row


async def update_book(store: db.Store, book_id: int, payload: dict[str, Any]) -> dict:
    staged: dict[str, Any] = {
        field: payload[field]
        for field in _STRING_FIELDS
        if field in payload and validation.is_non_empty_string(payload[field])
    }
    if "publishedAt" in payload:
        staged["publishedAt"] = _published_at(payload["publishedAt"])

    changes = schemas.BookPatch(**staged).model_dump(exclude_unset=True)
    if not changes:
        raise _bad_request("No valid fields to update")

    row = await repository.update_book(store, book_id, changes)
    if row is None:
        raise _not_found()
    logger.info("Updated book id=%s: %s.", book_id, ", ".join(changes))
    return row


async def delete_book(store: db.Store, book_id: int) -> dict:
    row = await repository.delete_book(store, book_id)
    if row is None:
        raise _not_found()
    logger.info("Deleted book id=%s.", book_id)
    return row
