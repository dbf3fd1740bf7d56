"""
Coffee type business logic.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status

from student_api.core import db, validation

from . import repository, schemas

logger = logging.getLogger(__name__)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Coffee type not found")


async def list_coffee_types(store: db.Store) -> list[dict]:
    return await repository.list_coffee_types(store)


async def list_type_names(store: db.Store) -> list[str]:
    return await repository.list_type_names(store)


async def get_coffee_type(store: db.Store, type_id: int) -> dict:
    row = await repository.get_coffee_type(store, type_id)
    if row is None:
        raise _not_found()
    return row


async def create_coffee_type(store: db.Store, payload: dict[str, Any]) -> dict:
    if not validation.is_non_empty_string(payload.get("type")):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="type is required")

    coffee_type = schemas.CoffeeTypeCreate(type=payload["type"])
    row = await repository.create_coffee_type(store, coffee_type.model_dump())
    logger.info("Created coffee type id=%s.", row["id"])
    return row


async def update_coffee_type(store: db.Store, type_id: int, payload: dict[str, Any]) -> dict:
    staged: dict[str, Any] = {}
    if validation.is_non_empty_string(payload.get("type")):
        staged["type"] = payload["type"]

    changes = schemas.CoffeeTypePatch(**staged).model_dump(exclude_unset=True)
    if not changes:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No valid fields to update")

    row = await repository.update_coffee_type(store, type_id, changes)
    if row is None:
        raise _not_found()
    logger.info("Updated coffee type id=%s.", type_id)
    return row


async def delete_coffee_type(store: db.Store, type_id: int) -> dict:
    row = await repository.delete_coffee_type(store, type_id)
    if row is None:
        raise _not_found()
    logger.info("Deleted coffee type id=%s.", type_id)
    return row
