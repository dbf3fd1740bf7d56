"""
Coffee order business logic.

Numbers must fit their columns: `typecoffee_id` in 1..bigint max, `count`
in the Postgres integer range.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status

from student_api.core import db, validation

from . import repository, schemas

logger = logging.getLogger(__name__)

# field -> (minimum, maximum)
_NUMBER_FIELDS = {
    "typecoffee_id": (1, validation.MAX_ID),
    "count": (validation.INT32_MIN, validation.INT32_MAX),
}
_STRING_FIELDS = ("description", "customer_name")


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Coffee order not found")


async def list_orders(store: db.Store) -> list[dict]:
    return await repository.list_orders(store)


async def get_order(store: db.Store, order_id: int) -> dict:
    row = await repository.get_order(store, order_id)
    if row is None:
        raise _not_found()
    return row


async def create_order(store: db.Store, payload: dict[str, Any]) -> dict:
    for field, (low, high) in _NUMBER_FIELDS.items():
        value = payload.get(field)
        if value is None:
            raise _bad_request(f"{field} is required")
        if not validation.is_integer(value, minimum=low, maximum=high):
            raise _bad_request(f"{field} must be a number")
    for field in _STRING_FIELDS:
        if not validation.is_non_empty_string(payload.get(field)):
            raise _bad_request(f"{field} is required")

    order = schemas.CoffeeOrderCreate(
        typecoffee_id=payload["typecoffee_id"],
        count=payload["count"],
        description=payload["description"],
        customer_name=payload["customer_name"],
    )
    row = await repository.create_order(store, order.model_dump())
    logger.info("Created coffee order id=%s for type %s.", row["id"], row["typecoffee_id"])
    return row


async def update_order(store: db.Store, order_id: int, payload: dict[str, Any]) -> dict:
    staged: dict[str, Any] = {}
    for field, (low, high) in _NUMBER_FIELDS.items():
        if validation.is_integer(payload.get(field), minimum=low, maximum=high):
            staged[field] = payload[field]
    for field in _STRING_FIELDS:
        if validation.is_non_empty_string(payload.get(field)):
            staged[field] = payload[field]

    changes = schemas.CoffeeOrderPatch(**staged).model_dump(exclude_unset=True)
    if not changes:
        raise _bad_request("No valid fields to update")

    row = await repository.update_order(store, order_id, changes)
    if row is None:
        raise _not_found()
    logger.info("Updated coffee order id=%s: %s.", order_id, ", ".join(changes))
    return row


async def delete_order(store: db.Store, order_id: int) -> dict:
    row = await repository.delete_order(store, order_id)
    if row is None:
        raise _not_found()
    logger.info("Deleted coffee order id=%s.", order_id)
    return row
