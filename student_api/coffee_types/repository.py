"""
Coffee type persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from student_api.core import db


async def list_coffee_types(store: db.Store) -> list[dict[str, Any]]:
    return await db.fetch_all(store, "SELECT id, type FROM typecoffee ORDER BY id")


async def list_type_names(store: db.Store) -> list[str]:
    rows = await db.fetch_all(store, "SELECT type FROM typecoffee ORDER BY id")
    return [str(row["type"]) for row in rows]


async def get_coffee_type(store: db.Store, type_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(store, "SELECT id, type FROM typecoffee WHERE id = $1", type_id)


async def create_coffee_type(store: db.Store, values: dict[str, Any]) -> dict[str, Any]:
    row = await db.fetch_one(
        store,
        """
        INSERT INTO typecoffee (type)
        VALUES ($1)
        RETURNING id, type
        """,
        values["type"],
    )
    if row is None:
        raise RuntimeError("Failed to create coffee type.")
    return row


async def update_coffee_type(store: db.Store, type_id: int, changes: dict[str, Any]) -> dict[str, Any] | None:
    # `type` is the only mutable column.
    return await db.fetch_one(
        store,
        """
        UPDATE typecoffee
        SET type = $2
        WHERE id = $1
        RETURNING id, type
        """,
        type_id,
        changes["type"],
    )


async def delete_coffee_type(store: db.Store, type_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(store, "DELETE FROM typecoffee WHERE id = $1 RETURNING id, type", type_id)
