"""
Coffee order persistence (raw SQL).

`typecoffee_id` must point at an existing coffee type; the foreign key is
enforced by Postgres and a violation surfaces as an asyncpg error.
"""

from __future__ import annotations

from typing import Any

from student_api.core import db

_RETURNING = "id, typecoffee_id, count, description, customer_name"

_COLUMNS = ("typecoffee_id", "count", "description", "customer_name")


async def list_orders(store: db.Store) -> list[dict[str, Any]]:
    return await db.fetch_all(store, f"SELECT {_RETURNING} FROM coffee ORDER BY id")


async def get_order(store: db.Store, order_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(store, f"SELECT {_RETURNING} FROM coffee WHERE id = $1", order_id)


async def create_order(store: db.Store, values: dict[str, Any]) -> dict[str, Any]:
    row = await db.fetch_one(
        store,
        f"""
        INSERT INTO coffee (typecoffee_id, count, description, customer_name)
        VALUES ($1, $2, $3, $4)
        RETURNING {_RETURNING}
        """,
        values["typecoffee_id"],
        values["count"],
        values["description"],
        values["customer_name"],
    )
    if row is None:
        raise RuntimeError("Failed to create coffee order.")
    return row


async def update_order(store: db.Store, order_id: int, changes: dict[str, Any]) -> dict[str, Any] | None:
    assignments = []
    args: list[Any] = [order_id]
    for column in _COLUMNS:
        if column not in changes:
            continue
        args.append(changes[column])
        assignments.append(f"{column} = ${len(args)}")

    return await db.fetch_one(
        store,
        f"""
        UPDATE coffee
        SET {", ".join(assignments)}
        WHERE id = $1
        RETURNING {_RETURNING}
        """,
        *args,
    )


async def delete_order(store: db.Store, order_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(store, f"DELETE FROM coffee WHERE id = $1 RETURNING {_RETURNING}", order_id)
