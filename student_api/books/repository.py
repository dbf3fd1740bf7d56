"""
Book persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from student_api.core import db

_RETURNING = """
    id,
    title,
    author,
    detail,
    synopsis,
    type,
    published_at AS "publishedAt"
"""

_COLUMNS = {
    "title": "title",
    "author": "author",
    "detail": "detail",
    "synopsis": "synopsis",
    "type": "type",
    "publishedAt": "published_at",
}


async def list_books(store: db.Store) -> list[dict[str, Any]]:
    return await db.fetch_all(store, f"SELECT {_RETURNING} FROM books ORDER BY id")


async def get_book(store: db.Store, book_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(store, f"SELECT {_RETURNING} FROM books WHERE id = $1", book_id)


async def create_book(store: db.Store, values: dict[str, Any]) -> dict[str, Any]:
    row = await db.fetch_one(
        store,
        f"""
        INSERT INTO books (title, author, detail, synopsis, type, published_at)
        VALUES ($1, $2, $3, $4, $5, $6)
        RETURNING {_RETURNING}
        """,
        values["title"],
        values["author"],
        values["detail"],
        values["synopsis"],
        values["type"],
        values["publishedAt"],
    )
    if row is None:
        raise RuntimeError("Failed to create book.")
    return row


async def update_book(store: db.Store, book_id: int, changes: dict[str, Any]) -> dict[str, Any] | None:
    assignments = []
    args: list[Any] = [book_id]
    for field, value in changes.items():
        args.append(value)
        assignments.append(f"{_COLUMNS[field]} = ${len(args)}")

    return await db.fetch_one(
        store,
        f"""
        UPDATE books
        SET {", ".join(assignments)}
        WHERE id = $1
        RETURNING {_RETURNING}
        """,
        *args,
    )


async def delete_book(store: db.Store, book_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(store, f"DELETE FROM books WHERE id = $1 RETURNING {_RETURNING}", book_id)
