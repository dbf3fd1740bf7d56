"""
Student persistence (raw SQL).

Rows are returned with the JSON field names (`firstName`, `birthDate`, ...).
"""

from __future__ import annotations

from typing import Any

from student_api.core import db

_RETURNING = """
    id,
    first_name AS "firstName",
    last_name AS "lastName",
    student_id AS "studentId",
    birth_date AS "birthDate",
    gender
"""

# JSON field -> column. Also the allowlist for UPDATE assignments.
_COLUMNS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "studentId": "student_id",
    "birthDate": "birth_date",
    "gender": "gender",
}


async def list_students(store: db.Store) -> list[dict[str, Any]]:
    return await db.fetch_all(
        store,
        f"""
        SELECT {_RETURNING}
        FROM students
        ORDER BY id
        """,
    )


async def get_student(store: db.Store, student_id: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        store,
        f"""
        SELECT {_RETURNING}
        FROM students
        WHERE student_id = $1
        """,
        student_id,
    )


async def create_student(store: db.Store, values: dict[str, Any]) -> dict[str, Any]:
    row = await db.fetch_one(
        store,
        f"""
        INSERT INTO students (first_name, last_name, student_id, birth_date, gender)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING {_RETURNING}
        """,
        values["firstName"],
        values["lastName"],
        values["studentId"],
        values["birthDate"],
        values["gender"],
    )
    if row is None:
        raise RuntimeError("Failed to create student.")
    return row


async def update_student(
    store: db.Store,
    student_id: str,
    changes: dict[str, Any],
) -> dict[str, Any] | None:
    """
    Apply `changes` (JSON field -> value) to the student with `student_id`.
    """
    assignments = []
    args: list[Any] = [student_id]
    for field, value in changes.items():
        args.append(value)
        assignments.append(f"{_COLUMNS[field]} = ${len(args)}")

    return await db.fetch_one(
        store,
        f"""
        UPDATE students
        SET {", ".join(assignments)}
        WHERE student_id = $1
        RETURNING {_RETURNING}
        """,
        *args,
    )


async def delete_student(store: db.Store, student_id: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        store,
        f"""
        DELETE FROM students
        WHERE student_id = $1
        RETURNING {_RETURNING}
        """,
        student_id,
    )
