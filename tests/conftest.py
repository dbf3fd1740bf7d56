"""Test configuration and fixtures for the student API."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from student_api.books import repository as books_repository
from student_api.coffee_orders import repository as coffee_orders_repository
from student_api.coffee_types import repository as coffee_types_repository
from student_api.core import db
from student_api.main import app
from student_api.students import repository as students_repository

API_SECRET = "test-secret"
AUTH = {"Authorization": f"Bearer {API_SECRET}"}


class FakeTable:
    """In-memory stand-in for one table's repository functions."""

    def __init__(self, key: str = "id"):
        self.key = key
        self.rows: list[dict[str, Any]] = []
        self.calls: list[str] = []
        self._next_id = 1

    def _find(self, key_value: Any) -> dict[str, Any] | None:
        for row in self.rows:
            if row[self.key] == key_value:
                return row
        return None

    async def list(self, store) -> list[dict[str, Any]]:
        self.calls.append("list")
        return [dict(row) for row in self.rows]

    async def get(self, store, key_value) -> dict[str, Any] | None:
        self.calls.append("get")
        row = self._find(key_value)
        return dict(row) if row is not None else None

    async def create(self, store, values: dict[str, Any]) -> dict[str, Any]:
        self.calls.append("create")
        row = {"id": self._next_id, **values}
        self._next_id += 1
        self.rows.append(row)
        return dict(row)

    async def update(self, store, key_value, changes: dict[str, Any]) -> dict[str, Any] | None:
        self.calls.append("update")
        row = self._find(key_value)
        if row is None:
            return None
        row.update(changes)
        return dict(row)

    async def delete(self, store, key_value) -> dict[str, Any] | None:
        self.calls.append("delete")
        row = self._find(key_value)
        if row is None:
            return None
        self.rows.remove(row)
        return dict(row)


class FakeStore:
    """Holds one FakeTable per resource."""

    def __init__(self):
        self.students = FakeTable(key="studentId")
        self.books = FakeTable()
        self.coffee_types = FakeTable()
        self.coffee_orders = FakeTable()
        self.handle_requests = 0

    def get_store(self):
        self.handle_requests += 1
        return self

    @property
    def untouched(self) -> bool:
        tables = (self.students, self.books, self.coffee_types, self.coffee_orders)
        return self.handle_requests == 0 and all(not table.calls for table in tables)


def _patch_repositories(monkeypatch: pytest.MonkeyPatch, store: FakeStore) -> None:
    students = store.students
    monkeypatch.setattr(students_repository, "list_students", students.list)
    monkeypatch.setattr(students_repository, "get_student", students.get)
    monkeypatch.setattr(students_repository, "create_student", students.create)
    monkeypatch.setattr(students_repository, "update_student", students.update)
    monkeypatch.setattr(students_repository, "delete_student", students.delete)

    books = store.books
    monkeypatch.setattr(books_repository, "list_books", books.list)
    monkeypatch.setattr(books_repository, "get_book", books.get)
    monkeypatch.setattr(books_repository, "create_book", books.create)
    monkeypatch.setattr(books_repository, "update_book", books.update)
    monkeypatch.setattr(books_repository, "delete_book", books.delete)

    types = store.coffee_types

    async def list_type_names(_store) -> list[str]:
        types.calls.append("list_type_names")
        return [row["type"] for row in types.rows]

    monkeypatch.setattr(coffee_types_repository, "list_coffee_types", types.list)
    monkeypatch.setattr(coffee_types_repository, "list_type_names", list_type_names)
    monkeypatch.setattr(coffee_types_repository, "get_coffee_type", types.get)
    monkeypatch.setattr(coffee_types_repository, "create_coffee_type", types.create)
    monkeypatch.setattr(coffee_types_repository, "update_coffee_type", types.update)
    monkeypatch.setattr(coffee_types_repository, "delete_coffee_type", types.delete)

    orders = store.coffee_orders
    monkeypatch.setattr(coffee_orders_repository, "list_orders", orders.list)
    monkeypatch.setattr(coffee_orders_repository, "get_order", orders.get)
    monkeypatch.setattr(coffee_orders_repository, "create_order", orders.create)
    monkeypatch.setattr(coffee_orders_repository, "update_order", orders.update)
    monkeypatch.setattr(coffee_orders_repository, "delete_order", orders.delete)


@pytest.fixture(name="store")
def store_fixture(monkeypatch: pytest.MonkeyPatch) -> FakeStore:
    """Fake store wired into every repository."""
    store = FakeStore()
    _patch_repositories(monkeypatch, store)
    return store


@pytest.fixture(name="client")
def client_fixture(monkeypatch: pytest.MonkeyPatch, store: FakeStore):
    """Test client with the API secret set and the DB handle overridden.

    The lifespan is not entered, so no pool is opened.
    """
    monkeypatch.setenv("API_SECRET", API_SECRET)
    app.dependency_overrides[db.get_store] = store.get_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture(name="auth")
def auth_fixture() -> dict[str, str]:
    """Authorization header carrying the configured API secret."""
    return dict(AUTH)
