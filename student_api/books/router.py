"""
Book API endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, status

from student_api.auth import dependencies as auth_dependencies
from student_api.core import db, inputs

from . import service

router = APIRouter(dependencies=[Depends(auth_dependencies.require_api_token)])


@router.get("/books")
async def list_books(store: db.Store = Depends(db.get_store)) -> list[dict]:
    return await service.list_books(store)


@router.get("/books/{item_id}")
async def get_book(
    book_id: int = Depends(inputs.path_id),
    store: db.Store = Depends(db.get_store),
) -> dict:
    return await service.get_book(store, book_id)


@router.post("/books", status_code=status.HTTP_201_CREATED)
async def create_book(
    payload: dict[str, Any] = Depends(inputs.json_object),
    store: db.Store = Depends(db.get_store),
) -> dict:
    row = await service.create_book(store, payload)
    return {"success": True, "book": row}


@router.patch("/books/{item_id}")
async def update_book(
    book_id: int = Depends(inputs.path_id),
    payload: dict[str, Any] = Depends(inputs.json_object),
    store: db.Store = Depends(db.get_store),
) -> dict:
    row = await service.update_book(store, book_id, payload)
    return {"success": True, "book": row}


@router.delete("/books/{item_id}")
async def delete_book(
    book_id: int = Depends(inputs.path_id),
    store: db.Store = Depends(db.get_store),
) -> dict:
    row = await service.delete_book(store, book_id)
    return {"success": True, "book": row}
