"""
Student API endpoints.

The listing is public; everything else needs the API token.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, status

from student_api.auth import dependencies as auth_dependencies
from student_api.core import db, inputs

from . import service

public_router = APIRouter()
router = APIRouter(dependencies=[Depends(auth_dependencies.require_api_token)])


@public_router.get("/student")
async def list_students(store: db.Store = Depends(db.get_store)) -> list[dict]:
    return await service.list_students(store)


@router.get("/student/{student_id}")
async def get_student(student_id: str, store: db.Store = Depends(db.get_store)) -> dict:
    return await service.get_student(store, student_id)


@router.post("/student", status_code=status.HTTP_201_CREATED)
async def create_student(
    payload: dict[str, Any] = Depends(inputs.json_object),
    store: db.Store = Depends(db.get_store),
) -> dict:
    row = await service.create_student(store, payload)
    return {"success": True, "students": row}


@router.patch("/student/{student_id}")
async def update_student(
    student_id: str,
    payload: dict[str, Any] = Depends(inputs.json_object),
    store: db.Store = Depends(db.get_store),
) -> dict:
    row = await service.update_student(store, student_id, payload)
    return {"success": True, "student": row}


@router.delete("/student/{student_id}")
async def delete_student(student_id: str, store: db.Store = Depends(db.get_store)) -> dict:
    row = await service.delete_student(store, student_id)
    return {"success": True, "students": row}
