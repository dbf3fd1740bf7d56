"""
Coffee type API endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, status

from student_api.auth import dependencies as auth_dependencies
from student_api.core import db, inputs

from . import service

router = APIRouter(dependencies=[Depends(auth_dependencies.require_api_token)])


@router.get("/typecoffee")
async def list_coffee_types(store: db.Store = Depends(db.get_store)) -> list[dict]:
    return await service.list_coffee_types(store)


@router.get("/getcoffeetype")
async def list_type_names(store: db.Store = Depends(db.get_store)) -> list[str]:
    """
    Just the `type` strings, for pickers.
    """
    return await service.list_type_names(store)


@router.get("/typecoffee/{item_id}")
async def get_coffee_type(
    type_id: int = Depends(inputs.path_id),
    store: db.Store = Depends(db.get_store),
) -> dict:
    return await service.get_coffee_type(store, type_id)


@router.post("/typecoffee", status_code=status.HTTP_201_CREATED)
async def create_coffee_type(
    payload: dict[str, Any] = Depends(inputs.json_object),
    store: db.Store = Depends(db.get_store),
) -> dict:
    row = await service.create_coffee_type(store, payload)
    return {"success": True, "typecoffee": row}


@router.patch("/typecoffee/{item_id}")
async def update_coffee_type(
    type_id: int = Depends(inputs.path_id),
    payload: dict[str, Any] = Depends(inputs.json_object),
    store: db.Store = Depends(db.get_store),
) -> dict:
    row = await service.update_coffee_type(store, type_id, payload)
    return {"success": True, "typecoffee": row}


@router.delete("/typecoffee/{item_id}")
async def delete_coffee_type(
    type_id: int = Depends(inputs.path_id),
    store: db.Store = Depends(db.get_store),
) -> dict:
    row = await service.delete_coffee_type(store, type_id)
    return {"success": True, "typecoffee": row}
