"""
Coffee order API endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, status

from student_api.auth import dependencies as auth_dependencies
from student_api.core import db, inputs

from . import service

router = APIRouter(dependencies=[Depends(auth_dependencies.require_api_token)])


@router.get("/coffee")
async def list_orders(store: db.Store = Depends(db.get_store)) -> list[dict]:
    return await service.list_orders(store)


@router.get("/coffee/{item_id}")
async def get_order(
    order_id: int = Depends(inputs.path_id),
    store: db.Store = Depends(db.get_store),
) -> dict:
    return await service.get_order(store, order_id)


@router.post("/coffee", status_code=status.HTTP_201_CREATED)
async def create_order(
    payload: dict[str, Any] = Depends(inputs.json_object),
    store: db.Store = Depends(db.get_store),
) -> dict:
    row = await service.create_order(store, payload)
    return {"success": True, "coffee": row}


@router.patch("/coffee/{item_id}")
async def update_order(
    order_id: int = Depends(inputs.path_id),
    payload: dict[str, Any] = Depends(inputs.json_object),
    store: db.Store = Depends(db.get_store),
) -> dict:
    row = await service.update_order(store, order_id, payload)
    return {"success": True, "coffee": row}


@router.delete("/coffee/{item_id}")
async def delete_order(
    order_id: int = Depends(inputs.path_id),
    store: db.Store = Depends(db.get_store),
) -> dict:
    row = await service.delete_order(store, order_id)
    return {"success": True, "coffee": row}
