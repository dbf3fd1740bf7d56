"""
Coffee order write models.

Built from fields the service has already validated and range-checked.
"""

from __future__ import annotations

from pydantic import BaseModel


class CoffeeOrderCreate(BaseModel):
    typecoffee_id: int
    count: int
    description: str
    customer_name: str


class CoffeeOrderPatch(BaseModel):
    typecoffee_id: int | None = None
    count: int | None = None
    description: str | None = None
    customer_name: str | None = None
