"""
Coffee type write models. Built from already-validated fields.
"""

from __future__ import annotations

from pydantic import BaseModel


class CoffeeTypeCreate(BaseModel):
    type: str


class CoffeeTypePatch(BaseModel):
    type: str | None = None
