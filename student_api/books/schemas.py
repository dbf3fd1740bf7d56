"""
Book write models.

Built from fields the service has already validated; they coerce types only.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class BookCreate(BaseModel):
    title: str
    author: str
    detail: str
    synopsis: str
    type: str
    publishedAt: datetime


class BookPatch(BaseModel):
    title: str | None = None
    author: str | None = None
    detail: str | None = None
    synopsis: str | None = None
    type: str | None = None
    publishedAt: datetime | None = None
