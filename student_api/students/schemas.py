"""
Student write models.

The service validates request fields before building these; the models only
carry the accepted values and coerce them to column types (`birthDate` from
"YYYY-MM-DD" to `date`). Patch models are dumped with `exclude_unset=True`.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel


class StudentCreate(BaseModel):
    firstName: str
    lastName: str
    studentId: str
    birthDate: date
    gender: str


class StudentPatch(BaseModel):
    """
    Partial update. Only fields that were explicitly set are written.
    """

    firstName: str | None = None
    lastName: str | None = None
    studentId: str | None = None
    birthDate: date | None = None
    gender: str | None = None
