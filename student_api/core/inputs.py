"""
Request input readers shared by the resource routers.
"""

from __future__ import annotations

import json
from typing import Any

from fastapi import HTTPException, Request, status

from . import validation


def _invalid(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


async def json_object(request: Request) -> dict[str, Any]:
    """
    Read the body as a JSON object. An empty body reads as `{}`.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise _invalid("Invalid JSON body") from exc
    if not isinstance(payload, dict):
        raise _invalid("Invalid JSON body")
    return payload


def path_id(item_id: str) -> int:
    """
    Numeric `{item_id}` path parameter; rejected before any database access.
    """
    parsed = validation.parse_id(item_id)
    if parsed is None:
        raise _invalid("Invalid id")
    return parsed
