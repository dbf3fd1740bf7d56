"""
Auth dependencies for protected FastAPI routes.
"""

from __future__ import annotations

import logging

from fastapi import Header, HTTPException, Request, status

from . import security

logger = logging.getLogger(__name__)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise _unauthorized()

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise _unauthorized()

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise _unauthorized()
    return token


async def require_api_token(
    request: Request,
    authorization: str | None = Header(default=None),
) -> None:
    try:
        token = _extract_bearer_token(authorization)
    except HTTPException:
        logger.warning("Rejected %s %s: missing or malformed bearer token.", request.method, request.url.path)
        raise

    if not security.verify_token(token):
        logger.warning("Rejected %s %s: bearer token mismatch.", request.method, request.url.path)
        raise _unauthorized()
