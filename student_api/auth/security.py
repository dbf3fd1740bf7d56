"""
Static API token check.
"""

from __future__ import annotations

import os
import secrets


def api_secret() -> str:
    return os.environ.get("API_SECRET", "").strip()


def verify_token(token: str) -> bool:
    expected = api_secret()
    # No configured secret means nothing is accepted.
    if not expected or not token:
        return False
    return secrets.compare_digest(token.encode("utf-8"), expected.encode("utf-8"))
