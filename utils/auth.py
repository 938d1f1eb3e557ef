from __future__ import annotations

from typing import Any, Dict

from fastapi import Request

from models.errors import Unauthorized
from repos.auth_repo import AuthRepository


def parse_bearer_token(request: Request) -> str:
    h = request.headers.get("Authorization", "").strip()
    if not h:
        raise Unauthorized("missing token")
    parts = h.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1].strip():
        raise Unauthorized("invalid token")
    return parts[1].strip()


def require_session(request: Request) -> Dict[str, Any]:
    """
    Returns the public view {id, email} of the user behind the bearer token.
    """
    token = parse_bearer_token(request)
    return AuthRepository().who_am_i(token)
