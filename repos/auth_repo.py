from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from models.errors import BadRequest, Conflict, Unauthorized
from models.schema import COL_SESSIONS, COL_USERS
from storage.json_store import JsonStore, get_json_store
from utils.ids import hash_password, mint_bearer_token, new_id, now_ms

log = logging.getLogger("storefront.repos.auth")


def public_user(user: Dict[str, Any]) -> Dict[str, Any]:
    return {"id": user.get("id"), "email": user.get("email")}


def _find_by_email(doc: Dict[str, Any], email: Any) -> Optional[Dict[str, Any]]:
    needle = str(email).lower()
    for u in doc[COL_USERS]:
        if str(u.get("email", "")).lower() == needle:
            return u
    return None


def _issue_session(doc: Dict[str, Any], user_id: str) -> str:
    token = mint_bearer_token()
    doc[COL_SESSIONS].append({"token": token, "userId": user_id, "createdAt": now_ms()})
    return token


class AuthRepository:
    """
    Email/password accounts + bearer sessions.

    users:    {id, email, passwordHash}
    sessions: {token, userId, createdAt}  append-only, no expiry
    """

    def __init__(self, store: Optional[JsonStore] = None):
        self.store = store or get_json_store()

    def signup(self, email: Any, password: Any) -> Dict[str, Any]:
        if not email or not password:
            raise BadRequest("email and password required")
        with self.store.transaction() as doc:
            if _find_by_email(doc, email):
                raise Conflict("user exists")
            user = {"id": new_id(), "email": str(email), "passwordHash": hash_password(password)}
            doc[COL_USERS].append(user)
            token = _issue_session(doc, user["id"])
        log.info("auth_signup", extra={"extra": {"event": "auth_signup", "user_id": user["id"]}})
        return {"token": token, "user": public_user(user)}

    def login(self, email: Any, password: Any) -> Dict[str, Any]:
        with self.store.transaction() as doc:
            user = _find_by_email(doc, email) if email else None
            if not user or user.get("passwordHash") != hash_password(password):
                log.info("auth_login_failed", extra={"extra": {"event": "auth_login_failed"}})
                raise Unauthorized("invalid credentials")
            token = _issue_session(doc, user["id"])
        log.info("auth_login", extra={"extra": {"event": "auth_login", "user_id": user["id"]}})
        return {"token": token, "user": public_user(user)}

    def who_am_i(self, token: str) -> Dict[str, Any]:
        if not token:
            raise Unauthorized("missing token")
        doc = self.store.read()
        session = next((s for s in doc[COL_SESSIONS] if s.get("token") == token), None)
        if not session:
            raise Unauthorized("invalid token")
        user = next((u for u in doc[COL_USERS] if u.get("id") == session.get("userId")), None)
        if not user:
            raise Unauthorized("invalid token")
        return public_user(user)
