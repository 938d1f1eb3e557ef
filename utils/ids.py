from __future__ import annotations

import hashlib
import hmac
import secrets
import time
import uuid

from config.settings import settings


def new_id() -> str:
    return str(uuid.uuid4())


def mint_bearer_token() -> str:
    return secrets.token_urlsafe(32)


def now_ms() -> int:
    return int(time.time() * 1000)


def hash_password(password: str) -> str:
    # Deterministic: same password -> same digest. Unsalted sha256 unless a pepper is configured.
    data = str(password).encode("utf-8")
    if settings.PASSWORD_PEPPER:
        return hmac.new(settings.PASSWORD_PEPPER.encode("utf-8"), data, hashlib.sha256).hexdigest()
    return hashlib.sha256(data).hexdigest()
