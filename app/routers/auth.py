from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel

from repos.auth_repo import AuthRepository
from utils.auth import require_session

router = APIRouter()


class CredentialsBody(BaseModel):
    email: Any = None
    password: Any = None


@router.post("/auth/signup")
def signup(body: Optional[CredentialsBody] = None):
    body = body or CredentialsBody()
    return AuthRepository().signup(body.email, body.password)


@router.post("/auth/login")
def login(body: Optional[CredentialsBody] = None):
    body = body or CredentialsBody()
    return AuthRepository().login(body.email, body.password)


@router.get("/auth/me")
def me(request: Request):
    return require_session(request)
