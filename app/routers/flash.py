from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from repos.flash_repo import FlashRepository

router = APIRouter()


class FlashBody(BaseModel):
    enabled: Any = False
    bannerUrl: Any = None


@router.get("/flash")
def get_flash():
    return FlashRepository().get()


@router.put("/flash")
def put_flash(body: Optional[FlashBody] = None):
    body = body or FlashBody()
    return FlashRepository().set(body.enabled, body.bannerUrl)
