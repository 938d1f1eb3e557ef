from __future__ import annotations

from typing import Any, Dict, Optional

from models.schema import DEFAULT_FLASH, DOC_FLASH
from storage.json_store import JsonStore, get_json_store


class FlashRepository:
    def __init__(self, store: Optional[JsonStore] = None):
        self.store = store or get_json_store()

    def get(self) -> Dict[str, Any]:
        return self.store.read().get(DOC_FLASH) or dict(DEFAULT_FLASH)

    def set(self, enabled: Any, banner_url: Any) -> Dict[str, Any]:
        setting = {"enabled": bool(enabled), "bannerUrl": str(banner_url) if banner_url else ""}
        with self.store.transaction() as doc:
            doc[DOC_FLASH] = setting
        return setting
