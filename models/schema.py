# Centralized document keys to prevent drift.
from __future__ import annotations

import copy
from typing import Any, Dict

COL_CATEGORIES = "categories"
COL_PRODUCTS = "products"
COL_EVENTS = "events"
COL_SALES = "sales"
COL_USERS = "users"
COL_SESSIONS = "sessions"

# Singleton, not a collection
DOC_FLASH = "flash"

DEFAULT_FLASH: Dict[str, Any] = {"enabled": False, "bannerUrl": ""}

# Generic CRUD collections exposed under /api/{key}
CRUD_COLLECTIONS = (COL_PRODUCTS, COL_EVENTS, COL_SALES)


def default_document() -> Dict[str, Any]:
    return {
        COL_PRODUCTS: [],
        COL_EVENTS: [],
        COL_SALES: [],
        COL_CATEGORIES: [],
        DOC_FLASH: dict(DEFAULT_FLASH),
        COL_USERS: [],
        COL_SESSIONS: [],
    }


def backfill(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Fill in any top-level key missing (or null) in a loaded document."""
    for key, value in default_document().items():
        if doc.get(key) is None:
            doc[key] = copy.deepcopy(value)
    return doc
