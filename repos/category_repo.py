from __future__ import annotations

from typing import Any, Dict, List, Optional

from models.errors import BadRequest, Conflict, NotFound
from models.schema import COL_CATEGORIES
from storage.json_store import JsonStore, get_json_store
from utils.ids import new_id


def category_exists(doc: Dict[str, Any], ref: Any) -> bool:
    # A category reference matches either the id or the exact name.
    return any(c.get("name") == ref or c.get("id") == ref for c in doc[COL_CATEGORIES])


def require_category(doc: Dict[str, Any], body: Dict[str, Any], creating: bool) -> None:
    """Validation hook for products: body.category must resolve to a category."""
    category = body.get("category")
    if not creating and not category:
        return
    if not category or not category_exists(doc, category):
        raise BadRequest("Valid category required")


class CategoryRepository:
    def __init__(self, store: Optional[JsonStore] = None):
        self.store = store or get_json_store()

    def list(self) -> List[Dict[str, Any]]:
        return self.store.read()[COL_CATEGORIES]

    def create(self, name: Any) -> Dict[str, Any]:
        if not name:
            raise BadRequest("name required")
        with self.store.transaction() as doc:
            needle = str(name).lower()
            if any(str(c.get("name", "")).lower() == needle for c in doc[COL_CATEGORIES]):
                raise Conflict("category exists")
            category = {"id": new_id(), "name": name}
            doc[COL_CATEGORIES].append(category)
        return category

    def delete(self, category_id: str) -> None:
        # Products still pointing at the category are left as they are.
        with self.store.transaction() as doc:
            kept = [c for c in doc[COL_CATEGORIES] if c.get("id") != category_id]
            if len(kept) == len(doc[COL_CATEGORIES]):
                raise NotFound("not found")
            doc[COL_CATEGORIES] = kept
