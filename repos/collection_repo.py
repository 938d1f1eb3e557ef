from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from models.errors import NotFound
from storage.json_store import JsonStore, get_json_store
from utils.ids import new_id, now_ms

# validate(doc, body, creating) raises an ApiError to reject the write.
Validator = Callable[[Dict[str, Any], Dict[str, Any], bool], None]


class CollectionRepository:
    """
    list / create / update / delete over one named collection of the document.

    Records are free-form dicts; only `id` and `createdAt` are assigned here.
    """

    def __init__(self, key: str, validate: Optional[Validator] = None, store: Optional[JsonStore] = None):
        self.key = key
        self.validate = validate
        self.store = store or get_json_store()

    @property
    def singular(self) -> str:
        return self.key[:-1] if self.key.endswith("s") else self.key

    def _not_found(self) -> NotFound:
        return NotFound(f"{self.singular} not found")

    def list(self) -> List[Dict[str, Any]]:
        return self.store.read().get(self.key) or []

    def create(self, body: Dict[str, Any]) -> Dict[str, Any]:
        with self.store.transaction() as doc:
            if self.validate:
                self.validate(doc, body, True)
            item = {"createdAt": now_ms(), **body, "id": new_id()}
            doc.setdefault(self.key, []).append(item)
        return item

    def update(self, item_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
        with self.store.transaction() as doc:
            collection = doc.setdefault(self.key, [])
            idx = next((i for i, x in enumerate(collection) if x.get("id") == item_id), None)
            if idx is None:
                raise self._not_found()
            if self.validate:
                self.validate(doc, body, False)
            collection[idx] = {**collection[idx], **body, "id": item_id}
            item = collection[idx]
        return item

    def delete(self, item_id: str) -> None:
        with self.store.transaction() as doc:
            collection = doc.get(self.key) or []
            kept = [x for x in collection if x.get("id") != item_id]
            if len(kept) == len(collection):
                raise self._not_found()
            doc[self.key] = kept
