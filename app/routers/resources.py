from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Response

from models.schema import COL_PRODUCTS, CRUD_COLLECTIONS
from repos.category_repo import require_category
from repos.collection_repo import CollectionRepository, Validator

# Per-collection write validation; collections absent here accept any body.
VALIDATORS: Dict[str, Validator] = {COL_PRODUCTS: require_category}


def collection_router(key: str, validate: Optional[Validator] = None) -> APIRouter:
    """Builds list/create/update/delete routes for /{key} bound to one collection."""
    router = APIRouter()
    base = f"/{key}"

    def repo() -> CollectionRepository:
        return CollectionRepository(key, validate=validate)

    @router.get(base, name=f"list_{key}")
    def list_items():
        return repo().list()

    @router.post(base, status_code=201, name=f"create_{key}")
    def create_item(body: Optional[Dict[str, Any]] = Body(default=None)):
        return repo().create(body or {})

    @router.put(f"{base}/{{item_id}}", name=f"update_{key}")
    def update_item(item_id: str, body: Optional[Dict[str, Any]] = Body(default=None)):
        return repo().update(item_id, body or {})

    @router.delete(f"{base}/{{item_id}}", status_code=204, name=f"delete_{key}")
    def delete_item(item_id: str):
        repo().delete(item_id)
        return Response(status_code=204)

    return router


router = APIRouter()
for _key in CRUD_COLLECTIONS:
    router.include_router(collection_router(_key, VALIDATORS.get(_key)))
