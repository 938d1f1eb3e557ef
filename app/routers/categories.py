from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Response
from pydantic import BaseModel

from repos.category_repo import CategoryRepository

router = APIRouter()


class CategoryBody(BaseModel):
    name: Optional[str] = None


@router.get("/categories")
def list_categories():
    return CategoryRepository().list()


@router.post("/categories", status_code=201)
def create_category(body: Optional[CategoryBody] = None):
    return CategoryRepository().create((body or CategoryBody()).name)


@router.delete("/categories/{category_id}", status_code=204)
def delete_category(category_id: str):
    CategoryRepository().delete(category_id)
    return Response(status_code=204)
