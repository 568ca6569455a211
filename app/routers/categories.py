# =============================================================================
# app/routers/categories.py - Farming Category Endpoints
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Path

from app.dependencies import OptionalUser
from core.services.category_service import CategoryService

router = APIRouter()


@router.get("")
async def list_categories():
    return CategoryService.list_categories()


@router.get("/{category_id}")
async def get_category(category_id: Annotated[str, Path(description="Category id")]):
    return CategoryService.get_category(category_id)


@router.post("", status_code=201)
async def create_category(
    user: OptionalUser,
    payload: Annotated[dict[str, Any], Body()],
):
    return CategoryService.create_category(payload, user)


@router.put("/{category_id}")
async def update_category(
    category_id: Annotated[str, Path(description="Category id")],
    user: OptionalUser,
    payload: Annotated[dict[str, Any], Body()],
):
    return CategoryService.update_category(category_id, payload, user)


@router.delete("/{category_id}")
async def delete_category(
    category_id: Annotated[str, Path(description="Category id")],
    user: OptionalUser,
):
    CategoryService.delete_category(category_id, user)
    return {"id": category_id, "message": "Category deleted successfully"}
