# =============================================================================
# app/routers/product_categories.py - Product Category Endpoints
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Path

from app.dependencies import CurrentUser
from core.models.product import ProductCategoryResponse
from core.services.product_service import ProductService

router = APIRouter()


@router.get("", response_model=list[ProductCategoryResponse])
async def list_product_categories():
    """Product categories ordered by name."""
    return ProductService.list_categories()


@router.post("", response_model=ProductCategoryResponse, status_code=201)
async def create_product_category(
    user: CurrentUser,
    payload: Annotated[dict[str, Any], Body()],
):
    return ProductService.create_category(payload)


@router.delete("/{category_id}")
async def delete_product_category(
    category_id: Annotated[str, Path(description="Category id")],
    user: CurrentUser,
):
    ProductService.delete_category(category_id)
    return {"id": category_id, "message": "Product category deleted successfully"}
