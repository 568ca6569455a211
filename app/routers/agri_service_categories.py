# =============================================================================
# app/routers/agri_service_categories.py - Agri-Service Category Endpoints
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Path

from app.dependencies import CurrentUser
from core.models.feed import AgriServiceCategoryResponse
from core.services.feed_service import FeedService

router = APIRouter()


@router.get("", response_model=list[AgriServiceCategoryResponse])
async def list_service_categories():
    return FeedService.list_service_categories()


@router.post("", response_model=AgriServiceCategoryResponse, status_code=201)
async def create_service_category(
    user: CurrentUser,
    payload: Annotated[dict[str, Any], Body()],
):
    return FeedService.create_service_category(payload)


@router.patch("/{category_id}", response_model=AgriServiceCategoryResponse)
async def update_service_category(
    category_id: Annotated[int, Path(description="Category id")],
    user: CurrentUser,
    payload: Annotated[dict[str, Any], Body()],
):
    return FeedService.update_service_category(category_id, payload)


@router.delete("/{category_id}")
async def delete_service_category(
    category_id: Annotated[int, Path(description="Category id")],
    user: CurrentUser,
):
    FeedService.delete_service_category(category_id)
    return {"id": category_id, "message": "Agri-service category deleted successfully"}
