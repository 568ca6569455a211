# =============================================================================
# app/routers/feeds.py - Animal Feed Endpoints
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Path

from app.dependencies import CurrentUser
from core.models.feed import FeedResponse
from core.services.feed_service import FeedService

router = APIRouter()


@router.get("", response_model=list[FeedResponse])
async def list_feeds():
    """Feeds, newest first."""
    return FeedService.list_feeds()


@router.post("", response_model=FeedResponse, status_code=201)
async def create_feed(
    user: CurrentUser,
    payload: Annotated[dict[str, Any], Body()],
):
    return FeedService.create_feed(payload)


@router.put("/{feed_id}", response_model=FeedResponse)
async def update_feed(
    feed_id: Annotated[int, Path(description="Feed id")],
    user: CurrentUser,
    payload: Annotated[dict[str, Any], Body()],
):
    return FeedService.update_feed(feed_id, payload)


@router.delete("/{feed_id}")
async def delete_feed(
    feed_id: Annotated[int, Path(description="Feed id")],
    user: CurrentUser,
):
    FeedService.delete_feed(feed_id)
    return {"id": feed_id, "message": "Feed deleted successfully"}
