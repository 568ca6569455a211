# =============================================================================
# app/routers/market_prices.py - Market Price Endpoints
# =============================================================================
# Proxies the marketplace API's market price resource. GET "" also returns
# the summary (min/max/avg/trend) of the rows matching the filters.
# =============================================================================

from datetime import date
from typing import Annotated, Any

from fastapi import APIRouter, Body, Path, Query

from app.dependencies import CurrentUser
from core.models.market_price import (
    MarketPriceFilters,
    MarketPriceListing,
    MarketPriceSearch,
    PriceTrend,
)
from core.services.market_price_service import MarketPriceService

router = APIRouter()


@router.get("", response_model=MarketPriceListing)
async def list_market_prices(
    search: Annotated[str | None, Query(description="Crop, location or district contains")] = None,
    crop: Annotated[str, Query(description="Exact crop name or 'all'")] = "all",
    location: Annotated[str, Query(description="Exact location or 'all'")] = "all",
    trend: Annotated[str, Query(description="up, down, stable or 'all'")] = "all",
    market_type: Annotated[str, Query(description="Market type or 'all'")] = "all",
):
    """Filtered market prices plus their summary statistics."""
    filters = MarketPriceFilters(
        search=search,
        crop=crop,
        location=location,
        trend=trend,
        market_type=market_type,
    )
    return MarketPriceService.list_with_summary(filters)


@router.get("/stats")
async def get_market_price_stats():
    return MarketPriceService.get_stats()


@router.get("/trends")
async def get_market_price_trends(
    crop: Annotated[str, Query(description="Crop name")],
    location: Annotated[str | None, Query(description="Optional location")] = None,
    days: Annotated[int, Query(ge=1, le=365, description="Look-back window")] = 30,
):
    return MarketPriceService.get_trends(crop, location, days)


@router.get("/crops")
async def get_crops_summary():
    return MarketPriceService.get_crops_summary()


@router.get("/locations")
async def get_locations_summary():
    return MarketPriceService.get_locations_summary()


@router.get("/search")
async def search_market_prices(
    q: Annotated[str | None, Query()] = None,
    crop: Annotated[str | None, Query()] = None,
    location: Annotated[str | None, Query()] = None,
    market_type: Annotated[str | None, Query()] = None,
    season: Annotated[str | None, Query()] = None,
    trend: Annotated[PriceTrend | None, Query()] = None,
    date_from: Annotated[date | None, Query()] = None,
    date_to: Annotated[date | None, Query()] = None,
):
    """Server-side search on the marketplace API."""
    filters = MarketPriceSearch(
        q=q,
        crop=crop,
        location=location,
        market_type=market_type,
        season=season,
        trend=trend,
        date_from=date_from,
        date_to=date_to,
    )
    return {"results": MarketPriceService.search_prices(filters)}


@router.get("/{price_id}")
async def get_market_price(price_id: Annotated[str, Path(description="Market price id")]):
    return MarketPriceService.get_price(price_id)


@router.post("", status_code=201)
async def create_market_price(
    user: CurrentUser,
    payload: Annotated[dict[str, Any], Body()],
):
    return MarketPriceService.create_price(payload, user)


@router.put("/{price_id}")
async def update_market_price(
    price_id: Annotated[str, Path(description="Market price id")],
    user: CurrentUser,
    payload: Annotated[dict[str, Any], Body()],
):
    return MarketPriceService.update_price(price_id, payload, user)


@router.delete("/{price_id}")
async def delete_market_price(
    price_id: Annotated[str, Path(description="Market price id")],
    user: CurrentUser,
):
    MarketPriceService.delete_price(price_id, user)
    return {"id": price_id, "message": "Market price deleted successfully"}
