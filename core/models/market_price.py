# =============================================================================
# core/models/market_price.py - Market Price Schemas
# =============================================================================
# Market prices live on the marketplace REST API. Besides CRUD payloads this
# module defines the filter and summary models used for the dashboard's
# aggregate view (min/max/average price and trend breakdown over the rows
# matching the current filters).
# =============================================================================

from datetime import date as date_type
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, Field


class PriceTrend(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class MarketPriceInput(BaseModel):
    """
    Schema for adding or replacing a market price observation.

    Example:
        {
            "crop_name": "Maize",
            "location": "Serekunda",
            "price": 25.5,
            "price_unit": "kg"
        }
    """

    error_messages: ClassVar[dict[str, str]] = {
        "crop_name": "Crop is required",
        "location": "Market is required",
        "price": "Price must be positive",
        "price_unit": "Unit is required",
        "previous_price": "Previous price must be positive",
        "trend": "Trend must be up, down or stable",
    }

    crop_name: str = Field(..., min_length=1, max_length=100)
    location: str = Field(..., min_length=1, max_length=255)
    district: str | None = None
    village: str | None = None
    price: float = Field(..., gt=0)
    currency: str = Field(default="D", min_length=1, max_length=10)
    price_unit: str = Field(default="kg", min_length=1, max_length=20)
    previous_price: float | None = Field(default=None, gt=0)
    market_type: str = Field(default="retail", min_length=1)
    season: str = Field(default="off_peak", min_length=1)
    trend: PriceTrend | None = None
    date: date_type | None = None
    source: str | None = None
    notes: str | None = None


class MarketPriceSearch(BaseModel):
    """Server-side search filters for /farming/market-prices/search/."""

    q: str | None = None
    crop: str | None = None
    location: str | None = None
    market_type: str | None = None
    season: str | None = None
    trend: PriceTrend | None = None
    date_from: date_type | None = None
    date_to: date_type | None = None


class MarketPriceFilters(BaseModel):
    """
    Client-side filters for the aggregate view.

    "all" (or None) disables a filter. The search term matches crop name,
    location and district, case-insensitively.
    """

    search: str | None = None
    crop: str | None = "all"
    location: str | None = "all"
    trend: str | None = "all"
    market_type: str | None = "all"


class MarketPriceSummary(BaseModel):
    """Aggregate statistics over the filtered market price rows."""

    count: int = 0
    min_price: float | None = None
    max_price: float | None = None
    avg_price: float | None = None
    trend_counts: dict[str, int] = Field(
        default_factory=lambda: {t.value: 0 for t in PriceTrend}
    )
    overall_trend: PriceTrend = PriceTrend.STABLE
    crops: list[str] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)


class MarketPriceListing(BaseModel):
    """Filtered rows plus their summary, as served to the dashboard."""

    results: list[dict[str, Any]]
    summary: MarketPriceSummary
