# =============================================================================
# core/services/market_price_service.py - Market Prices (REST)
# =============================================================================
# Market price observations live on the marketplace API under
# farming/market-prices/. Besides CRUD and the server's own stats/trends
# endpoints, this module computes the dashboard summary (count, min, max,
# average, trend breakdown) over the rows matching the current filters.
# The summary is a pandas aggregation over the fetched rows.
# =============================================================================

import logging
from typing import Any

import pandas as pd

from app.auth.models import AuthUser
from core.models.market_price import (
    MarketPriceFilters,
    MarketPriceInput,
    MarketPriceListing,
    MarketPriceSearch,
    MarketPriceSummary,
    PriceTrend,
)
from lib.api_client import ApiClient, extract_results
from lib.validation import validate_input

logger = logging.getLogger(__name__)

BASE_PATH = "farming/market-prices/"
ALL = "all"


def _token(user: AuthUser | None) -> str | None:
    return user.access_token if user else None


# =============================================================================
# Aggregation
# =============================================================================

def filter_prices(
    rows: list[dict[str, Any]],
    filters: MarketPriceFilters | None = None,
) -> pd.DataFrame:
    """
    Apply the dashboard filters to market price rows.

    The search term matches crop name, location or district
    (case-insensitive substring). crop/location/trend/market_type match
    exactly unless set to "all".
    """
    filters = filters or MarketPriceFilters()
    frame = pd.DataFrame(rows)
    if frame.empty:
        return frame

    for column in ("crop_name", "location", "district", "trend", "market_type"):
        if column not in frame.columns:
            frame[column] = None

    mask = pd.Series(True, index=frame.index)

    if filters.search:
        term = filters.search.lower()
        matches = pd.Series(False, index=frame.index)
        for column in ("crop_name", "location", "district"):
            matches |= (
                frame[column].fillna("").astype(str).str.lower()
                .str.contains(term, regex=False)
            )
        mask &= matches

    exact = {
        "crop_name": filters.crop,
        "location": filters.location,
        "trend": filters.trend,
        "market_type": filters.market_type,
    }
    for column, wanted in exact.items():
        if wanted and wanted != ALL:
            mask &= frame[column] == wanted

    return frame[mask].reset_index(drop=True)


def summarize_prices(frame: pd.DataFrame) -> MarketPriceSummary:
    """
    Aggregate statistics over (already filtered) market price rows.

    Prices arrive as JSON numbers or decimal strings; rows whose price
    doesn't parse are left out of min/max/avg but still counted. The overall
    trend is the more frequent of up/down, or stable on a tie.
    """
    if frame.empty:
        return MarketPriceSummary()

    if "price" in frame.columns:
        prices = pd.to_numeric(frame["price"], errors="coerce").dropna()
    else:
        prices = pd.Series(dtype=float)

    trend_counts = {trend.value: 0 for trend in PriceTrend}
    if "trend" in frame.columns:
        for trend, count in frame["trend"].value_counts().items():
            if trend in trend_counts:
                trend_counts[trend] = int(count)

    if trend_counts[PriceTrend.UP.value] > trend_counts[PriceTrend.DOWN.value]:
        overall = PriceTrend.UP
    elif trend_counts[PriceTrend.DOWN.value] > trend_counts[PriceTrend.UP.value]:
        overall = PriceTrend.DOWN
    else:
        overall = PriceTrend.STABLE

    def distinct(column: str) -> list[str]:
        if column not in frame.columns:
            return []
        return sorted(str(value) for value in frame[column].dropna().unique())

    return MarketPriceSummary(
        count=len(frame),
        min_price=float(prices.min()) if not prices.empty else None,
        max_price=float(prices.max()) if not prices.empty else None,
        avg_price=round(float(prices.mean()), 2) if not prices.empty else None,
        trend_counts=trend_counts,
        overall_trend=overall,
        crops=distinct("crop_name"),
        locations=distinct("location"),
    )


# =============================================================================
# Service
# =============================================================================

class MarketPriceService:
    """Service for market price operations on the marketplace API."""

    @staticmethod
    def list_prices() -> list[dict[str, Any]]:
        body = ApiClient.request("GET", BASE_PATH, action="fetch market prices")
        return extract_results(body)

    @staticmethod
    def list_with_summary(filters: MarketPriceFilters | None = None) -> MarketPriceListing:
        """Fetch all prices, filter them and attach the summary."""
        frame = filter_prices(MarketPriceService.list_prices(), filters)
        rows = frame.astype(object).where(frame.notna(), None).to_dict(orient="records")
        return MarketPriceListing(results=rows, summary=summarize_prices(frame))

    @staticmethod
    def get_price(price_id: str) -> dict[str, Any]:
        return ApiClient.request("GET", f"{BASE_PATH}{price_id}/", action="fetch market price")

    @staticmethod
    def create_price(
        data: MarketPriceInput | dict[str, Any],
        user: AuthUser | None,
    ) -> dict[str, Any]:
        price = validate_input(MarketPriceInput, data, "market price")
        return ApiClient.request(
            "POST",
            BASE_PATH,
            action="add market price",
            json=price.model_dump(mode="json", exclude_none=True),
            access_token=_token(user),
            require_auth=True,
        )

    @staticmethod
    def update_price(
        price_id: str,
        data: MarketPriceInput | dict[str, Any],
        user: AuthUser | None,
    ) -> dict[str, Any]:
        price = validate_input(MarketPriceInput, data, "market price")
        return ApiClient.request(
            "PUT",
            f"{BASE_PATH}{price_id}/",
            action="update market price",
            json=price.model_dump(mode="json", exclude_none=True),
            access_token=_token(user),
            require_auth=True,
        )

    @staticmethod
    def delete_price(price_id: str, user: AuthUser | None) -> None:
        ApiClient.request(
            "DELETE",
            f"{BASE_PATH}{price_id}/",
            action="delete market price",
            access_token=_token(user),
            require_auth=True,
        )
        logger.info(f"Deleted market price {price_id}")

    @staticmethod
    def get_stats() -> dict[str, Any]:
        return ApiClient.request("GET", f"{BASE_PATH}stats/", action="fetch market price stats")

    @staticmethod
    def get_trends(crop: str, location: str | None = None, days: int = 30) -> dict[str, Any]:
        return ApiClient.request(
            "GET",
            f"{BASE_PATH}trends/",
            action="fetch market price trends",
            params={"crop": crop, "days": days, "location": location},
        )

    @staticmethod
    def get_crops_summary() -> list[dict[str, Any]]:
        return ApiClient.request("GET", f"{BASE_PATH}crops/", action="fetch crops summary")

    @staticmethod
    def get_locations_summary() -> list[dict[str, Any]]:
        return ApiClient.request(
            "GET", f"{BASE_PATH}locations/", action="fetch locations summary"
        )

    @staticmethod
    def search_prices(filters: MarketPriceSearch) -> list[dict[str, Any]]:
        body = ApiClient.request(
            "GET",
            f"{BASE_PATH}search/",
            action="search market prices",
            params=filters.model_dump(mode="json", exclude_none=True),
        )
        return extract_results(body)
