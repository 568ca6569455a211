# =============================================================================
# tests/test_market_prices.py - Market Price Tests
# =============================================================================
# This module contains tests for:
# - Dashboard filters over market price rows
# - Summary statistics (min/max/avg, trend breakdown)
# - MarketPriceService against the stubbed marketplace API
# =============================================================================

import pytest

from app.exceptions import AuthenticationRequiredError, PayloadValidationError
from core.models.market_price import MarketPriceFilters, PriceTrend
from core.services.market_price_service import (
    MarketPriceService,
    filter_prices,
    summarize_prices,
)


@pytest.fixture
def price_rows():
    return [
        {"id": 1, "crop_name": "Maize", "location": "Serekunda", "district": "Kanifing",
         "price": "25.00", "trend": "up", "market_type": "retail"},
        {"id": 2, "crop_name": "Maize", "location": "Brikama", "district": "West Coast",
         "price": "22.50", "trend": "up", "market_type": "wholesale"},
        {"id": 3, "crop_name": "Rice", "location": "Serekunda", "district": "Kanifing",
         "price": "40.00", "trend": "down", "market_type": "retail"},
        {"id": 4, "crop_name": "Onion", "location": "Farafenni", "district": "North Bank",
         "price": "30.00", "trend": "stable", "market_type": "retail"},
    ]


# =============================================================================
# Filter Tests
# =============================================================================

class TestFilterPrices:
    """Test filter_prices()."""

    def test_no_filters(self, price_rows):
        assert len(filter_prices(price_rows)) == 4

    def test_search_matches_crop_location_or_district(self, price_rows):
        assert list(filter_prices(price_rows, MarketPriceFilters(search="maize"))["id"]) == [1, 2]
        assert list(filter_prices(price_rows, MarketPriceFilters(search="SEREKUNDA"))["id"]) == [1, 3]
        assert list(filter_prices(price_rows, MarketPriceFilters(search="north"))["id"]) == [4]

    def test_exact_filters(self, price_rows):
        filters = MarketPriceFilters(crop="Maize", market_type="retail")
        assert list(filter_prices(price_rows, filters)["id"]) == [1]

    def test_all_disables_filter(self, price_rows):
        filters = MarketPriceFilters(crop="all", location="all", trend="all")
        assert len(filter_prices(price_rows, filters)) == 4

    def test_empty_rows(self):
        assert filter_prices([]).empty

    def test_no_match(self, price_rows):
        assert filter_prices(price_rows, MarketPriceFilters(crop="Cassava")).empty


# =============================================================================
# Summary Tests
# =============================================================================

class TestSummarizePrices:
    """Test summarize_prices()."""

    def test_statistics(self, price_rows):
        summary = summarize_prices(filter_prices(price_rows))

        assert summary.count == 4
        assert summary.min_price == 22.5
        assert summary.max_price == 40.0
        assert summary.avg_price == 29.38
        assert summary.trend_counts == {"up": 2, "down": 1, "stable": 1}
        assert summary.overall_trend is PriceTrend.UP
        assert summary.crops == ["Maize", "Onion", "Rice"]
        assert summary.locations == ["Brikama", "Farafenni", "Serekunda"]

    def test_tie_is_stable(self, price_rows):
        rows = [row for row in price_rows if row["id"] in (1, 3)]
        assert summarize_prices(filter_prices(rows)).overall_trend is PriceTrend.STABLE

    def test_unparseable_price_counted_but_not_averaged(self):
        rows = [
            {"crop_name": "Maize", "location": "A", "price": "10", "trend": "down"},
            {"crop_name": "Maize", "location": "B", "price": "n/a", "trend": "down"},
        ]
        summary = summarize_prices(filter_prices(rows))

        assert summary.count == 2
        assert summary.avg_price == 10.0
        assert summary.overall_trend is PriceTrend.DOWN

    def test_rows_without_price_field(self):
        summary = summarize_prices(filter_prices([{"crop_name": "Maize", "trend": "up"}]))

        assert summary.count == 1
        assert summary.min_price is None
        assert summary.avg_price is None
        assert summary.overall_trend is PriceTrend.UP
        assert summary.crops == ["Maize"]

    def test_empty(self):
        summary = summarize_prices(filter_prices([]))

        assert summary.count == 0
        assert summary.avg_price is None
        assert summary.overall_trend is PriceTrend.STABLE


# =============================================================================
# Service Tests
# =============================================================================

class TestMarketPriceService:
    """Test MarketPriceService against the marketplace stub."""

    def test_list_with_summary(self, marketplace, price_rows):
        marketplace.add("GET", "farming/market-prices/", {"count": 4, "results": price_rows})

        listing = MarketPriceService.list_with_summary(MarketPriceFilters(crop="Maize"))

        assert [row["id"] for row in listing.results] == [1, 2]
        assert listing.summary.count == 2
        assert listing.summary.avg_price == 23.75

    def test_list_accepts_plain_list(self, marketplace, price_rows):
        marketplace.add("GET", "farming/market-prices/", price_rows)

        assert len(MarketPriceService.list_prices()) == 4

    def test_create_requires_auth(self, marketplace):
        payload = {"crop_name": "Maize", "location": "Serekunda", "price": 25}

        with pytest.raises(AuthenticationRequiredError):
            MarketPriceService.create_price(payload, None)

        assert marketplace.requests == []

    def test_create_validates_before_sending(self, marketplace, auth_user):
        with pytest.raises(PayloadValidationError) as exc_info:
            MarketPriceService.create_price({"crop_name": "", "location": "X", "price": -1}, auth_user)

        assert exc_info.value.field_errors["crop_name"] == "Crop is required"
        assert exc_info.value.field_errors["price"] == "Price must be positive"
        assert marketplace.requests == []

    def test_create_sends_defaults_and_token(self, marketplace, auth_user):
        marketplace.add("POST", "farming/market-prices/", {"id": 9, "crop_name": "Maize"}, status=201)

        created = MarketPriceService.create_price(
            {"crop_name": "Maize", "location": "Serekunda", "price": 25}, auth_user
        )

        assert created["id"] == 9
        sent = marketplace.last_json()
        assert sent["currency"] == "D"
        assert sent["price_unit"] == "kg"
        assert marketplace.requests[-1].headers["Authorization"] == "Bearer test-access-token"

    def test_trends_params(self, marketplace):
        marketplace.add("GET", "farming/market-prices/trends/", {"points": []})

        MarketPriceService.get_trends("Maize", None, days=7)

        params = marketplace.requests[-1].url.params
        assert params["crop"] == "Maize"
        assert params["days"] == "7"
        assert "location" not in params
