# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the AgriDash Admin API:
# - conftest.py: In-memory Supabase double and marketplace API stub
# - test_storage.py / test_attachments.py: Image upload and cleanup
# - test_addresses.py: Default-address rule
# - test_products.py / test_orders.py: Supabase-backed resources
# - test_market_prices.py / test_api_client.py: Marketplace REST resources
# - test_auth.py / test_routers.py: Token checks and HTTP endpoints
#
# Run tests with: pytest
# =============================================================================
