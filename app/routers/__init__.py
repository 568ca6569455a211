# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by dashboard page:
# - health.py: Health check endpoints
# - crops.py: Crop catalog with icon uploads
# - addresses.py: Delivery addresses and the default-address rule
# - products.py / product_categories.py: Marketplace listings
# - orders.py: Orders, items, delivery and payment status
# - farmers.py: Farmer registry
# - feeds.py / agri_service_categories.py: Feed and service catalogs
# - market_prices.py, categories.py, agri_services.py: Marketplace API proxies
# - audit_logs.py, users.py: Admin-only views on the marketplace API
# - preferences.py: Local dashboard preferences
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import crops
from . import addresses
from . import products
from . import product_categories
from . import orders
from . import farmers
from . import feeds
from . import agri_service_categories
from . import market_prices
from . import categories
from . import agri_services
from . import audit_logs
from . import users
from . import preferences

__all__ = [
    "health",
    "crops",
    "addresses",
    "products",
    "product_categories",
    "orders",
    "farmers",
    "feeds",
    "agri_service_categories",
    "market_prices",
    "categories",
    "agri_services",
    "audit_logs",
    "users",
    "preferences",
]
