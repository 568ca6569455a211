# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the AgriDash admin API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import AgriDashException, agridash_exception_handler
from app.routers import (
    addresses,
    agri_service_categories,
    agri_services,
    audit_logs,
    categories,
    crops,
    farmers,
    feeds,
    health,
    market_prices,
    orders,
    preferences,
    product_categories,
    products,
    users,
)
from app.auth import routes as auth_routes

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# Create FastAPI application
app = FastAPI(
    title="AgriDash Admin API",
    description="""
## Agricultural Marketplace Administration

Backend for the AgriDash admin dashboard. Records live in Supabase tables,
images in Supabase storage buckets, and a few resources are proxied from the
marketplace REST API.

### Authentication

Send the Supabase access token as `Authorization: Bearer <token>`.
Reads are mostly public; writes need a signed-in user.

### Uploads

Crop icons and product images are multipart uploads. When storage rejects
the file because of a bucket policy or a missing bucket, the record is still
saved and keeps its previous image.
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {"name": "Auth", "description": "Verify Supabase JWT tokens"},
        {"name": "Crops", "description": "Crop catalog and crop icons"},
        {"name": "Addresses", "description": "Delivery addresses with one default per user"},
        {"name": "Products", "description": "Marketplace product listings"},
        {"name": "Product Categories", "description": "Categories for product listings"},
        {"name": "Orders", "description": "Orders, order items and status updates"},
        {"name": "Farmers", "description": "Farmer registry"},
        {"name": "Feeds", "description": "Animal feed catalog"},
        {"name": "Agri-Service Categories", "description": "Categories for agricultural services"},
        {"name": "Market Prices", "description": "Crop market prices with summary statistics"},
        {"name": "Categories", "description": "Farming categories on the marketplace API"},
        {"name": "Agri-Services", "description": "Agricultural service listings"},
        {"name": "Audit Logs", "description": "Admin audit trail"},
        {"name": "Users", "description": "Dashboard user management"},
        {"name": "Preferences", "description": "Local dashboard preferences"},
        {"name": "Health", "description": "API health and readiness checks"},
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(AgriDashException)
async def handle_agridash_exception(request: Request, exc: AgriDashException):
    """Handle custom AgriDash exceptions."""
    return await agridash_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Authentication endpoints (router carries its own /auth prefix)
app.include_router(auth_routes.router, prefix="/api/v1")

# Health check endpoints
app.include_router(health.router, prefix="/api/v1", tags=["Health"])

_RESOURCE_ROUTERS = [
    (crops.router, "crops", "Crops"),
    (addresses.router, "addresses", "Addresses"),
    (products.router, "products", "Products"),
    (product_categories.router, "product-categories", "Product Categories"),
    (orders.router, "orders", "Orders"),
    (farmers.router, "farmers", "Farmers"),
    (feeds.router, "feeds", "Feeds"),
    (agri_service_categories.router, "agri-service-categories", "Agri-Service Categories"),
    (market_prices.router, "market-prices", "Market Prices"),
    (categories.router, "categories", "Categories"),
    (agri_services.router, "agri-services", "Agri-Services"),
    (audit_logs.router, "audit-logs", "Audit Logs"),
    (users.router, "users", "Users"),
    (preferences.router, "preferences", "Preferences"),
]

for router, path, tag in _RESOURCE_ROUTERS:
    app.include_router(router, prefix=f"/api/v1/{path}", tags=[tag])


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "AgriDash Admin API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/v1/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development,
    )
