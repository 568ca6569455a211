# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import settings
from lib.api_client import ApiClient
from lib.supabase_client import SupabaseClient

router = APIRouter()

VERSION = "1.0.0"


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str


class ChecksResponse(BaseModel):
    """Individual backend checks."""
    database: str
    storage: str
    marketplace_api: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    checks: ChecksResponse
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _unhealthy(error: Exception) -> str:
    return f"unhealthy: {str(error)[:50]}"


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version=VERSION,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check():
    """
    Readiness check endpoint.

    Checks Supabase tables, Supabase storage and the marketplace API.
    """
    checks = ChecksResponse(database="unknown", storage="unknown", marketplace_api="unknown")

    try:
        client = SupabaseClient.get_client()
        client.table("crops").select("id").limit(1).execute()
        checks.database = "healthy"
    except Exception as e:
        checks.database = _unhealthy(e)

    try:
        client = SupabaseClient.get_client()
        client.storage.list_buckets()
        checks.storage = "healthy"
    except Exception as e:
        checks.storage = _unhealthy(e)

    try:
        ApiClient.request("GET", "categories/", action="check marketplace API")
        checks.marketplace_api = "healthy"
    except Exception as e:
        checks.marketplace_api = _unhealthy(e)

    all_healthy = all(
        value == "healthy"
        for value in (checks.database, checks.storage, checks.marketplace_api)
    )

    return ReadinessResponse(
        status="ready" if all_healthy else "degraded",
        checks=checks,
        timestamp=_now(),
    )
