# =============================================================================
# app/routers/agri_services.py - Agri-Service Listing Endpoints
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Path, Query

from app.dependencies import OptionalUser
from core.models.agri_service import AgriServiceSearch
from core.services.agri_service_service import AgriServiceService

router = APIRouter()


@router.get("")
async def list_agri_services():
    return AgriServiceService.list_services()


@router.get("/stats")
async def get_agri_service_stats():
    return AgriServiceService.get_stats()


@router.get("/categories")
async def get_agri_service_categories():
    """Per-category counts from the marketplace API."""
    return AgriServiceService.get_categories_summary()


@router.get("/locations")
async def get_agri_service_locations():
    return AgriServiceService.get_locations_summary()


@router.get("/search")
async def search_agri_services(
    q: Annotated[str | None, Query()] = None,
    category: Annotated[str | None, Query()] = None,
    location: Annotated[str | None, Query()] = None,
    verified: Annotated[bool | None, Query()] = None,
):
    filters = AgriServiceSearch(q=q, category=category, location=location, verified=verified)
    return {"results": AgriServiceService.search_services(filters)}


@router.get("/{service_id}")
async def get_agri_service(service_id: Annotated[str, Path(description="Service id")]):
    return AgriServiceService.get_service(service_id)


@router.post("", status_code=201)
async def create_agri_service(
    user: OptionalUser,
    payload: Annotated[dict[str, Any], Body()],
):
    return AgriServiceService.create_service(payload, user)


@router.put("/{service_id}")
async def update_agri_service(
    service_id: Annotated[str, Path(description="Service id")],
    user: OptionalUser,
    payload: Annotated[dict[str, Any], Body()],
):
    return AgriServiceService.update_service(service_id, payload, user)


@router.delete("/{service_id}")
async def delete_agri_service(
    service_id: Annotated[str, Path(description="Service id")],
    user: OptionalUser,
):
    AgriServiceService.delete_service(service_id, user)
    return {"id": service_id, "message": "Agri-service deleted successfully"}


@router.post("/{service_id}/toggle-active")
async def toggle_agri_service_active(
    service_id: Annotated[str, Path(description="Service id")],
    user: OptionalUser,
):
    return AgriServiceService.toggle_active(service_id, user)


@router.post("/{service_id}/toggle-verified")
async def toggle_agri_service_verified(
    service_id: Annotated[str, Path(description="Service id")],
    user: OptionalUser,
):
    return AgriServiceService.toggle_verified(service_id, user)
