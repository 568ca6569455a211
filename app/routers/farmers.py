# =============================================================================
# app/routers/farmers.py - Farmer Registry Endpoints
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Path

from app.dependencies import CurrentUser
from core.models.farmer import FarmerResponse
from core.services.farmer_service import FarmerService

router = APIRouter()


@router.get("", response_model=list[FarmerResponse])
async def list_farmers(user: CurrentUser):
    """Farmers ordered by full name."""
    return FarmerService.list_farmers()


@router.get("/{farmer_id}", response_model=FarmerResponse)
async def get_farmer(
    farmer_id: Annotated[str, Path(description="Farmer id")],
    user: CurrentUser,
):
    return FarmerService.get_farmer(farmer_id)


@router.post("", response_model=FarmerResponse, status_code=201)
async def create_farmer(
    user: CurrentUser,
    payload: Annotated[dict[str, Any], Body()],
):
    return FarmerService.create_farmer(payload)


@router.patch("/{farmer_id}", response_model=FarmerResponse)
async def update_farmer(
    farmer_id: Annotated[str, Path(description="Farmer id")],
    user: CurrentUser,
    payload: Annotated[dict[str, Any], Body()],
):
    return FarmerService.update_farmer(farmer_id, payload)


@router.delete("/{farmer_id}")
async def delete_farmer(
    farmer_id: Annotated[str, Path(description="Farmer id")],
    user: CurrentUser,
):
    FarmerService.delete_farmer(farmer_id)
    return {"id": farmer_id, "message": "Farmer deleted successfully"}
