# =============================================================================
# app/routers/addresses.py - Shipping Address Endpoints
# =============================================================================
# Admin surface: a signed-in dashboard user may manage any customer's
# addresses by passing user_id. Without it, the caller's own addresses are
# used.
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Path, Query

from app.dependencies import CurrentUser
from core.models.address import AddressResponse
from core.services.address_service import AddressService

router = APIRouter()


@router.get("", response_model=list[AddressResponse])
async def list_addresses(
    user: CurrentUser,
    user_id: Annotated[str | None, Query(description="Owner of the addresses (default: caller)")] = None,
):
    """A user's addresses, default first."""
    return AddressService.list_addresses(user_id or user.user_id)


@router.get("/default", response_model=AddressResponse | None)
async def get_default_address(
    user: CurrentUser,
    user_id: Annotated[str | None, Query(description="Owner of the addresses (default: caller)")] = None,
):
    """The user's default address, or null if there is none."""
    return AddressService.get_default_address(user_id or user.user_id)


@router.get("/{address_id}", response_model=AddressResponse)
async def get_address(
    address_id: Annotated[str, Path(description="Address id")],
    user: CurrentUser,
):
    return AddressService.get_address(address_id)


@router.post("", response_model=AddressResponse, status_code=201)
async def create_address(
    user: CurrentUser,
    payload: Annotated[dict[str, Any], Body()],
):
    """
    Create an address.

    user_id defaults to the caller. The user's first address always becomes
    the default.
    """
    if not payload.get("user_id"):
        payload = {**payload, "user_id": user.user_id}
    return AddressService.create_address(payload)


@router.patch("/{address_id}", response_model=AddressResponse)
async def update_address(
    address_id: Annotated[str, Path(description="Address id")],
    user: CurrentUser,
    payload: Annotated[dict[str, Any], Body()],
):
    return AddressService.update_address(address_id, payload)


@router.post("/{address_id}/default", response_model=AddressResponse)
async def set_default_address(
    address_id: Annotated[str, Path(description="Address id")],
    user: CurrentUser,
):
    """Make this address the owner's default."""
    return AddressService.set_default_address(address_id)


@router.delete("/{address_id}")
async def delete_address(
    address_id: Annotated[str, Path(description="Address id")],
    user: CurrentUser,
):
    """
    Delete an address.

    If it was the default, the newest remaining address is promoted and
    returned as `promoted`.
    """
    promoted = AddressService.delete_address(address_id)
    return {
        "id": address_id,
        "promoted": promoted.model_dump(mode="json") if promoted else None,
        "message": "Address deleted successfully",
    }
