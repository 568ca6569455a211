# =============================================================================
# core/models/address.py - Address Schemas
# =============================================================================
# Shipping addresses belong to a user. Among one user's addresses at most
# one carries is_default = true; AddressService keeps that invariant.
# =============================================================================

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, Field


class AddressInput(BaseModel):
    """
    Schema for creating an address.

    is_default is a request, not a guarantee: the user's first address is
    always made default.
    """

    error_messages: ClassVar[dict[str, str]] = {
        "user_id": "User is required",
        "full_name": "Full name is required",
        "address_line1": "Address is required",
        "city": "City is required",
        "state": "State is required",
        "postal_code": "Postal code is required",
        "country": "Country is required",
        "phone_number": "Phone number is required",
    }

    user_id: str = Field(..., min_length=1)
    full_name: str = Field(..., min_length=1, max_length=255)
    address_line1: str = Field(..., min_length=1, max_length=255)
    address_line2: str | None = Field(default=None, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    postal_code: str = Field(..., min_length=1, max_length=20)
    country: str = Field(..., min_length=1, max_length=100)
    phone_number: str = Field(..., min_length=1, max_length=30)
    is_default: bool = Field(
        default=False,
        description="Request that this address becomes the user's default"
    )


class AddressUpdate(BaseModel):
    """Partial update of an address. Only fields that are set are written."""

    error_messages: ClassVar[dict[str, str]] = AddressInput.error_messages

    full_name: str | None = Field(default=None, min_length=1, max_length=255)
    address_line1: str | None = Field(default=None, min_length=1, max_length=255)
    address_line2: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, min_length=1, max_length=100)
    state: str | None = Field(default=None, min_length=1, max_length=100)
    postal_code: str | None = Field(default=None, min_length=1, max_length=20)
    country: str | None = Field(default=None, min_length=1, max_length=100)
    phone_number: str | None = Field(default=None, min_length=1, max_length=30)
    is_default: bool | None = None


class AddressResponse(BaseModel):
    """An address row as returned to clients."""

    id: str
    user_id: str
    full_name: str
    address_line1: str
    address_line2: str | None = None
    city: str
    state: str
    postal_code: str
    country: str
    phone_number: str
    is_default: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
