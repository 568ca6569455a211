# =============================================================================
# core/models/farmer.py - Farmer Schemas
# =============================================================================
# Farmers are rows in the `users` table of the mobile app.
# =============================================================================

from datetime import datetime
from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, Field


class AreaUnit(str, Enum):
    ACRE = "Acre"
    HECTARE = "Hectare"


class FarmerInput(BaseModel):
    """Schema for registering a farmer."""

    error_messages: ClassVar[dict[str, str]] = {
        "phone": "Phone number is required",
        "full_name": "Full name is required",
        "age": "Age must be between 0 and 130",
        "farm_area": "Farm area must be zero or more",
        "area_unit": "Area unit must be Acre or Hectare",
    }

    phone: str = Field(..., min_length=1, max_length=30)
    full_name: str = Field(..., min_length=1, max_length=255)
    age: int | None = Field(default=None, ge=0, le=130)
    location: str | None = Field(default=None, max_length=255)
    farm_area: float | None = Field(default=None, ge=0)
    area_unit: AreaUnit | None = None
    profile_image_url: str | None = None


class FarmerUpdate(BaseModel):
    """Partial update of a farmer. Only fields that are set are written."""

    error_messages: ClassVar[dict[str, str]] = FarmerInput.error_messages

    phone: str | None = Field(default=None, min_length=1, max_length=30)
    full_name: str | None = Field(default=None, min_length=1, max_length=255)
    age: int | None = Field(default=None, ge=0, le=130)
    location: str | None = Field(default=None, max_length=255)
    farm_area: float | None = Field(default=None, ge=0)
    area_unit: AreaUnit | None = None
    profile_image_url: str | None = None


class FarmerResponse(BaseModel):
    id: str
    phone: str | None = None
    full_name: str | None = None
    age: int | None = None
    location: str | None = None
    farm_area: float | None = None
    area_unit: str | None = None
    profile_image_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
