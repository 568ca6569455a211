# =============================================================================
# core/models/agri_service.py - Agri-Service Schemas (REST)
# =============================================================================
# Agri-services are third-party offerings (tractor hire, vet visits, ...)
# listed in the app and moderated from the dashboard.
# =============================================================================

from typing import ClassVar

from pydantic import BaseModel, Field


class AgriServiceInput(BaseModel):
    """Schema for creating or replacing an agri-service listing."""

    error_messages: ClassVar[dict[str, str]] = {
        "name": "Service name is required",
        "category": "Category is required",
        "location": "Location is required",
        "contact_info": "Contact information is required",
    }

    name: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1)
    description: str = Field(default="")
    location: str = Field(..., min_length=1)
    coverage_area: str = Field(default="")
    contact_info: str = Field(..., min_length=1)
    pricing_notes: str = Field(default="")
    availability: str = Field(default="")
    image_url: str | None = None
    is_active: bool = True
    is_verified: bool = False


class AgriServiceSearch(BaseModel):
    q: str | None = None
    category: str | None = None
    location: str | None = None
    verified: bool | None = None
