# =============================================================================
# core/models/crop.py - Crop Schemas
# =============================================================================
# Crops are the reference catalogue shown in the dashboard (name, category,
# icon). The icon is an attachment: a blob in the crop_images bucket whose
# public URL is stored in image_url.
# =============================================================================

from datetime import datetime
from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, Field


class CropCategory(str, Enum):
    """Fixed set of crop categories used by the catalogue."""
    GRAINS = "grains"
    VEGETABLES = "vegetables"
    FRUITS = "fruits"
    LEGUMES = "legumes"
    TUBERS = "tubers"
    CASH_CROPS = "cash_crops"
    OTHER = "other"


CROP_CATEGORIES = [category.value for category in CropCategory]


class CropInput(BaseModel):
    """
    Schema for creating or updating a crop.

    image_url is the current attachment reference. On update it carries the
    value the record already has, so a failed or skipped upload keeps it.

    Example:
        {"name": "Maize", "category": "grains"}
    """

    error_messages: ClassVar[dict[str, str]] = {
        "name": "Crop name is required",
        "category": f"Category must be one of: {', '.join(CROP_CATEGORIES)}",
    }

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Display name of the crop"
    )

    category: CropCategory = Field(
        ...,
        description="Crop category"
    )

    image_url: str | None = Field(
        default=None,
        description="Public URL (or bucket path) of the crop icon"
    )


class CropResponse(BaseModel):
    """A crop row as returned to clients."""

    id: str
    name: str
    category: str
    image_url: str | None = None
    created_at: datetime | None = None
