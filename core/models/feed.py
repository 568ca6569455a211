# =============================================================================
# core/models/feed.py - Animal Feed and Agri-Service Category Schemas
# =============================================================================

from datetime import datetime
from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, Field


class FeedCategory(str, Enum):
    LIVESTOCK = "Livestock"
    POULTRY = "Poultry"
    AQUACULTURE = "Aquaculture"


class FeedInput(BaseModel):
    """Schema for creating or replacing a feed product."""

    error_messages: ClassVar[dict[str, str]] = {
        "name": "Feed name is required",
        "category": "Category must be Livestock, Poultry or Aquaculture",
        "price": "Price must be zero or more",
        "stock": "Stock must be zero or more",
    }

    name: str = Field(..., min_length=1, max_length=255)
    category: FeedCategory
    price: float = Field(..., ge=0)
    stock: int = Field(..., ge=0)


class FeedResponse(BaseModel):
    id: int
    name: str
    category: str
    price: float
    stock: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AgriServiceCategoryInput(BaseModel):
    error_messages: ClassVar[dict[str, str]] = {
        "name": "Category name is required",
    }

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=1000)


class AgriServiceCategoryUpdate(BaseModel):
    error_messages: ClassVar[dict[str, str]] = AgriServiceCategoryInput.error_messages

    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=1000)


class AgriServiceCategoryResponse(BaseModel):
    id: int
    name: str
    description: str | None = None
