# =============================================================================
# core/models/category.py - Farming Category Schemas (REST)
# =============================================================================

from typing import ClassVar

from pydantic import BaseModel, Field


class CategoryInput(BaseModel):
    """Schema for creating or replacing a farming category."""

    error_messages: ClassVar[dict[str, str]] = {
        "name": "Category name is required",
    }

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=1000)
    is_active: bool = True
    image_url: str | None = None
