# =============================================================================
# core/models/product.py - Marketplace Product Schemas
# =============================================================================
# Products are listed by sellers. Deleting a product is a soft delete
# (status = "deleted"). Product images are attachments in the marketplace
# bucket; their public URLs are kept in the images list.
# =============================================================================

from datetime import datetime
from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, Field


class ProductStatus(str, Enum):
    """Lifecycle status of a product listing."""
    ACTIVE = "active"
    OUT_OF_STOCK = "out_of_stock"
    DELETED = "deleted"


class ProductInput(BaseModel):
    """
    Schema for creating a product.

    seller_id is never taken from the client; it is the authenticated user.
    """

    error_messages: ClassVar[dict[str, str]] = {
        "name": "Product name is required",
        "price": "Price must be zero or more",
        "stock_quantity": "Stock quantity must be zero or more",
        "category_id": "Category is required",
    }

    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(default="", max_length=5000)
    price: float = Field(..., ge=0)
    stock_quantity: int = Field(default=0, ge=0)
    images: list[str] = Field(default_factory=list)
    category_id: str = Field(..., min_length=1)
    status: ProductStatus = ProductStatus.ACTIVE


class ProductUpdate(BaseModel):
    """Partial update of a product. Only fields that are set are written."""

    error_messages: ClassVar[dict[str, str]] = ProductInput.error_messages

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=5000)
    price: float | None = Field(default=None, ge=0)
    stock_quantity: int | None = Field(default=None, ge=0)
    images: list[str] | None = None
    category_id: str | None = Field(default=None, min_length=1)
    status: ProductStatus | None = None


class ProductResponse(BaseModel):
    """A product row as returned to clients."""

    id: str
    name: str
    description: str | None = None
    price: float
    stock_quantity: int = 0
    images: list[str] | None = Field(default_factory=list)
    category_id: str | None = None
    seller_id: str | None = None
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProductCategoryInput(BaseModel):
    """Schema for creating a product category."""

    error_messages: ClassVar[dict[str, str]] = {
        "name": "Category name is required",
    }

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=1000)


class ProductCategoryResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    created_at: datetime | None = None


class ProductStatusUpdate(BaseModel):
    error_messages: ClassVar[dict[str, str]] = {
        "status": "Status must be active, out_of_stock or deleted",
    }

    status: ProductStatus
