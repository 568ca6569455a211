# =============================================================================
# core/models/order.py - Order Schemas
# =============================================================================
# An order is one row in `orders` plus its lines in `order_items`.
# Admins mostly read orders and move them through payment/delivery states.
# =============================================================================

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, Field


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"


class DeliveryStatus(str, Enum):
    """
    Delivery states of an order.

    Flow: processing -> shipped -> delivered, or cancelled at any point
    """
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class OrderItemInput(BaseModel):
    """One order line."""

    error_messages: ClassVar[dict[str, str]] = {
        "product_id": "Product is required",
        "quantity": "Quantity must be at least 1",
        "unit_price": "Unit price must be zero or more",
        "subtotal": "Subtotal must be zero or more",
    }

    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)
    unit_price: float = Field(..., ge=0)
    subtotal: float = Field(..., ge=0)


class OrderInput(BaseModel):
    """Order header fields supplied by the caller."""

    error_messages: ClassVar[dict[str, str]] = {
        "user_id": "Customer is required",
        "total_amount": "Total amount must be zero or more",
        "currency": "Currency is required",
        "payment_method": "Payment method is required",
    }

    user_id: str = Field(..., min_length=1)
    total_amount: float = Field(..., ge=0)
    discount_amount: float = Field(default=0, ge=0)
    shipping_amount: float = Field(default=0, ge=0)
    currency: str = Field(..., min_length=1, max_length=10)
    shipping_address: dict[str, Any] = Field(
        default_factory=dict,
        description="Shipping address snapshot stored as JSONB"
    )
    payment_method: str = Field(..., min_length=1)
    payment_status: PaymentStatus = PaymentStatus.PENDING
    delivery_status: DeliveryStatus = DeliveryStatus.PROCESSING
    expected_delivery_date: str | None = None


class OrderCreateRequest(BaseModel):
    """Order header plus at least one line."""

    error_messages: ClassVar[dict[str, str]] = {
        "items": "An order needs at least one item",
    }

    order: OrderInput
    items: list[OrderItemInput] = Field(..., min_length=1)


class DeliveryStatusUpdate(BaseModel):
    delivery_status: DeliveryStatus


class PaymentStatusUpdate(BaseModel):
    payment_status: PaymentStatus


class OrderItemResponse(BaseModel):
    id: str
    order_id: str
    product_id: str
    quantity: int
    unit_price: float
    subtotal: float
    created_at: datetime | None = None
    products: dict[str, Any] | None = None


class OrderResponse(BaseModel):
    """An order row, optionally with its items and buyer joined in."""

    id: str
    order_id: str
    user_id: str
    total_amount: float
    discount_amount: float | None = 0
    shipping_amount: float | None = 0
    currency: str
    order_date: datetime | None = None
    shipping_address: Any = None
    payment_method: str
    payment_status: str
    delivery_status: str
    expected_delivery_date: str | None = None
    actual_delivery_date: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    order_items: list[OrderItemResponse] | None = None
    users: dict[str, Any] | None = None


class OrderWithItems(BaseModel):
    """Result of creating an order."""

    order: OrderResponse
    items: list[OrderItemResponse]
