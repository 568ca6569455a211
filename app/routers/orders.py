# =============================================================================
# app/routers/orders.py - Order Endpoints
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Path, Query

from app.dependencies import CurrentUser
from core.models.order import (
    DeliveryStatusUpdate,
    OrderItemResponse,
    OrderResponse,
    OrderWithItems,
    PaymentStatusUpdate,
)
from core.services.order_service import OrderService
from lib.validation import validate_input

router = APIRouter()


@router.get("", response_model=list[OrderResponse])
async def list_orders(
    user: CurrentUser,
    user_id: Annotated[str | None, Query(description="Only this customer's orders")] = None,
):
    """
    List orders, newest first.

    Without user_id, orders come with their items and buyer details.
    """
    if user_id:
        return OrderService.list_user_orders(user_id)
    return OrderService.list_orders()


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: Annotated[str, Path(description="Order row id")],
    user: CurrentUser,
):
    return OrderService.get_order(order_id)


@router.get("/{order_id}/items", response_model=list[OrderItemResponse])
async def get_order_items(
    order_id: Annotated[str, Path(description="Order row id")],
    user: CurrentUser,
):
    return OrderService.get_order_items(order_id)


@router.post("", response_model=OrderWithItems, status_code=201)
async def create_order(
    user: CurrentUser,
    payload: Annotated[dict[str, Any], Body()],
):
    """
    Create an order from {"order": {...}, "items": [...]}.

    Stock is decremented per item; a failed stock update doesn't fail the
    order.
    """
    return OrderService.create_order(payload)


@router.patch("/{order_id}/delivery-status", response_model=OrderResponse)
async def update_delivery_status(
    order_id: Annotated[str, Path(description="Order row id")],
    user: CurrentUser,
    payload: Annotated[dict[str, Any], Body()],
):
    update = validate_input(DeliveryStatusUpdate, payload, "order")
    return OrderService.update_delivery_status(order_id, update.delivery_status)


@router.patch("/{order_id}/payment-status", response_model=OrderResponse)
async def update_payment_status(
    order_id: Annotated[str, Path(description="Order row id")],
    user: CurrentUser,
    payload: Annotated[dict[str, Any], Body()],
):
    update = validate_input(PaymentStatusUpdate, payload, "order")
    return OrderService.update_payment_status(order_id, update.payment_status)
