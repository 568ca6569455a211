# =============================================================================
# core/services/order_service.py - Orders and Order Items
# =============================================================================
# Orders are read with their items, product names and buyer joined in
# through PostgREST embedding. Creating an order inserts the header, then
# the items, then decrements stock per item via the update_product_stock
# database function. A failed stock update is logged and skipped.
# =============================================================================

import logging
import secrets
import time
from typing import Any

from app.exceptions import ResourceNotFoundError
from core.models.order import (
    DeliveryStatus,
    OrderCreateRequest,
    OrderItemResponse,
    OrderResponse,
    OrderWithItems,
    PaymentStatus,
)
from lib.supabase_client import SupabaseClient
from lib.utils import utc_now_iso
from lib.validation import validate_input

logger = logging.getLogger(__name__)

TABLE = "orders"
ITEMS_TABLE = "order_items"
STOCK_RPC = "update_product_stock"

ORDER_WITH_DETAILS = """
    *,
    order_items (
        *,
        products (name, unit)
    ),
    users (full_name, email, phone)
"""


def generate_order_id() -> str:
    """Human-readable order reference, e.g. ORD-1718000000000-42"""
    return f"ORD-{int(time.time() * 1000)}-{secrets.randbelow(1000)}"


class OrderService:
    """Service for order operations."""

    @staticmethod
    def list_orders() -> list[OrderResponse]:
        """All orders with items and buyer, newest first."""
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table(TABLE)
                .select(ORDER_WITH_DETAILS)
                .order("created_at", desc=True)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error fetching orders: {e}")
            raise

        return [OrderResponse(**row) for row in response.data or []]

    @staticmethod
    def get_order(order_id: str) -> OrderResponse:
        row = SupabaseClient.fetch_row(TABLE, order_id, columns=ORDER_WITH_DETAILS)
        if row is None:
            raise ResourceNotFoundError("order", order_id)
        return OrderResponse(**row)

    @staticmethod
    def list_user_orders(user_id: str) -> list[OrderResponse]:
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table(TABLE)
                .select("*")
                .eq("user_id", user_id)
                .order("order_date", desc=True)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error fetching orders for user {user_id}: {e}")
            raise

        return [OrderResponse(**row) for row in response.data or []]

    @staticmethod
    def get_order_items(order_id: str) -> list[OrderItemResponse]:
        client = SupabaseClient.get_client()

        try:
            response = client.table(ITEMS_TABLE).select("*").eq("order_id", order_id).execute()
        except Exception as e:
            logger.error(f"Error fetching items for order {order_id}: {e}")
            raise

        return [OrderItemResponse(**row) for row in response.data or []]

    @staticmethod
    def create_order(data: OrderCreateRequest | dict[str, Any]) -> OrderWithItems:
        """
        Create an order and its items.

        There is no transaction: if the items insert fails the order header
        stays and the error propagates.
        """
        request = validate_input(OrderCreateRequest, data, "order")
        client = SupabaseClient.get_client()

        header = request.order.model_dump(mode="json")
        header["order_id"] = generate_order_id()
        header["order_date"] = utc_now_iso()

        try:
            response = client.table(TABLE).insert(header).execute()
        except Exception as e:
            logger.error(f"Error creating order: {e}")
            raise

        order = SupabaseClient.inserted_row(response, "order")

        items = [
            {**item.model_dump(), "order_id": order["id"]}
            for item in request.items
        ]
        try:
            items_response = client.table(ITEMS_TABLE).insert(items).execute()
        except Exception as e:
            logger.error(f"Error creating items for order {order['order_id']}: {e}")
            raise

        for item in request.items:
            OrderService._decrement_stock(item.product_id, item.quantity)

        logger.info(f"Created order {order['order_id']} with {len(items)} items")
        return OrderWithItems(
            order=OrderResponse(**order),
            items=[OrderItemResponse(**row) for row in items_response.data or []],
        )

    @staticmethod
    def _decrement_stock(product_id: str, quantity: int) -> None:
        client = SupabaseClient.get_client()

        try:
            client.rpc(STOCK_RPC, {
                "p_product_id": product_id,
                "p_quantity": quantity,
            }).execute()
        except Exception as e:
            logger.error(f"Error updating stock for product {product_id}: {e}")

    @staticmethod
    def _update(order_id: str, changes: dict[str, Any]) -> OrderResponse:
        changes["updated_at"] = utc_now_iso()
        client = SupabaseClient.get_client()

        try:
            response = client.table(TABLE).update(changes).eq("id", order_id).execute()
        except Exception as e:
            logger.error(f"Error updating order {order_id}: {e}")
            raise

        updated = SupabaseClient.first_row(response)
        if updated is None:
            raise ResourceNotFoundError("order", order_id)
        return OrderResponse(**updated)

    @staticmethod
    def update_delivery_status(order_id: str, status: DeliveryStatus) -> OrderResponse:
        """Move an order to a new delivery state; delivered stamps the date."""
        status = DeliveryStatus(status)
        changes: dict[str, Any] = {"delivery_status": status.value}
        if status is DeliveryStatus.DELIVERED:
            changes["actual_delivery_date"] = utc_now_iso()
        return OrderService._update(order_id, changes)

    @staticmethod
    def update_payment_status(order_id: str, status: PaymentStatus) -> OrderResponse:
        return OrderService._update(order_id, {"payment_status": PaymentStatus(status).value})
