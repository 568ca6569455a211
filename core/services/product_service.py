# =============================================================================
# core/services/product_service.py - Marketplace Products
# =============================================================================
# Products and product categories in Supabase.
#
# - Writes require a signed-in seller; only the seller may change a product
# - Deleting a product sets status = "deleted" (the row stays)
# - An uploaded image goes through AttachmentService against the marketplace
#   bucket and is appended to the product's images list
# =============================================================================

import logging
from typing import Any

from app.auth.models import AuthUser
from app.config import settings
from app.exceptions import (
    AuthenticationRequiredError,
    OwnershipError,
    ResourceNotFoundError,
)
from core.models.product import (
    ProductCategoryInput,
    ProductCategoryResponse,
    ProductInput,
    ProductResponse,
    ProductStatus,
    ProductUpdate,
)
from core.services.attachment_service import AttachmentService, AttachmentUpload
from lib.supabase_client import SupabaseClient
from lib.utils import utc_now_iso
from lib.validation import validate_input

logger = logging.getLogger(__name__)

TABLE = "products"
CATEGORY_TABLE = "product_categories"


def _require_user(user: AuthUser | None, action: str) -> AuthUser:
    if user is None:
        raise AuthenticationRequiredError(action)
    return user


class ProductService:
    """Service for product and product category operations."""

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @staticmethod
    def _select(description: str, **filters: Any) -> list[ProductResponse]:
        """Products matching equality filters, newest first."""
        client = SupabaseClient.get_client()

        query = client.table(TABLE).select("*")
        for column, value in filters.items():
            query = query.eq(column, value)

        try:
            response = query.order("created_at", desc=True).execute()
        except Exception as e:
            logger.error(f"Error fetching {description}: {e}")
            raise

        return [ProductResponse(**row) for row in response.data or []]

    @staticmethod
    def list_products() -> list[ProductResponse]:
        """Active products, newest first."""
        return ProductService._select("products", status=ProductStatus.ACTIVE.value)

    @staticmethod
    def list_by_seller(seller_id: str) -> list[ProductResponse]:
        """All of a seller's products, whatever their status."""
        return ProductService._select(f"products for seller {seller_id}", seller_id=seller_id)

    @staticmethod
    def list_by_category(category_id: str) -> list[ProductResponse]:
        return ProductService._select(
            f"products in category {category_id}",
            category_id=category_id,
            status=ProductStatus.ACTIVE.value,
        )

    @staticmethod
    def get_product(product_id: str) -> ProductResponse:
        row = SupabaseClient.fetch_row(TABLE, product_id)
        if row is None:
            raise ResourceNotFoundError("product", product_id)
        return ProductResponse(**row)

    @staticmethod
    def search_products(query: str) -> list[ProductResponse]:
        """Active products whose name or description contains `query`."""
        client = SupabaseClient.get_client()
        pattern = f"%{query}%"

        try:
            response = (
                client.table(TABLE)
                .select("*")
                .eq("status", ProductStatus.ACTIVE.value)
                .or_(f"name.ilike.{pattern},description.ilike.{pattern}")
                .order("created_at", desc=True)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error searching products with query {query}: {e}")
            raise

        return [ProductResponse(**row) for row in response.data or []]

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    @staticmethod
    def create_product(
        data: ProductInput | dict[str, Any],
        user: AuthUser | None,
        image: AttachmentUpload | None = None,
    ) -> ProductResponse:
        """
        Create a product owned by the signed-in user.

        Raises:
            AuthenticationRequiredError: No signed-in user
            PayloadValidationError: Invalid fields
            StorageUploadError: Unexpected image upload failure
        """
        product = validate_input(ProductInput, data, "product")
        AttachmentService.validate_upload(image)
        seller = _require_user(user, "create a product")

        images = list(product.images)
        image_url = AttachmentService.resolve_reference(
            settings.PRODUCT_IMAGES_BUCKET, image, seller
        )
        if image_url:
            images.append(image_url)

        row = product.model_dump(mode="json")
        row["images"] = images
        row["seller_id"] = seller.user_id

        client = SupabaseClient.get_client()
        try:
            response = client.table(TABLE).insert(row).execute()
        except Exception as e:
            logger.error(f"Error creating product: {e}")
            raise

        created = SupabaseClient.inserted_row(response, "product")
        logger.info(f"Seller {seller.user_id} created product {created['id']}")
        return ProductResponse(**created)

    @staticmethod
    def _check_owner(product_id: str, seller: AuthUser, action: str) -> dict[str, Any]:
        """Fetch seller_id/images and make sure `seller` owns the product."""
        existing = SupabaseClient.fetch_row(TABLE, product_id, columns="seller_id, images")
        if existing is None:
            raise ResourceNotFoundError("product", product_id)
        if existing.get("seller_id") != seller.user_id:
            logger.warning(
                f"User {seller.user_id} tried to {action} product {product_id} "
                f"owned by {existing.get('seller_id')}"
            )
            raise OwnershipError("product", product_id, action)
        return existing

    @staticmethod
    def _write(product_id: str, seller: AuthUser, changes: dict[str, Any]) -> ProductResponse:
        changes["updated_at"] = utc_now_iso()
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table(TABLE)
                .update(changes)
                .eq("id", product_id)
                .eq("seller_id", seller.user_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error updating product {product_id}: {e}")
            raise

        updated = SupabaseClient.first_row(response)
        if updated is None:
            raise ResourceNotFoundError("product", product_id)
        return ProductResponse(**updated)

    @staticmethod
    def update_product(
        product_id: str,
        data: ProductUpdate | dict[str, Any],
        user: AuthUser | None,
        image: AttachmentUpload | None = None,
    ) -> ProductResponse:
        """Partial update by the product's seller; a new image is appended."""
        update = validate_input(ProductUpdate, data, "product")
        AttachmentService.validate_upload(image)
        seller = _require_user(user, "update a product")

        existing = ProductService._check_owner(product_id, seller, "update")
        changes = update.model_dump(mode="json", exclude_unset=True)

        image_url = AttachmentService.resolve_reference(
            settings.PRODUCT_IMAGES_BUCKET, image, seller
        )
        if image_url:
            images = changes.get("images")
            if images is None:
                images = existing.get("images") or []
            changes["images"] = [*images, image_url]

        return ProductService._write(product_id, seller, changes)

    @staticmethod
    def delete_product(product_id: str, user: AuthUser | None) -> ProductResponse:
        """Soft delete: the product is kept with status "deleted"."""
        seller = _require_user(user, "delete a product")
        ProductService._check_owner(product_id, seller, "delete")
        deleted = ProductService._write(
            product_id, seller, {"status": ProductStatus.DELETED.value}
        )
        logger.info(f"Seller {seller.user_id} deleted product {product_id}")
        return deleted

    @staticmethod
    def update_status(
        product_id: str,
        status: ProductStatus,
        user: AuthUser | None,
    ) -> ProductResponse:
        """Change a product's status; only matches the seller's own rows."""
        seller = _require_user(user, "update product status")
        return ProductService._write(product_id, seller, {"status": ProductStatus(status).value})

    # -------------------------------------------------------------------------
    # Product Categories
    # -------------------------------------------------------------------------

    @staticmethod
    def list_categories() -> list[ProductCategoryResponse]:
        client = SupabaseClient.get_client()

        try:
            response = client.table(CATEGORY_TABLE).select("*").order("name").execute()
        except Exception as e:
            logger.error(f"Error fetching product categories: {e}")
            raise

        return [ProductCategoryResponse(**row) for row in response.data or []]

    @staticmethod
    def create_category(data: ProductCategoryInput | dict[str, Any]) -> ProductCategoryResponse:
        category = validate_input(ProductCategoryInput, data, "product category")
        client = SupabaseClient.get_client()

        try:
            response = client.table(CATEGORY_TABLE).insert(category.model_dump()).execute()
        except Exception as e:
            logger.error(f"Error creating product category {category.name}: {e}")
            raise

        return ProductCategoryResponse(**SupabaseClient.inserted_row(response, "product category"))

    @staticmethod
    def delete_category(category_id: str) -> None:
        client = SupabaseClient.get_client()

        try:
            client.table(CATEGORY_TABLE).delete().eq("id", category_id).execute()
        except Exception as e:
            logger.error(f"Error deleting product category {category_id}: {e}")
            raise

        logger.info(f"Deleted product category {category_id}")
