# =============================================================================
# tests/test_products.py - Product Service Tests
# =============================================================================
# This module contains tests for:
# - Creating products as the signed-in seller
# - Ownership checks on update/delete
# - Soft delete and status changes
# - Search and category listings
# =============================================================================

import pytest

from app.exceptions import (
    AuthenticationRequiredError,
    OwnershipError,
    PayloadValidationError,
    RecordNotWrittenError,
    ResourceNotFoundError,
)
from core.services.attachment_service import AttachmentUpload
from core.services.product_service import ProductService


def product_data(**overrides):
    data = {
        "name": "Fresh tomatoes",
        "description": "Grown in Brikama",
        "price": 12.5,
        "stock_quantity": 40,
        "category_id": "veg",
    }
    data.update(overrides)
    return data


@pytest.fixture
def seeded_product(fake_supabase, auth_user):
    [row] = fake_supabase.seed("products", {
        **product_data(),
        "seller_id": auth_user.user_id,
        "status": "active",
        "images": ["https://cdn.example.com/a.png"],
    })
    return row


class TestCreateProduct:
    """Test ProductService.create_product()."""

    def test_seller_is_signed_in_user(self, fake_supabase, auth_user):
        product = ProductService.create_product(product_data(seller_id="someone-else"), auth_user)

        assert product.seller_id == auth_user.user_id
        assert product.status == "active"

    def test_requires_user(self, fake_supabase):
        with pytest.raises(AuthenticationRequiredError):
            ProductService.create_product(product_data(), None)

        assert fake_supabase.rows("products") == []

    def test_insert_returning_no_row(self, fake_supabase, auth_user):
        fake_supabase.return_nothing_on_insert("products")

        with pytest.raises(RecordNotWrittenError):
            ProductService.create_product(product_data(), auth_user)

    def test_validation_messages(self, fake_supabase, auth_user):
        with pytest.raises(PayloadValidationError) as exc_info:
            ProductService.create_product(product_data(name="", price=-1), auth_user)

        assert exc_info.value.field_errors == {
            "name": "Product name is required",
            "price": "Price must be zero or more",
        }

    def test_image_appended(self, fake_supabase, auth_user):
        image = AttachmentUpload(filename="tomato.jpg", content=b"jpg", content_type="image/jpeg")

        product = ProductService.create_product(product_data(), auth_user, image=image)

        assert len(product.images) == 1
        assert "/storage/v1/object/public/marketplace/" in product.images[0]

    def test_image_rejected_by_policy_still_creates(self, fake_supabase, auth_user):
        fake_supabase.storage.upload_error = Exception("new row violates row-level security policy")
        image = AttachmentUpload(filename="tomato.jpg", content=b"jpg")

        product = ProductService.create_product(product_data(), auth_user, image=image)

        assert product.images == []


class TestChangeProduct:
    """Test update/delete/status with ownership."""

    def test_update_by_owner(self, fake_supabase, auth_user, seeded_product):
        product = ProductService.update_product(seeded_product["id"], {"price": 15}, auth_user)

        assert product.price == 15
        assert product.name == "Fresh tomatoes"

    def test_update_by_other_user(self, fake_supabase, other_user, seeded_product):
        with pytest.raises(OwnershipError):
            ProductService.update_product(seeded_product["id"], {"price": 1}, other_user)

        assert fake_supabase.rows("products")[0]["price"] == 12.5

    def test_update_unknown(self, fake_supabase, auth_user):
        with pytest.raises(ResourceNotFoundError):
            ProductService.update_product("missing", {"price": 1}, auth_user)

    def test_update_appends_image(self, fake_supabase, auth_user, seeded_product):
        image = AttachmentUpload(filename="second.png", content=b"png")

        product = ProductService.update_product(seeded_product["id"], {}, auth_user, image=image)

        assert product.images[0] == "https://cdn.example.com/a.png"
        assert len(product.images) == 2

    def test_soft_delete(self, fake_supabase, auth_user, seeded_product):
        deleted = ProductService.delete_product(seeded_product["id"], auth_user)

        assert deleted.status == "deleted"
        assert len(fake_supabase.rows("products")) == 1
        assert ProductService.list_products() == []

    def test_delete_by_other_user(self, fake_supabase, other_user, seeded_product):
        with pytest.raises(OwnershipError):
            ProductService.delete_product(seeded_product["id"], other_user)

    def test_status_only_matches_own_rows(self, fake_supabase, other_user, seeded_product):
        with pytest.raises(ResourceNotFoundError):
            ProductService.update_status(seeded_product["id"], "out_of_stock", other_user)

    def test_status_change(self, fake_supabase, auth_user, seeded_product):
        product = ProductService.update_status(seeded_product["id"], "out_of_stock", auth_user)

        assert product.status == "out_of_stock"


class TestReadProducts:
    """Test listings and search."""

    def test_search_name_or_description(self, fake_supabase, auth_user):
        fake_supabase.seed(
            "products",
            {**product_data(name="Okra"), "status": "active", "seller_id": auth_user.user_id},
            {**product_data(name="Pepper", description="Hot okra pepper"), "status": "active"},
            {**product_data(name="Okra seeds"), "status": "deleted"},
            {**product_data(name="Onion", description="Red"), "status": "active"},
        )

        names = [p.name for p in ProductService.search_products("OKRA")]

        assert names == ["Pepper", "Okra"]

    def test_list_by_seller_includes_all_statuses(self, fake_supabase, auth_user):
        fake_supabase.seed(
            "products",
            {**product_data(name="A"), "status": "active", "seller_id": auth_user.user_id},
            {**product_data(name="B"), "status": "deleted", "seller_id": auth_user.user_id},
            {**product_data(name="C"), "status": "active", "seller_id": "someone"},
        )

        names = [p.name for p in ProductService.list_by_seller(auth_user.user_id)]

        assert names == ["B", "A"]

    def test_categories(self, fake_supabase):
        ProductService.create_category({"name": "Vegetables"})
        ProductService.create_category({"name": "Fruits"})

        assert [c.name for c in ProductService.list_categories()] == ["Fruits", "Vegetables"]

    def test_category_validation(self, fake_supabase):
        with pytest.raises(PayloadValidationError) as exc_info:
            ProductService.create_category({"name": ""})

        assert exc_info.value.field_errors == {"name": "Category name is required"}
