# =============================================================================
# app/routers/products.py - Marketplace Product Endpoints
# =============================================================================
# Create and update take multipart forms (fields plus an optional image).
# Form values arrive as strings; the product models coerce numbers.
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, File, Form, Path, Query, UploadFile

from app.dependencies import CurrentUser, read_upload
from core.models.product import ProductResponse, ProductStatusUpdate
from core.services.product_service import ProductService
from lib.validation import validate_input

router = APIRouter()


def _set_fields(**fields: Any) -> dict[str, Any]:
    """Keep only the form fields the client actually sent."""
    return {key: value for key, value in fields.items() if value is not None}


@router.get("", response_model=list[ProductResponse])
async def list_products(
    q: Annotated[str | None, Query(description="Search name and description")] = None,
    category_id: Annotated[str | None, Query(description="Filter by category")] = None,
    seller_id: Annotated[str | None, Query(description="All products of one seller")] = None,
):
    """
    List active products, newest first.

    seller_id returns the seller's products whatever their status.
    """
    if q:
        return ProductService.search_products(q)
    if seller_id:
        return ProductService.list_by_seller(seller_id)
    if category_id:
        return ProductService.list_by_category(category_id)
    return ProductService.list_products()


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: Annotated[str, Path(description="Product id")]):
    return ProductService.get_product(product_id)


@router.post("", response_model=ProductResponse, status_code=201)
async def create_product(
    user: CurrentUser,
    name: Annotated[str, Form()] = "",
    price: Annotated[str | None, Form()] = None,
    category_id: Annotated[str, Form()] = "",
    description: Annotated[str | None, Form()] = None,
    stock_quantity: Annotated[str | None, Form()] = None,
    status: Annotated[str | None, Form()] = None,
    image: Annotated[UploadFile | None, File(description="Optional product image")] = None,
):
    """Create a product owned by the signed-in seller."""
    upload = await read_upload(image)
    data = _set_fields(
        name=name,
        price=price,
        category_id=category_id,
        description=description,
        stock_quantity=stock_quantity,
        status=status,
    )
    return ProductService.create_product(data, user, upload)


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: Annotated[str, Path(description="Product id")],
    user: CurrentUser,
    name: Annotated[str | None, Form()] = None,
    price: Annotated[str | None, Form()] = None,
    category_id: Annotated[str | None, Form()] = None,
    description: Annotated[str | None, Form()] = None,
    stock_quantity: Annotated[str | None, Form()] = None,
    status: Annotated[str | None, Form()] = None,
    image: Annotated[UploadFile | None, File(description="Image to append")] = None,
):
    """Update a product. Only its seller may do this."""
    upload = await read_upload(image)
    data = _set_fields(
        name=name,
        price=price,
        category_id=category_id,
        description=description,
        stock_quantity=stock_quantity,
        status=status,
    )
    return ProductService.update_product(product_id, data, user, upload)


@router.patch("/{product_id}/status", response_model=ProductResponse)
async def update_product_status(
    product_id: Annotated[str, Path(description="Product id")],
    user: CurrentUser,
    payload: Annotated[dict[str, Any], Body()],
):
    """Set the product status (active, out_of_stock, deleted)."""
    update = validate_input(ProductStatusUpdate, payload, "product")
    return ProductService.update_status(product_id, update.status, user)


@router.delete("/{product_id}", response_model=ProductResponse)
async def delete_product(
    product_id: Annotated[str, Path(description="Product id")],
    user: CurrentUser,
):
    """Soft delete: the product stays with status "deleted"."""
    return ProductService.delete_product(product_id, user)
