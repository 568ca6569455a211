# =============================================================================
# app/routers/crops.py - Crop Catalogue Endpoints
# =============================================================================
# Crops are created and updated with multipart forms so an icon can be sent
# with the fields. A missing or invalid session never blocks the write; the
# icon is just skipped.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, File, Form, Path, Query, UploadFile

from app.dependencies import OptionalUser, read_upload
from core.models.crop import CROP_CATEGORIES, CropResponse
from core.services.crop_service import CropService

router = APIRouter()


def _crop_fields(name: str, category: str, image_url: str | None) -> dict:
    data = {"name": name, "category": category}
    # An explicit empty string clears the icon reference
    if image_url is not None:
        data["image_url"] = image_url or None
    return data


@router.get("", response_model=list[CropResponse])
async def list_crops(
    formatted: Annotated[bool, Query(description="Resolve stored paths to public URLs")] = True,
):
    """List crops ordered by name."""
    if formatted:
        return CropService.list_crops_with_urls()
    return CropService.list_crops()


@router.get("/categories")
async def list_crop_categories() -> list[str]:
    """Crop categories accepted by create/update."""
    return CROP_CATEGORIES


@router.get("/{crop_id}", response_model=CropResponse)
async def get_crop(crop_id: Annotated[str, Path(description="Crop id")]):
    return CropService.get_crop(crop_id)


@router.post("", response_model=CropResponse, status_code=201)
async def create_crop(
    user: OptionalUser,
    name: Annotated[str, Form()] = "",
    category: Annotated[str, Form()] = "",
    image_url: Annotated[str | None, Form()] = None,
    image: Annotated[UploadFile | None, File(description="Optional crop icon")] = None,
):
    """
    Create a crop.

    If an image is sent but cannot be stored for permission reasons, the
    crop is still created, without an icon.
    """
    upload = await read_upload(image)
    return CropService.create_crop(_crop_fields(name, category, image_url), upload, user)


@router.put("/{crop_id}", response_model=CropResponse)
async def update_crop(
    crop_id: Annotated[str, Path(description="Crop id")],
    user: OptionalUser,
    name: Annotated[str, Form()] = "",
    category: Annotated[str, Form()] = "",
    image_url: Annotated[str | None, Form()] = None,
    image: Annotated[UploadFile | None, File(description="Optional new icon")] = None,
):
    """Update a crop. Without a usable new image the current icon is kept."""
    upload = await read_upload(image)
    return CropService.update_crop(
        crop_id, _crop_fields(name, category, image_url), upload, user
    )


@router.delete("/{crop_id}")
async def delete_crop(
    crop_id: Annotated[str, Path(description="Crop id")],
    user: OptionalUser,
):
    """Delete a crop and, when possible, its icon."""
    image_removed = CropService.delete_crop(crop_id, user)
    return {
        "id": crop_id,
        "image_removed": image_removed,
        "message": "Crop deleted successfully",
    }
