# =============================================================================
# core/services/crop_service.py - Crop Catalogue Operations
# =============================================================================
# CRUD for the `crops` table. Crop icons are attachments in the crop images
# bucket and go through AttachmentService:
#
#   create/update: validate -> upload (may fall back) -> write row
#   delete:        read row -> delete row -> best-effort blob removal
# =============================================================================

import logging
from typing import Any

from app.auth.models import AuthUser
from app.config import settings
from app.exceptions import ResourceNotFoundError
from core.models.crop import CropInput, CropResponse
from core.services.activity_service import ActivityService
from core.services.attachment_service import AttachmentService, AttachmentUpload
from core.services.storage_service import StorageService
from lib.supabase_client import SupabaseClient
from lib.validation import validate_input

logger = logging.getLogger(__name__)

TABLE = "crops"


class CropService:
    """Service for crop catalogue operations."""

    @staticmethod
    def list_crops() -> list[CropResponse]:
        """All crops ordered by name."""
        client = SupabaseClient.get_client()

        try:
            response = client.table(TABLE).select("*").order("name").execute()
        except Exception as e:
            logger.error(f"Error fetching crops: {e}")
            raise

        return [CropResponse(**row) for row in response.data or []]

    @staticmethod
    def list_crops_with_urls() -> list[CropResponse]:
        """
        All crops with image_url resolved to a full public URL.

        Older rows store a bucket path ("crop_images/u1/x.png" or "u1/x.png")
        instead of the URL.
        """
        bucket = settings.CROP_IMAGES_BUCKET
        crops = CropService.list_crops()
        return [
            crop.model_copy(update={
                "image_url": StorageService.format_public_url(bucket, crop.image_url)
            })
            for crop in crops
        ]

    @staticmethod
    def get_crop(crop_id: str) -> CropResponse:
        """
        Get one crop.

        Raises:
            ResourceNotFoundError: If no crop has this id
        """
        row = SupabaseClient.fetch_row(TABLE, crop_id)
        if row is None:
            raise ResourceNotFoundError("crop", crop_id)
        return CropResponse(**row)

    @staticmethod
    def create_crop(
        data: CropInput | dict[str, Any],
        image: AttachmentUpload | None = None,
        user: AuthUser | None = None,
    ) -> CropResponse:
        """
        Create a crop, optionally with an icon.

        Args:
            data: Crop fields
            image: Optional icon file
            user: Signed-in user; without one the icon is skipped

        Returns:
            The created crop

        Raises:
            PayloadValidationError: Invalid fields
            InvalidFileTypeError / FileTooLargeError: Invalid icon
            StorageUploadError: Unexpected upload failure (nothing written)
        """
        crop = validate_input(CropInput, data, "crop")
        AttachmentService.validate_upload(image)

        image_url = AttachmentService.resolve_reference(
            settings.CROP_IMAGES_BUCKET, image, user, current=crop.image_url
        )

        client = SupabaseClient.get_client()
        try:
            response = client.table(TABLE).insert({
                "name": crop.name,
                "category": crop.category.value,
                "image_url": image_url,
            }).execute()
        except Exception as e:
            logger.error(f"Error creating crop {crop.name}: {e}")
            raise

        created = SupabaseClient.inserted_row(response, "crop")
        logger.info(f"Created crop {created['id']} ({crop.name})")
        ActivityService.log_activity(
            "crop_created", f"Crop {crop.name} added", user.user_id if user else None
        )
        return CropResponse(**created)

    @staticmethod
    def update_crop(
        crop_id: str,
        data: CropInput | dict[str, Any],
        image: AttachmentUpload | None = None,
        user: AuthUser | None = None,
    ) -> CropResponse:
        """
        Update a crop, optionally replacing its icon.

        The previous icon blob is left in storage. If the new icon is skipped
        the crop keeps its current image_url.
        """
        crop = validate_input(CropInput, data, "crop")
        AttachmentService.validate_upload(image)

        existing = CropService.get_crop(crop_id)
        current = crop.image_url if "image_url" in crop.model_fields_set else existing.image_url

        image_url = AttachmentService.resolve_reference(
            settings.CROP_IMAGES_BUCKET, image, user, current=current
        )

        client = SupabaseClient.get_client()
        try:
            response = (
                client.table(TABLE)
                .update({
                    "name": crop.name,
                    "category": crop.category.value,
                    "image_url": image_url,
                })
                .eq("id", crop_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error updating crop {crop_id}: {e}")
            raise

        updated = SupabaseClient.first_row(response)
        if updated is None:
            raise ResourceNotFoundError("crop", crop_id)
        return CropResponse(**updated)

    @staticmethod
    def delete_crop(crop_id: str, user: AuthUser | None = None) -> bool:
        """
        Delete a crop and then try to remove its icon.

        Returns:
            True if the icon blob was removed as well
        """
        existing = CropService.get_crop(crop_id)

        client = SupabaseClient.get_client()
        try:
            client.table(TABLE).delete().eq("id", crop_id).execute()
        except Exception as e:
            logger.error(f"Error deleting crop {crop_id}: {e}")
            raise

        logger.info(f"Deleted crop {crop_id}")
        ActivityService.log_activity(
            "crop_deleted", f"Crop {existing.name} removed", user.user_id if user else None
        )
        return AttachmentService.discard(
            settings.CROP_IMAGES_BUCKET, existing.image_url, user
        )
