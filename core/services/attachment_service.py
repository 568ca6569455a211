# =============================================================================
# core/services/attachment_service.py - Optional Image Attachments
# =============================================================================
# Records such as crops and products may carry one image. The image is
# uploaded to Supabase Storage before the record is written, and only its
# public URL is stored on the record.
#
# Upload never blocks the record write unless something unexpected happens:
#
#   no file                  -> keep the current reference
#   no session               -> warn, keep the current reference
#   permission / bucket      -> warn, keep the current reference
#   any other upload failure -> raise StorageUploadError (record not written)
#   success                  -> the new public URL
#
# Deleting a record removes its blob afterwards on a best-effort basis.
# =============================================================================

import logging
from dataclasses import dataclass

from app.auth.models import AuthUser
from app.config import settings
from app.exceptions import FileTooLargeError, InvalidFileTypeError, StorageUploadError
from core.services.storage_service import StorageService
from lib.utils import file_extension, random_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttachmentUpload:
    """An image file received from the client."""

    filename: str
    content: bytes
    content_type: str | None = None

    @property
    def size_bytes(self) -> int:
        return len(self.content)


class AttachmentService:
    """Upload, resolve and clean up record attachments."""

    @staticmethod
    def validate_upload(upload: AttachmentUpload | None) -> None:
        """
        Check the file type and size before any network call.

        Raises:
            InvalidFileTypeError: Extension not in ALLOWED_IMAGE_EXTENSIONS
            FileTooLargeError: File bigger than MAX_IMAGE_SIZE_MB
        """
        if upload is None:
            return

        allowed = settings.allowed_image_extensions_list
        extension = file_extension(upload.filename).lower()
        if f".{extension}" not in allowed:
            raise InvalidFileTypeError(upload.filename, allowed)

        if upload.size_bytes > settings.max_image_size_bytes:
            raise FileTooLargeError(
                upload.size_bytes / (1024 * 1024),
                settings.MAX_IMAGE_SIZE_MB
            )

    @staticmethod
    def build_storage_path(user_id: str, filename: str) -> str:
        """
        Storage key for a new upload: {user_id}/{random}.{ext}

        The extension keeps the case of the original filename.
        """
        name = random_name()
        extension = file_extension(filename)
        if extension:
            return f"{user_id}/{name}.{extension}"
        return f"{user_id}/{name}"

    @staticmethod
    def resolve_reference(
        bucket: str,
        upload: AttachmentUpload | None,
        user: AuthUser | None,
        current: str | None = None,
    ) -> str | None:
        """
        Upload an optional file and return the reference to store.

        Args:
            bucket: Target storage bucket
            upload: The file, or None when the client sent none
            user: Signed-in user, or None when there is no session
            current: Reference the record has now (None on create)

        Returns:
            The new public URL, or `current` when the upload was skipped or
            failed for a permission/bucket reason

        Raises:
            StorageUploadError: Upload failed for any other reason
        """
        if upload is None:
            return current

        if user is None:
            logger.warning(
                f"No authenticated session, saving without the uploaded image {upload.filename}"
            )
            return current

        path = AttachmentService.build_storage_path(user.user_id, upload.filename)
        outcome = StorageService.upload(bucket, path, upload.content, upload.content_type)

        if outcome.ok:
            return StorageService.get_public_url(bucket, path)

        if outcome.error_kind.is_recoverable:
            logger.warning(
                f"Image upload to {bucket} skipped ({outcome.error_kind.value}), "
                f"saving without it: {outcome.error_message}"
            )
            return current

        raise StorageUploadError(path, outcome.error_message or "unknown error")

    @staticmethod
    def discard(bucket: str, reference: str | None, user: AuthUser | None) -> bool:
        """
        Best-effort removal of a deleted record's blob.

        Never raises. Returns True only if the blob was removed.
        """
        if not reference:
            return False

        path = StorageService.path_from_reference(bucket, reference)
        if path is None:
            logger.info(f"Attachment {reference} is not in bucket {bucket}, leaving it")
            return False

        if user is None:
            logger.warning(f"No authenticated session, not removing {bucket}/{path}")
            return False

        return StorageService.remove(bucket, path)
