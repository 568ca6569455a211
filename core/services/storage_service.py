# =============================================================================
# core/services/storage_service.py - Supabase Storage Operations
# =============================================================================
# Handles image upload, public URL resolution and removal in Supabase
# Storage, and classifies storage failures into a small typed set so callers
# never have to inspect error text themselves.
# =============================================================================

import logging
from dataclasses import dataclass
from enum import Enum

from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

# Public object URLs look like
#   {SUPABASE_URL}/storage/v1/object/public/{bucket}/{path}
PUBLIC_URL_MARKER = "/storage/v1/object/public/"

CACHE_CONTROL_SECONDS = "3600"

# storage-api error codes, see supabase/storage ErrorCode
PERMISSION_ERROR_CODES = {
    "AccessDenied",
    "InvalidJWT",
    "Unauthorized",
    "SignatureDoesNotMatch",
}
BUCKET_ERROR_CODES = {
    "NoSuchBucket",
    "BucketNotFound",
}

# Message fragments used by older storage servers that send no error code
LEGACY_BUCKET_FRAGMENTS = ("bucket",)
LEGACY_PERMISSION_FRAGMENTS = ("policy", "permission", "unauthorized")


class StorageErrorKind(str, Enum):
    """
    Classification of a failed storage call.

    - permission_denied: RLS policy, missing grant, bad or missing token
    - bucket_missing: the target bucket doesn't exist
    - unknown: anything else (network, server error, ...)
    """
    PERMISSION_DENIED = "permission_denied"
    BUCKET_MISSING = "bucket_missing"
    UNKNOWN = "unknown"

    @property
    def is_recoverable(self) -> bool:
        """Permission and bucket problems degrade to "no attachment"."""
        return self is not StorageErrorKind.UNKNOWN


@dataclass(frozen=True)
class UploadOutcome:
    """Result of StorageService.upload()."""

    path: str
    error_kind: StorageErrorKind | None = None
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None


def _status_of(error: BaseException) -> int | None:
    """HTTP status carried by a storage error, if any."""
    for attr in ("status", "status_code", "statusCode"):
        value = getattr(error, attr, None)
        if value is None:
            continue
        try:
            return int(value)
        except (TypeError, ValueError):
            continue
    return None


def _message_of(error: BaseException) -> str:
    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(error)


def classify_storage_error(error: BaseException) -> StorageErrorKind:
    """
    Map a storage exception to a StorageErrorKind.

    Structured fields (error code, HTTP status) decide first. Only errors
    with neither fall back to the message fragments older servers send.
    """
    code = str(getattr(error, "code", "") or "")
    status = _status_of(error)
    message = _message_of(error)
    lowered = message.lower()

    if code in BUCKET_ERROR_CODES:
        return StorageErrorKind.BUCKET_MISSING
    if code in PERMISSION_ERROR_CODES or status in (401, 403):
        return StorageErrorKind.PERMISSION_DENIED
    if status == 404 and "bucket" in lowered:
        return StorageErrorKind.BUCKET_MISSING

    if any(fragment in lowered for fragment in LEGACY_BUCKET_FRAGMENTS):
        return StorageErrorKind.BUCKET_MISSING
    if any(fragment in lowered for fragment in LEGACY_PERMISSION_FRAGMENTS):
        return StorageErrorKind.PERMISSION_DENIED

    return StorageErrorKind.UNKNOWN


class StorageService:
    """
    Service for Supabase Storage operations.

    Every method takes the bucket name so the same service serves crop
    images, product images and any other attachment bucket.
    """

    @staticmethod
    def upload(
        bucket: str,
        path: str,
        content: bytes,
        content_type: str | None = None,
    ) -> UploadOutcome:
        """
        Upload bytes to a bucket, overwriting any object at the same path.

        Args:
            bucket: Storage bucket name
            path: Object path inside the bucket
            content: File bytes
            content_type: MIME type (defaults to application/octet-stream)

        Returns:
            UploadOutcome; failures are classified, never raised
        """
        client = SupabaseClient.get_client()

        try:
            client.storage.from_(bucket).upload(
                path=path,
                file=content,
                file_options={
                    "content-type": content_type or "application/octet-stream",
                    "cache-control": CACHE_CONTROL_SECONDS,
                    "upsert": "true",
                }
            )

            logger.info(f"Uploaded file to storage: {bucket}/{path}")
            return UploadOutcome(path=path)

        except Exception as e:
            kind = classify_storage_error(e)
            logger.error(f"Storage upload to {bucket}/{path} failed ({kind.value}): {e}")
            return UploadOutcome(path=path, error_kind=kind, error_message=_message_of(e))

    @staticmethod
    def get_public_url(bucket: str, path: str) -> str:
        """
        Get a public URL for a storage object.

        Args:
            bucket: Storage bucket name
            path: Object path inside the bucket

        Returns:
            Public URL string
        """
        client = SupabaseClient.get_client()

        try:
            url = client.storage.from_(bucket).get_public_url(path)
        except Exception as e:
            logger.error(f"Failed to get public URL: {e}")
            raise

        # storage3 appends "?" when no transform options are given
        return url.rstrip("?")

    @staticmethod
    def remove(bucket: str, path: str) -> bool:
        """
        Delete an object from storage.

        Returns:
            True if deleted, False if the call failed (the failure is logged)
        """
        client = SupabaseClient.get_client()

        try:
            client.storage.from_(bucket).remove([path])
            logger.info(f"Deleted file from storage: {bucket}/{path}")
            return True

        except Exception as e:
            logger.error(f"Failed to delete {bucket}/{path}: {e}")
            return False

    @staticmethod
    def path_from_reference(bucket: str, reference: str) -> str | None:
        """
        Extract the object path from an attachment reference.

        Accepts a public URL of this bucket, a "{bucket}/{path}" string or a
        bare path. Returns None for URLs that point anywhere else.

        Example:
            path_from_reference(
                "crop_images",
                "https://x.supabase.co/storage/v1/object/public/crop_images/u1/ab.png"
            )  # "u1/ab.png"
        """
        if not reference:
            return None

        if reference.startswith(("http://", "https://")):
            marker = f"{PUBLIC_URL_MARKER}{bucket}/"
            if marker not in reference:
                return None
            path = reference.split(marker, 1)[1].split("?", 1)[0]
            return path or None

        if reference.startswith(f"{bucket}/"):
            return reference[len(bucket) + 1:] or None
        return reference

    @staticmethod
    def format_public_url(bucket: str, reference: str | None) -> str | None:
        """
        Normalise an attachment reference to a full public URL.

        Full URLs pass through unchanged; bucket paths are resolved.
        """
        if not reference:
            return None
        if reference.startswith(("http://", "https://")):
            return reference
        path = StorageService.path_from_reference(bucket, reference)
        return StorageService.get_public_url(bucket, path) if path else None
