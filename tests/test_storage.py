# =============================================================================
# tests/test_storage.py - Storage Service Tests
# =============================================================================
# This module contains tests for:
# - Classifying storage failures (code, status, legacy message text)
# - Resolving attachment references to object paths and public URLs
# - Upload/remove against the in-memory storage double
# =============================================================================

import pytest

from core.services.storage_service import (
    StorageErrorKind,
    StorageService,
    classify_storage_error,
)
from tests.conftest import FakeStorageError

PUBLIC_PREFIX = "https://test-project.supabase.co/storage/v1/object/public"


# =============================================================================
# Error Classification Tests
# =============================================================================

class TestClassifyStorageError:
    """Test classify_storage_error()."""

    @pytest.mark.parametrize("error,expected", [
        (FakeStorageError("Bucket not found", code="NoSuchBucket", status=404), StorageErrorKind.BUCKET_MISSING),
        (FakeStorageError("denied", code="AccessDenied", status=400), StorageErrorKind.PERMISSION_DENIED),
        (FakeStorageError("jwt expired", code="InvalidJWT"), StorageErrorKind.PERMISSION_DENIED),
        (FakeStorageError("forbidden", status=403), StorageErrorKind.PERMISSION_DENIED),
        (FakeStorageError("no auth", status=401), StorageErrorKind.PERMISSION_DENIED),
        (FakeStorageError("The bucket does not exist", status=404), StorageErrorKind.BUCKET_MISSING),
    ])
    def test_structured_fields(self, error, expected):
        """Error code and HTTP status decide when present."""
        assert classify_storage_error(error) is expected

    def test_legacy_policy_message(self):
        """Servers without codes still say 'policy' for RLS rejections."""
        error = Exception("new row violates row-level security policy")
        assert classify_storage_error(error) is StorageErrorKind.PERMISSION_DENIED

    def test_legacy_bucket_message(self):
        error = Exception("Bucket not found")
        assert classify_storage_error(error) is StorageErrorKind.BUCKET_MISSING

    def test_unknown(self):
        error = FakeStorageError("upstream connect error", status=500)
        kind = classify_storage_error(error)

        assert kind is StorageErrorKind.UNKNOWN
        assert kind.is_recoverable is False

    def test_recoverable_kinds(self):
        assert StorageErrorKind.PERMISSION_DENIED.is_recoverable
        assert StorageErrorKind.BUCKET_MISSING.is_recoverable


# =============================================================================
# Reference Tests
# =============================================================================

class TestPathFromReference:
    """Test StorageService.path_from_reference()."""

    def test_public_url(self):
        url = f"{PUBLIC_PREFIX}/crop_images/u1/abc.png"
        assert StorageService.path_from_reference("crop_images", url) == "u1/abc.png"

    def test_public_url_with_query(self):
        url = f"{PUBLIC_PREFIX}/crop_images/u1/abc.png?t=1"
        assert StorageService.path_from_reference("crop_images", url) == "u1/abc.png"

    def test_url_of_another_bucket(self):
        url = f"{PUBLIC_PREFIX}/marketplace/u1/abc.png"
        assert StorageService.path_from_reference("crop_images", url) is None

    def test_external_url(self):
        assert StorageService.path_from_reference("crop_images", "https://cdn.example.com/maize.png") is None

    def test_bucket_prefixed_path(self):
        assert StorageService.path_from_reference("crop_images", "crop_images/u1/abc.png") == "u1/abc.png"

    def test_bare_path(self):
        assert StorageService.path_from_reference("crop_images", "u1/abc.png") == "u1/abc.png"

    def test_empty(self):
        assert StorageService.path_from_reference("crop_images", "") is None


class TestFormatPublicUrl:
    """Test StorageService.format_public_url()."""

    def test_full_url_unchanged(self, fake_supabase):
        url = "https://cdn.example.com/maize.png"
        assert StorageService.format_public_url("crop_images", url) == url

    def test_path_resolved(self, fake_supabase):
        url = StorageService.format_public_url("crop_images", "crop_images/u1/abc.png")
        assert url == f"{PUBLIC_PREFIX}/crop_images/u1/abc.png"

    def test_none(self, fake_supabase):
        assert StorageService.format_public_url("crop_images", None) is None


# =============================================================================
# Upload / Remove Tests
# =============================================================================

class TestUploadAndRemove:
    """Test StorageService.upload() and remove()."""

    def test_upload_success(self, fake_supabase):
        outcome = StorageService.upload("crop_images", "u1/a.png", b"png", "image/png")

        assert outcome.ok
        stored = fake_supabase.storage.objects[("crop_images", "u1/a.png")]
        assert stored["content"] == b"png"
        assert stored["options"]["content-type"] == "image/png"
        assert stored["options"]["upsert"] == "true"

    def test_upload_failure_is_classified_not_raised(self, fake_supabase):
        fake_supabase.storage.upload_error = FakeStorageError("forbidden", status=403)

        outcome = StorageService.upload("crop_images", "u1/a.png", b"png")

        assert not outcome.ok
        assert outcome.error_kind is StorageErrorKind.PERMISSION_DENIED
        assert outcome.error_message == "forbidden"

    def test_public_url_strips_trailing_question_mark(self, fake_supabase):
        url = StorageService.get_public_url("crop_images", "u1/a.png")
        assert url == f"{PUBLIC_PREFIX}/crop_images/u1/a.png"

    def test_remove(self, fake_supabase):
        assert StorageService.remove("crop_images", "u1/a.png") is True
        assert ("crop_images", "u1/a.png") in fake_supabase.storage.removed

    def test_remove_failure_returns_false(self, fake_supabase):
        fake_supabase.storage.remove_error = FakeStorageError("boom", status=500)
        assert StorageService.remove("crop_images", "u1/a.png") is False
