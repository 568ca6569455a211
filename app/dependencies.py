# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, UploadFile

from app.auth import AuthUser, get_current_user, get_current_user_optional
from app.config import settings
from core.services.attachment_service import AttachmentUpload
from core.services.preferences_service import PreferencesStore


# Type aliases for dependency injection
CurrentUser = Annotated[AuthUser, Depends(get_current_user)]
OptionalUser = Annotated[AuthUser | None, Depends(get_current_user_optional)]


async def read_upload(file: UploadFile | None) -> AttachmentUpload | None:
    """
    Read an optional multipart image into an AttachmentUpload.

    Browsers send an empty part with no filename when no file was chosen;
    that counts as no file.
    """
    if file is None or not file.filename:
        return None

    content = await file.read()
    return AttachmentUpload(
        filename=file.filename,
        content=content,
        content_type=file.content_type,
    )


def get_preferences_store() -> PreferencesStore:
    """Preferences file configured for this process."""
    return PreferencesStore(settings.PREFERENCES_PATH)


PreferencesDep = Annotated[PreferencesStore, Depends(get_preferences_store)]
