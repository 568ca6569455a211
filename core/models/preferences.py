# =============================================================================
# core/models/preferences.py - Dashboard Preference Schemas
# =============================================================================

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

PREFERENCE_MESSAGES = {
    "dark_mode": "Dark mode must be true or false",
    "email_notifications": "Email notifications must be true or false",
}


class DashboardPreferences(BaseModel):
    """
    Process-wide dashboard settings.

    Unknown keys found in the stored file are kept so saving never drops
    settings written by a newer version.
    """

    model_config = ConfigDict(extra="allow")

    dark_mode: bool = False
    email_notifications: bool = True

    error_messages: ClassVar[dict[str, str]] = PREFERENCE_MESSAGES


class PreferencesUpdate(BaseModel):
    """Partial update; unset fields keep their stored value."""

    dark_mode: bool | None = None
    email_notifications: bool | None = None

    error_messages: ClassVar[dict[str, str]] = PREFERENCE_MESSAGES
