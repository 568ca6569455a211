# =============================================================================
# core/services/preferences_service.py - Dashboard Preferences
# =============================================================================
# Process-wide dashboard settings (dark mode, e-mail notifications) kept in
# a small JSON file at settings.PREFERENCES_PATH.
#
# Every change reads the whole object, changes keys and writes the whole
# object back:
# - missing file        -> defaults
# - unreadable file     -> defaults (logged as an error)
# - unknown stored keys -> kept as they are
# - unknown or mistyped key in set_preference -> PayloadValidationError
# - missing known keys  -> their default
# =============================================================================

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from app.config import settings
from app.exceptions import PayloadValidationError
from core.models.preferences import DashboardPreferences, PreferencesUpdate
from lib.validation import validate_input

logger = logging.getLogger(__name__)


class PreferencesStore:
    """Load/merge/save access to one preferences file."""

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path or settings.PREFERENCES_PATH)

    def load(self) -> DashboardPreferences:
        """Read the stored preferences merged over the defaults."""
        if not self.path.exists():
            return DashboardPreferences()

        try:
            stored = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(stored, dict):
                raise ValueError(f"expected a JSON object, got {type(stored).__name__}")
            return DashboardPreferences.model_validate(stored)

        except (OSError, ValueError, ValidationError) as e:
            logger.error(f"Error loading dashboard preferences from {self.path}: {e}")
            return DashboardPreferences()

    def save(self, preferences: DashboardPreferences) -> DashboardPreferences:
        """Write the whole preferences object."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(
            json.dumps(preferences.model_dump(), indent=2, sort_keys=True),
            encoding="utf-8",
        )
        tmp_path.replace(self.path)
        logger.debug(f"Saved dashboard preferences to {self.path}")
        return preferences

    def set_preference(self, key: str, value: Any) -> DashboardPreferences:
        """
        Change one known key and persist the whole object.

        Raises:
            PayloadValidationError: Unknown key, or a value of the wrong type
        """
        known = list(DashboardPreferences.model_fields)
        if key not in known:
            raise PayloadValidationError(
                "preferences", {key: f"Unknown preference; expected one of: {', '.join(known)}"}
            )

        data = self.load().model_dump()
        data[key] = value
        return self.save(validate_input(DashboardPreferences, data, "preferences"))

    def update(self, changes: PreferencesUpdate) -> DashboardPreferences:
        """Apply every field set on `changes`."""
        data = self.load().model_dump()
        data.update(changes.model_dump(exclude_unset=True, exclude_none=True))
        return self.save(DashboardPreferences.model_validate(data))
