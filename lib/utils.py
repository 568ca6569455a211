# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

import secrets
import string
from datetime import datetime, timezone
from uuid import UUID

_NAME_ALPHABET = string.ascii_lowercase + string.digits


# =============================================================================
# UUID Utilities
# =============================================================================

def normalize_uuid(value: str | UUID) -> str:
    """
    Normalize a UUID to string format.

    Handles both string and UUID objects, ensuring consistent string output.

    Example:
        user_id = normalize_uuid(uuid_obj)  # "550e8400-..."
        user_id = normalize_uuid("550e8400-...")  # "550e8400-..."
    """
    return str(value) if isinstance(value, UUID) else value


# =============================================================================
# Time Utilities
# =============================================================================

def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string, as stored in timestamp columns."""
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# File Name Utilities
# =============================================================================

def random_name(length: int = 13) -> str:
    """Random lowercase alphanumeric name used for storage object keys."""
    return "".join(secrets.choice(_NAME_ALPHABET) for _ in range(length))


def file_extension(filename: str) -> str:
    """
    Extension of a filename without the dot, case preserved.

    Files without a dot return an empty string.

    Example:
        file_extension("Maize.PNG")  # "PNG"
        file_extension("archive.tar.gz")  # "gz"
    """
    if "." not in filename:
        return ""
    return filename.rsplit(".", 1)[-1]
