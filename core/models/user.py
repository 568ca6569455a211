# =============================================================================
# core/models/user.py - Managed User Schemas (REST)
# =============================================================================
# Admin user management on the marketplace API: create accounts, change
# roles, activate/deactivate.
# =============================================================================

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, Field


class UserRole(str, Enum):
    SUPERUSER = "superuser"
    ADMIN = "admin"
    REGULAR = "regular"


# Deliberately loose: one "@", something on each side, a dot in the domain
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class ManagedUserCreate(BaseModel):
    """Schema for creating a dashboard/app user."""

    error_messages: ClassVar[dict[str, str]] = {
        "email": "Invalid email address",
        "full_name": "Full name is required",
        "password": "Password must be at least 8 characters",
        "role": "Role must be superuser, admin or regular",
    }

    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=254)
    full_name: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=8)
    role: UserRole = UserRole.REGULAR
    is_active: bool = True


class RoleUpdate(BaseModel):
    error_messages: ClassVar[dict[str, str]] = {
        "role": "Role must be superuser, admin or regular",
    }

    role: UserRole


class UserFilters(BaseModel):
    """
    Client-side filters for the user table.

    The search term matches email and full name; "all" disables the role
    and status filters.
    """

    search: str | None = None
    role: str = "all"
    status: str = "all"
