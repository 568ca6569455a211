# =============================================================================
# core/services/user_service.py - Dashboard User Management (REST)
# =============================================================================
# Admin accounts on the marketplace API under auth/users/. All calls need
# the caller's access token. Filtering the user table is done locally.
# =============================================================================

import logging
from typing import Any

from app.auth.models import AuthUser
from core.models.user import ManagedUserCreate, RoleUpdate, UserFilters
from lib.api_client import ApiClient, extract_results
from lib.validation import validate_input

logger = logging.getLogger(__name__)

BASE_PATH = "auth/users/"
ALL = "all"


def _status_of(user: dict[str, Any]) -> str:
    """Older API versions send is_active instead of status."""
    if user.get("status"):
        return user["status"]
    return "active" if user.get("is_active", True) else "inactive"


def filter_users(users: list[dict[str, Any]], filters: UserFilters) -> list[dict[str, Any]]:
    """
    Apply the user table filters.

    The search term matches email or full name, case-insensitively.
    """
    term = (filters.search or "").lower()
    matched = []
    for user in users:
        if term and not (
            term in (user.get("email") or "").lower()
            or term in (user.get("full_name") or "").lower()
        ):
            continue
        if filters.role != ALL and user.get("role") != filters.role:
            continue
        if filters.status != ALL and _status_of(user) != filters.status:
            continue
        matched.append(user)
    return matched


class UserService:
    """Service for managed user accounts."""

    @staticmethod
    def _call(
        method: str,
        path: str,
        action: str,
        user: AuthUser | None,
        json: Any = None,
    ) -> Any:
        return ApiClient.request(
            method,
            f"{BASE_PATH}{path}",
            action=action,
            json=json,
            access_token=user.access_token if user else None,
            require_auth=True,
        )

    @staticmethod
    def list_users(user: AuthUser | None, filters: UserFilters | None = None) -> list[dict[str, Any]]:
        users = extract_results(UserService._call("GET", "", "fetch users", user))
        if filters is None:
            return users
        return filter_users(users, filters)

    @staticmethod
    def get_stats(user: AuthUser | None) -> dict[str, Any]:
        return UserService._call("GET", "stats/", "fetch user stats", user)

    @staticmethod
    def create_user(data: ManagedUserCreate | dict[str, Any], user: AuthUser | None) -> dict[str, Any]:
        new_user = validate_input(ManagedUserCreate, data, "user")
        created = UserService._call(
            "POST", "create_user/", "create user", user, json=new_user.model_dump(mode="json")
        )
        logger.info(f"Created user {new_user.email} with role {new_user.role.value}")
        return created

    @staticmethod
    def update_role(user_id: str, data: RoleUpdate | dict[str, Any], user: AuthUser | None) -> dict[str, Any]:
        update = validate_input(RoleUpdate, data, "user role")
        return UserService._call(
            "POST",
            f"{user_id}/update_role/",
            "update user role",
            user,
            json={"role": update.role.value},
        )

    @staticmethod
    def toggle_status(user_id: str, user: AuthUser | None) -> dict[str, Any]:
        return UserService._call("POST", f"{user_id}/toggle_status/", "update user status", user)
