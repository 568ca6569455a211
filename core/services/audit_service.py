# =============================================================================
# core/services/audit_service.py - Audit Logs (REST)
# =============================================================================
# Read-only access to the marketplace API's audit trail. Every endpoint
# requires the caller's access token.
# =============================================================================

from typing import Any

from app.auth.models import AuthUser
from core.models.audit import AuditLogPage, AuditLogQuery
from lib.api_client import ApiClient

BASE_PATH = "audit/logs/"


class AuditService:
    """Service for audit log queries."""

    @staticmethod
    def _get(path: str, action: str, user: AuthUser | None, params: dict | None = None) -> Any:
        return ApiClient.request(
            "GET",
            f"{BASE_PATH}{path}",
            action=action,
            params=params,
            access_token=user.access_token if user else None,
            require_auth=True,
        )

    @staticmethod
    def list_logs(query: AuditLogQuery, user: AuthUser | None) -> AuditLogPage:
        """One filtered page of audit entries."""
        body = AuditService._get(
            "",
            "fetch audit logs",
            user,
            params=query.model_dump(mode="json", exclude_none=True),
        )
        if isinstance(body, list):
            return AuditLogPage(results=body, count=len(body))
        body = body or {}
        results = body.get("results") or []
        return AuditLogPage(results=results, count=body.get("count", len(results)))

    @staticmethod
    def get_stats(user: AuthUser | None) -> dict[str, Any]:
        return AuditService._get("stats/", "fetch audit stats", user)

    @staticmethod
    def get_recent_activity(user: AuthUser | None, limit: int = 10) -> list[dict[str, Any]]:
        return AuditService._get(
            "recent_activity/", "fetch recent activity", user, params={"limit": limit}
        )

    @staticmethod
    def get_user_activity(user_email: str, user: AuthUser | None) -> list[dict[str, Any]]:
        return AuditService._get(
            "user_activity/", "fetch user activity", user, params={"user_email": user_email}
        )

    @staticmethod
    def get_model_activity(model_name: str, user: AuthUser | None) -> list[dict[str, Any]]:
        return AuditService._get(
            "model_activity/", "fetch model activity", user, params={"model_name": model_name}
        )
