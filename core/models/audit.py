# =============================================================================
# core/models/audit.py - Audit Log Query Schemas (REST)
# =============================================================================

from datetime import date

from pydantic import BaseModel, Field


class AuditLogQuery(BaseModel):
    """Filters and paging for /audit/logs/."""

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1, le=100)
    action: str | None = None
    model_name: str | None = None
    user_email: str | None = None
    date_from: date | None = None
    date_to: date | None = None
    has_changes: bool | None = None


class AuditLogPage(BaseModel):
    """One page of audit log entries."""

    results: list[dict]
    count: int = 0
