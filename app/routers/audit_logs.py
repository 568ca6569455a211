# =============================================================================
# app/routers/audit_logs.py - Audit Log Endpoints
# =============================================================================

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Query

from app.dependencies import CurrentUser
from core.models.audit import AuditLogPage, AuditLogQuery
from core.services.audit_service import AuditService

router = APIRouter()


@router.get("", response_model=AuditLogPage)
async def list_audit_logs(
    user: CurrentUser,
    page: Annotated[int, Query(ge=1, description="Page number")] = 1,
    page_size: Annotated[int, Query(ge=1, le=100, description="Items per page")] = 20,
    action: Annotated[str | None, Query()] = None,
    model_name: Annotated[str | None, Query()] = None,
    user_email: Annotated[str | None, Query()] = None,
    date_from: Annotated[date | None, Query()] = None,
    date_to: Annotated[date | None, Query()] = None,
    has_changes: Annotated[bool | None, Query()] = None,
):
    """One page of audit entries matching the filters."""
    query = AuditLogQuery(
        page=page,
        page_size=page_size,
        action=action,
        model_name=model_name,
        user_email=user_email,
        date_from=date_from,
        date_to=date_to,
        has_changes=has_changes,
    )
    return AuditService.list_logs(query, user)


@router.get("/stats")
async def get_audit_stats(user: CurrentUser):
    return AuditService.get_stats(user)


@router.get("/recent")
async def get_recent_activity(
    user: CurrentUser,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
):
    return AuditService.get_recent_activity(user, limit)


@router.get("/user-activity")
async def get_user_activity(
    user: CurrentUser,
    user_email: Annotated[str, Query(description="Whose activity")],
):
    return AuditService.get_user_activity(user_email, user)


@router.get("/model-activity")
async def get_model_activity(
    user: CurrentUser,
    model_name: Annotated[str, Query(description="Model (table) name")],
):
    return AuditService.get_model_activity(model_name, user)
