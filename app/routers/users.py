# =============================================================================
# app/routers/users.py - Dashboard User Management Endpoints
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Path, Query

from app.dependencies import CurrentUser
from core.models.user import UserFilters
from core.services.user_service import UserService

router = APIRouter()


@router.get("")
async def list_users(
    user: CurrentUser,
    search: Annotated[str | None, Query(description="Email or name contains")] = None,
    role: Annotated[str, Query(description="Role or 'all'")] = "all",
    status: Annotated[str, Query(description="active, inactive or 'all'")] = "all",
):
    filters = UserFilters(search=search, role=role, status=status)
    return UserService.list_users(user, filters)


@router.get("/stats")
async def get_user_stats(user: CurrentUser):
    return UserService.get_stats(user)


@router.post("", status_code=201)
async def create_user(
    user: CurrentUser,
    payload: Annotated[dict[str, Any], Body()],
):
    return UserService.create_user(payload, user)


@router.post("/{user_id}/role")
async def update_user_role(
    user_id: Annotated[str, Path(description="User id")],
    user: CurrentUser,
    payload: Annotated[dict[str, Any], Body()],
):
    return UserService.update_role(user_id, payload, user)


@router.post("/{user_id}/toggle-status")
async def toggle_user_status(
    user_id: Annotated[str, Path(description="User id")],
    user: CurrentUser,
):
    """Activate a deactivated user, or the other way round."""
    return UserService.toggle_status(user_id, user)
