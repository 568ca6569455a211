# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# Sign-in happens client-side with Supabase Auth. These routes let the
# dashboard check what the API sees for its current token.
# =============================================================================

from fastapi import APIRouter, Depends

from app.auth.dependencies import get_current_user
from app.auth.models import AuthUser

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.get("/me")
async def get_current_user_info(
    user: AuthUser = Depends(get_current_user)
) -> dict:
    """
    Identity carried by the current access token.

    Raises:
        401: If not authenticated
    """
    return {
        "id": user.user_id,
        "email": user.email,
        "role": user.role,
    }


@router.get("/verify")
async def verify_token(
    user: AuthUser = Depends(get_current_user)
) -> dict:
    """Check that a stored token is still valid."""
    return {
        "valid": True,
        "user_id": user.user_id,
        "email": user.email,
    }
