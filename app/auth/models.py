# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# The signed-in dashboard user as seen by the service layer.
# =============================================================================

from uuid import UUID
from typing import Optional

from pydantic import BaseModel, ConfigDict


class AuthUser(BaseModel):
    """
    Authenticated user extracted from a Supabase JWT.

    access_token is the raw bearer token. Services forward it to the
    marketplace REST API, which authenticates with the same Supabase
    session.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    email: Optional[str] = None
    role: Optional[str] = None
    access_token: Optional[str] = None

    @property
    def user_id(self) -> str:
        """User id as the string stored in owner columns and storage paths."""
        return str(self.id)
