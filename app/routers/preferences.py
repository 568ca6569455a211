# =============================================================================
# app/routers/preferences.py - Dashboard Preference Endpoints
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Path

from app.dependencies import PreferencesDep
from core.models.preferences import DashboardPreferences, PreferencesUpdate
from lib.validation import validate_input

router = APIRouter()


@router.get("", response_model=DashboardPreferences)
async def get_preferences(store: PreferencesDep):
    return store.load()


@router.patch("", response_model=DashboardPreferences)
async def update_preferences(
    store: PreferencesDep,
    payload: Annotated[dict[str, Any], Body()],
):
    """Change several known preferences at once."""
    changes = validate_input(PreferencesUpdate, payload, "preferences")
    return store.update(changes)


@router.put("/{key}", response_model=DashboardPreferences)
async def set_preference(
    key: Annotated[str, Path(description="Preference name")],
    store: PreferencesDep,
    value: Annotated[Any, Body(embed=True)],
):
    """Set one preference, e.g. PUT /preferences/dark_mode {"value": true}."""
    return store.set_preference(key, value)
