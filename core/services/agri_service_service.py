# =============================================================================
# core/services/agri_service_service.py - Agri-Service Listings (REST)
# =============================================================================
# Third-party agricultural services (tractor hire, vets, extension
# officers, ...) on the marketplace API under agriservices/services/.
# Moderators can toggle a listing's active and verified flags.
# =============================================================================

import logging
from typing import Any

from app.auth.models import AuthUser
from core.models.agri_service import AgriServiceInput, AgriServiceSearch
from lib.api_client import ApiClient, extract_results
from lib.validation import validate_input

logger = logging.getLogger(__name__)

BASE_PATH = "agriservices/services/"


def _token(user: AuthUser | None) -> str | None:
    return user.access_token if user else None


class AgriServiceService:
    """Service for agri-service listings."""

    @staticmethod
    def list_services() -> list[dict[str, Any]]:
        return extract_results(
            ApiClient.request("GET", BASE_PATH, action="fetch agri-services")
        )

    @staticmethod
    def get_service(service_id: str) -> dict[str, Any]:
        return ApiClient.request("GET", f"{BASE_PATH}{service_id}/", action="fetch agri-service")

    @staticmethod
    def create_service(
        data: AgriServiceInput | dict[str, Any],
        user: AuthUser | None = None,
    ) -> dict[str, Any]:
        service = validate_input(AgriServiceInput, data, "agri-service")
        return ApiClient.request(
            "POST",
            BASE_PATH,
            action="create agri-service",
            json=service.model_dump(exclude_none=True),
            access_token=_token(user),
        )

    @staticmethod
    def update_service(
        service_id: str,
        data: AgriServiceInput | dict[str, Any],
        user: AuthUser | None = None,
    ) -> dict[str, Any]:
        service = validate_input(AgriServiceInput, data, "agri-service")
        return ApiClient.request(
            "PUT",
            f"{BASE_PATH}{service_id}/",
            action="update agri-service",
            json=service.model_dump(exclude_none=True),
            access_token=_token(user),
        )

    @staticmethod
    def delete_service(service_id: str, user: AuthUser | None = None) -> None:
        ApiClient.request(
            "DELETE",
            f"{BASE_PATH}{service_id}/",
            action="delete agri-service",
            access_token=_token(user),
        )
        logger.info(f"Deleted agri-service {service_id}")

    @staticmethod
    def _toggle(service_id: str, flag: str, user: AuthUser | None) -> dict[str, Any]:
        """Read the listing, then PATCH the inverted flag."""
        current = AgriServiceService.get_service(service_id)
        new_value = not bool(current.get(flag))
        updated = ApiClient.request(
            "PATCH",
            f"{BASE_PATH}{service_id}/",
            action=f"update agri-service {flag}",
            json={flag: new_value},
            access_token=_token(user),
        )
        logger.info(f"Set {flag}={new_value} on agri-service {service_id}")
        return updated

    @staticmethod
    def toggle_active(service_id: str, user: AuthUser | None = None) -> dict[str, Any]:
        return AgriServiceService._toggle(service_id, "is_active", user)

    @staticmethod
    def toggle_verified(service_id: str, user: AuthUser | None = None) -> dict[str, Any]:
        return AgriServiceService._toggle(service_id, "is_verified", user)

    @staticmethod
    def get_stats() -> dict[str, Any]:
        return ApiClient.request("GET", f"{BASE_PATH}stats/", action="fetch agri-service stats")

    @staticmethod
    def get_categories_summary() -> list[dict[str, Any]]:
        return ApiClient.request(
            "GET", f"{BASE_PATH}categories/", action="fetch agri-service categories"
        )

    @staticmethod
    def get_locations_summary() -> list[dict[str, Any]]:
        return ApiClient.request(
            "GET", f"{BASE_PATH}locations/", action="fetch agri-service locations"
        )

    @staticmethod
    def search_services(filters: AgriServiceSearch) -> list[dict[str, Any]]:
        body = ApiClient.request(
            "GET",
            f"{BASE_PATH}search/",
            action="search agri-services",
            params=filters.model_dump(exclude_none=True),
        )
        return extract_results(body)
