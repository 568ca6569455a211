# =============================================================================
# core/services/category_service.py - Farming Categories (REST)
# =============================================================================

import logging
from typing import Any

from app.auth.models import AuthUser
from core.models.category import CategoryInput
from lib.api_client import ApiClient, extract_results
from lib.validation import validate_input

logger = logging.getLogger(__name__)

BASE_PATH = "categories/"


class CategoryService:

    @staticmethod
    def list_categories() -> list[dict[str, Any]]:
        return extract_results(
            ApiClient.request("GET", BASE_PATH, action="fetch categories")
        )

    @staticmethod
    def get_category(category_id: str) -> dict[str, Any]:
        return ApiClient.request("GET", f"{BASE_PATH}{category_id}/", action="fetch category")

    @staticmethod
    def create_category(
        data: CategoryInput | dict[str, Any],
        user: AuthUser | None = None,
    ) -> dict[str, Any]:
        category = validate_input(CategoryInput, data, "category")
        return ApiClient.request(
            "POST",
            BASE_PATH,
            action="create category",
            json=category.model_dump(exclude_none=True),
            access_token=user.access_token if user else None,
        )

    @staticmethod
    def update_category(
        category_id: str,
        data: CategoryInput | dict[str, Any],
        user: AuthUser | None = None,
    ) -> dict[str, Any]:
        category = validate_input(CategoryInput, data, "category")
        return ApiClient.request(
            "PUT",
            f"{BASE_PATH}{category_id}/",
            action="update category",
            json=category.model_dump(exclude_none=True),
            access_token=user.access_token if user else None,
        )

    @staticmethod
    def delete_category(category_id: str, user: AuthUser | None = None) -> None:
        ApiClient.request(
            "DELETE",
            f"{BASE_PATH}{category_id}/",
            action="delete category",
            access_token=user.access_token if user else None,
        )
        logger.info(f"Deleted category {category_id}")
