# =============================================================================
# core/services/feed_service.py - Animal Feeds and Agri-Service Categories
# =============================================================================
# Two small lookup tables edited from the feeds screen: `feeds` (products
# for livestock, poultry and fish) and `agri_service_categories`.
# =============================================================================

import logging
from typing import Any

from app.exceptions import ResourceNotFoundError
from core.models.feed import (
    AgriServiceCategoryInput,
    AgriServiceCategoryResponse,
    AgriServiceCategoryUpdate,
    FeedInput,
    FeedResponse,
)
from lib.supabase_client import SupabaseClient
from lib.utils import utc_now_iso
from lib.validation import validate_input

logger = logging.getLogger(__name__)

FEEDS_TABLE = "feeds"
CATEGORIES_TABLE = "agri_service_categories"


def _write(table: str, resource: str, row_id: int | None, row: dict[str, Any]) -> dict[str, Any]:
    """Insert (row_id None) or update one row and return it."""
    client = SupabaseClient.get_client()

    try:
        if row_id is None:
            response = client.table(table).insert(row).execute()
        else:
            response = client.table(table).update(row).eq("id", row_id).execute()
    except Exception as e:
        logger.error(f"Error saving {resource} {row_id or ''}: {e}")
        raise

    written = SupabaseClient.first_row(response)
    if written is None:
        raise ResourceNotFoundError(resource, str(row_id))
    return written


def _delete(table: str, resource: str, row_id: int) -> None:
    client = SupabaseClient.get_client()

    try:
        client.table(table).delete().eq("id", row_id).execute()
    except Exception as e:
        logger.error(f"Error deleting {resource} {row_id}: {e}")
        raise

    logger.info(f"Deleted {resource} {row_id}")


class FeedService:
    """Service for feeds and agri-service categories."""

    # -------------------------------------------------------------------------
    # Feeds
    # -------------------------------------------------------------------------

    @staticmethod
    def list_feeds() -> list[FeedResponse]:
        """Feeds, newest first."""
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table(FEEDS_TABLE)
                .select("*")
                .order("created_at", desc=True)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error fetching feeds: {e}")
            raise

        return [FeedResponse(**row) for row in response.data or []]

    @staticmethod
    def create_feed(data: FeedInput | dict[str, Any]) -> FeedResponse:
        feed = validate_input(FeedInput, data, "feed")
        return FeedResponse(**_write(FEEDS_TABLE, "feed", None, feed.model_dump(mode="json")))

    @staticmethod
    def update_feed(feed_id: int, data: FeedInput | dict[str, Any]) -> FeedResponse:
        feed = validate_input(FeedInput, data, "feed")
        row = feed.model_dump(mode="json")
        row["updated_at"] = utc_now_iso()
        return FeedResponse(**_write(FEEDS_TABLE, "feed", feed_id, row))

    @staticmethod
    def delete_feed(feed_id: int) -> None:
        _delete(FEEDS_TABLE, "feed", feed_id)

    # -------------------------------------------------------------------------
    # Agri-Service Categories
    # -------------------------------------------------------------------------

    @staticmethod
    def list_service_categories() -> list[AgriServiceCategoryResponse]:
        client = SupabaseClient.get_client()

        try:
            response = client.table(CATEGORIES_TABLE).select("*").order("name").execute()
        except Exception as e:
            logger.error(f"Error fetching agri-service categories: {e}")
            raise

        return [AgriServiceCategoryResponse(**row) for row in response.data or []]

    @staticmethod
    def create_service_category(
        data: AgriServiceCategoryInput | dict[str, Any],
    ) -> AgriServiceCategoryResponse:
        category = validate_input(AgriServiceCategoryInput, data, "agri-service category")
        return AgriServiceCategoryResponse(
            **_write(CATEGORIES_TABLE, "agri-service category", None, category.model_dump())
        )

    @staticmethod
    def update_service_category(
        category_id: int,
        data: AgriServiceCategoryUpdate | dict[str, Any],
    ) -> AgriServiceCategoryResponse:
        update = validate_input(AgriServiceCategoryUpdate, data, "agri-service category")
        return AgriServiceCategoryResponse(
            **_write(
                CATEGORIES_TABLE,
                "agri-service category",
                category_id,
                update.model_dump(exclude_unset=True),
            )
        )

    @staticmethod
    def delete_service_category(category_id: int) -> None:
        _delete(CATEGORIES_TABLE, "agri-service category", category_id)
