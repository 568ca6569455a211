# =============================================================================
# core/services/activity_service.py - Dashboard Activity Feed
# =============================================================================
# Appends entries to the `activity_log` table shown on the dashboard home.
# Logging an activity must never break the operation that triggered it, so
# failures are logged and swallowed here.
# =============================================================================

import logging

from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

TABLE = "activity_log"


class ActivityService:

    @staticmethod
    def log_activity(activity_type: str, description: str, user_id: str | None = None) -> bool:
        """
        Record one activity entry.

        Returns:
            True if the entry was written, False if the insert failed
        """
        try:
            client = SupabaseClient.get_client()
            client.table(TABLE).insert({
                "type": activity_type,
                "description": description,
                "user_id": user_id,
            }).execute()
            return True

        except Exception as e:
            logger.warning(f"Could not record activity '{activity_type}': {e}")
            return False
