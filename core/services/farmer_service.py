# =============================================================================
# core/services/farmer_service.py - Farmer Registry
# =============================================================================
# Farmers are the mobile app's `users` rows. The dashboard stamps
# created_at/updated_at itself.
# =============================================================================

import logging
from typing import Any

from app.exceptions import ResourceNotFoundError
from core.models.farmer import FarmerInput, FarmerResponse, FarmerUpdate
from lib.supabase_client import SupabaseClient
from lib.utils import utc_now_iso
from lib.validation import validate_input

logger = logging.getLogger(__name__)

TABLE = "users"


class FarmerService:

    @staticmethod
    def list_farmers() -> list[FarmerResponse]:
        client = SupabaseClient.get_client()

        try:
            response = client.table(TABLE).select("*").order("full_name").execute()
        except Exception as e:
            logger.error(f"Error fetching farmers: {e}")
            raise

        return [FarmerResponse(**row) for row in response.data or []]

    @staticmethod
    def get_farmer(farmer_id: str) -> FarmerResponse:
        row = SupabaseClient.fetch_row(TABLE, farmer_id)
        if row is None:
            raise ResourceNotFoundError("farmer", farmer_id)
        return FarmerResponse(**row)

    @staticmethod
    def create_farmer(data: FarmerInput | dict[str, Any]) -> FarmerResponse:
        farmer = validate_input(FarmerInput, data, "farmer")
        now = utc_now_iso()

        row = farmer.model_dump(mode="json")
        row["created_at"] = now
        row["updated_at"] = now

        client = SupabaseClient.get_client()
        try:
            response = client.table(TABLE).insert(row).execute()
        except Exception as e:
            logger.error(f"Error creating farmer {farmer.full_name}: {e}")
            raise

        created = SupabaseClient.inserted_row(response, "farmer")
        logger.info(f"Registered farmer {created['id']}")
        return FarmerResponse(**created)

    @staticmethod
    def update_farmer(farmer_id: str, data: FarmerUpdate | dict[str, Any]) -> FarmerResponse:
        update = validate_input(FarmerUpdate, data, "farmer")
        changes = update.model_dump(mode="json", exclude_unset=True)
        changes["updated_at"] = utc_now_iso()

        client = SupabaseClient.get_client()
        try:
            response = client.table(TABLE).update(changes).eq("id", farmer_id).execute()
        except Exception as e:
            logger.error(f"Error updating farmer {farmer_id}: {e}")
            raise

        updated = SupabaseClient.first_row(response)
        if updated is None:
            raise ResourceNotFoundError("farmer", farmer_id)
        return FarmerResponse(**updated)

    @staticmethod
    def delete_farmer(farmer_id: str) -> None:
        client = SupabaseClient.get_client()

        try:
            client.table(TABLE).delete().eq("id", farmer_id).execute()
        except Exception as e:
            logger.error(f"Error deleting farmer {farmer_id}: {e}")
            raise

        logger.info(f"Deleted farmer {farmer_id}")
