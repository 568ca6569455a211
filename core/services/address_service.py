# =============================================================================
# core/services/address_service.py - Shipping Addresses
# =============================================================================
# Keeps "at most one default address per user" across create, update and
# delete. Each change is a sequence of separate table writes: the old
# default is always cleared before the new one is set, so a failure in
# between can leave a user with no default but never with two.
#
# Promotion after deleting the default picks the most recently created
# remaining address.
# =============================================================================

import logging
from typing import Any

from app.exceptions import ResourceNotFoundError
from core.models.address import AddressInput, AddressResponse, AddressUpdate
from lib.supabase_client import SupabaseClient, is_no_rows_error
from lib.utils import utc_now_iso
from lib.validation import validate_input

logger = logging.getLogger(__name__)

TABLE = "addresses"


class AddressService:
    """Service for address operations and the default-address invariant."""

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @staticmethod
    def list_addresses(user_id: str) -> list[AddressResponse]:
        """A user's addresses, default first, then newest first."""
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table(TABLE)
                .select("*")
                .eq("user_id", user_id)
                .order("is_default", desc=True)
                .order("created_at", desc=True)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error fetching addresses for user {user_id}: {e}")
            raise

        return [AddressResponse(**row) for row in response.data or []]

    @staticmethod
    def get_address(address_id: str) -> AddressResponse:
        row = SupabaseClient.fetch_row(TABLE, address_id)
        if row is None:
            raise ResourceNotFoundError("address", address_id)
        return AddressResponse(**row)

    @staticmethod
    def get_default_address(user_id: str) -> AddressResponse | None:
        """
        The user's default address.

        Returns:
            The address, or None if the user has no default
        """
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table(TABLE)
                .select("*")
                .eq("user_id", user_id)
                .eq("is_default", True)
                .single()
                .execute()
            )
        except Exception as e:
            if is_no_rows_error(e):
                return None
            logger.error(f"Error fetching default address for user {user_id}: {e}")
            raise

        return AddressResponse(**response.data) if response.data else None

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    @staticmethod
    def create_address(data: AddressInput | dict[str, Any]) -> AddressResponse:
        """
        Create an address.

        The user's first address is always the default. Otherwise the new
        address becomes default only when requested, after the current
        default has been cleared.
        """
        address = validate_input(AddressInput, data, "address")
        client = SupabaseClient.get_client()

        try:
            existing = (
                client.table(TABLE)
                .select("id")
                .eq("user_id", address.user_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error checking addresses for user {address.user_id}: {e}")
            raise

        is_first = not existing.data
        make_default = address.is_default or is_first

        if make_default and not is_first:
            AddressService._clear_default(address.user_id)

        row = address.model_dump()
        row["is_default"] = make_default

        try:
            response = client.table(TABLE).insert(row).execute()
        except Exception as e:
            logger.error(f"Error creating address for user {address.user_id}: {e}")
            raise

        created = SupabaseClient.inserted_row(response, "address")
        logger.info(
            f"Created address {created['id']} for user {address.user_id} "
            f"(default={make_default})"
        )
        return AddressResponse(**created)

    @staticmethod
    def update_address(
        address_id: str,
        data: AddressUpdate | dict[str, Any],
    ) -> AddressResponse:
        """
        Apply a partial update.

        Setting is_default to true first clears the owner's current default.
        Setting it to false is written as-is and may leave no default.
        """
        update = validate_input(AddressUpdate, data, "address")
        changes = update.model_dump(exclude_unset=True)

        if changes.get("is_default") is True:
            owner = SupabaseClient.fetch_row(TABLE, address_id, columns="user_id")
            if owner is None:
                raise ResourceNotFoundError("address", address_id)
            AddressService._clear_default(owner["user_id"], keep_id=address_id)

        changes["updated_at"] = utc_now_iso()
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table(TABLE)
                .update(changes)
                .eq("id", address_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error updating address {address_id}: {e}")
            raise

        updated = SupabaseClient.first_row(response)
        if updated is None:
            raise ResourceNotFoundError("address", address_id)
        return AddressResponse(**updated)

    @staticmethod
    def set_default_address(address_id: str) -> AddressResponse:
        """Make an address its owner's default."""
        return AddressService.update_address(address_id, {"is_default": True})

    @staticmethod
    def delete_address(address_id: str) -> AddressResponse | None:
        """
        Delete an address.

        If it was the default, the owner's most recently created remaining
        address becomes the default.

        Returns:
            The promoted address, or None if nothing was promoted
        """
        existing = AddressService.get_address(address_id)
        client = SupabaseClient.get_client()

        try:
            client.table(TABLE).delete().eq("id", address_id).execute()
        except Exception as e:
            logger.error(f"Error deleting address {address_id}: {e}")
            raise

        logger.info(f"Deleted address {address_id}")

        if not existing.is_default:
            return None
        return AddressService._promote_latest(existing.user_id)

    # -------------------------------------------------------------------------
    # Default Bookkeeping
    # -------------------------------------------------------------------------

    @staticmethod
    def _clear_default(user_id: str, keep_id: str | None = None) -> None:
        """Unset is_default on the user's addresses (except keep_id)."""
        client = SupabaseClient.get_client()

        query = (
            client.table(TABLE)
            .update({"is_default": False, "updated_at": utc_now_iso()})
            .eq("user_id", user_id)
            .eq("is_default", True)
        )
        if keep_id is not None:
            query = query.neq("id", keep_id)

        try:
            query.execute()
        except Exception as e:
            logger.error(f"Error clearing default address for user {user_id}: {e}")
            raise

    @staticmethod
    def _promote_latest(user_id: str) -> AddressResponse | None:
        """Make the user's newest address the default, if there is one."""
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table(TABLE)
                .select("id")
                .eq("user_id", user_id)
                .order("created_at", desc=True)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error looking up addresses for user {user_id}: {e}")
            raise

        if not response.data:
            logger.info(f"User {user_id} has no addresses left, no default to promote")
            return None

        promoted_id = response.data[0]["id"]
        try:
            updated = (
                client.table(TABLE)
                .update({"is_default": True, "updated_at": utc_now_iso()})
                .eq("id", promoted_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error promoting address {promoted_id} to default: {e}")
            raise

        logger.info(f"Promoted address {promoted_id} to default for user {user_id}")
        row = SupabaseClient.first_row(updated)
        return AddressResponse(**row) if row else None
