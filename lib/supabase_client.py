# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper around the Supabase client.
# It implements the singleton pattern to reuse a single client connection
# and provides the small set of helpers every resource service needs:
# - Fetching one row by id (None when PostgREST reports "no rows")
# - Recognising PostgREST "no rows" errors
# - Taking the first row out of an insert/update response
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   crop = SupabaseClient.fetch_row("crops", crop_id)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from supabase import create_client, Client

from app.config import settings
from app.exceptions import RecordNotWrittenError

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST error code returned by .single() when the query matched no rows
NO_ROWS_CODE = "PGRST116"


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Provides actionable error messages: errors should tell HOW to fix,
    not just WHAT failed.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


def is_no_rows_error(error: BaseException) -> bool:
    """
    Check whether an exception is PostgREST's "no rows" response.

    postgrest-py raises APIError with code PGRST116 when .single()
    matches nothing. Older client versions only carry the code in the
    message text, so both are checked.
    """
    if getattr(error, "code", None) == NO_ROWS_CODE:
        return True
    return NO_ROWS_CODE in str(error)


class SupabaseClient:
    """
    Typed wrapper for Supabase database operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        client = SupabaseClient.get_client()
        rows = client.table("crops").select("*").order("name").execute().data

        crop = SupabaseClient.fetch_row("crops", "550e8400-...")
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        This is appropriate for server-side operations.

        Returns:
            Client: Supabase client instance

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached client (used by tests to swap in a double)."""
        cls._instance = None

    @classmethod
    def _normalize_uuid(cls, uuid_value: str | UUID) -> str:
        """Convert UUID to string for queries."""
        return str(uuid_value) if isinstance(uuid_value, UUID) else uuid_value

    # -------------------------------------------------------------------------
    # Row Helpers
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_row(
        cls,
        table: str,
        row_id: str | int | UUID,
        columns: str = "*",
    ) -> dict[str, Any] | None:
        """
        Fetch a single row by its id column.

        Args:
            table: Table name
            row_id: Value of the id column
            columns: Column list for the select (default: all)

        Returns:
            Row dict, or None if no row matched

        Raises:
            Exception: Any other backend error is propagated unchanged
        """
        client = cls.get_client()
        if isinstance(row_id, UUID):
            row_id = cls._normalize_uuid(row_id)

        try:
            response = (
                client.table(table)
                .select(columns)
                .eq("id", row_id)
                .single()
                .execute()
            )
            return response.data

        except Exception as e:
            if is_no_rows_error(e):
                return None
            logger.error(f"Failed to fetch {table} row {row_id}: {e}")
            raise

    @staticmethod
    def first_row(response: Any) -> dict[str, Any] | None:
        """
        Take the written row out of an insert/update response.

        insert(...).execute() returns a list of rows; a chained .single()
        returns the row itself. Both shapes are accepted.
        """
        data = getattr(response, "data", None)
        if isinstance(data, list):
            return data[0] if data else None
        return data

    @classmethod
    def inserted_row(cls, response: Any, resource: str) -> dict[str, Any]:
        """
        Like first_row(), for inserts that must hand back the new row.

        Raises:
            RecordNotWrittenError: If the response carries no row
        """
        row = cls.first_row(response)
        if row is None:
            logger.error(f"Insert of {resource} returned no row")
            raise RecordNotWrittenError(resource)
        return row
