# =============================================================================
# lib/api_client.py - Marketplace REST API Client
# =============================================================================
# Thin JSON-over-HTTP client for the separate marketplace API server
# (market prices, categories, agri-services, audit logs, user management).
#
# Every call:
# - builds the URL from settings.api_base_url + a relative path
# - forwards the caller's Supabase access token as a Bearer header when
#   the endpoint needs it
# - raises ExternalApiError on any non-2xx response
#
# Usage:
#   from lib.api_client import ApiClient
#   prices = ApiClient.request("GET", "farming/market-prices/", action="fetch market prices")
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

import httpx

from app.config import settings
from app.exceptions import AuthenticationRequiredError, ExternalApiError

logger = logging.getLogger(__name__)


class ApiClient:
    """
    Shared httpx client for the marketplace REST API.

    Like SupabaseClient, a single instance is cached on the class so the
    connection pool is reused. Tests replace it via set_client() with an
    httpx.Client backed by httpx.MockTransport.
    """

    _client: httpx.Client | None = None

    @classmethod
    def get_client(cls) -> httpx.Client:
        """Get or create the shared httpx client."""
        if cls._client is None:
            cls._client = httpx.Client(
                base_url=settings.api_base_url,
                timeout=settings.API_TIMEOUT_SECONDS,
            )
            logger.info(f"Marketplace API client initialized for {settings.api_base_url}")
        return cls._client

    @classmethod
    def set_client(cls, client: httpx.Client | None) -> None:
        """Replace the shared client (None drops it)."""
        cls._client = client

    @staticmethod
    def auth_headers(access_token: str | None, action: str) -> dict[str, str]:
        """
        Build the Authorization header for an authenticated call.

        Raises:
            AuthenticationRequiredError: If there is no access token
        """
        if not access_token:
            raise AuthenticationRequiredError(action)
        return {"Authorization": f"Bearer {access_token}"}

    @staticmethod
    def _clean_params(params: dict[str, Any] | None) -> dict[str, str] | None:
        """Drop unset query parameters and stringify the rest."""
        if not params:
            return None
        cleaned = {}
        for key, value in params.items():
            if value is None or value == "":
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            cleaned[key] = str(value)
        return cleaned or None

    @staticmethod
    def _error_body(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text or None

    @classmethod
    def request(
        cls,
        method: str,
        path: str,
        action: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        access_token: str | None = None,
        require_auth: bool = False,
    ) -> Any:
        """
        Issue one request against the marketplace API.

        Args:
            method: HTTP method
            path: Path relative to /api/v1/ (e.g. "categories/12/")
            action: Human phrase used in errors ("create category")
            params: Query parameters; None/empty values are skipped
            json: JSON body
            access_token: Caller's Supabase access token
            require_auth: Fail before sending if there is no token

        Returns:
            Decoded JSON body, or None for empty (e.g. 204) responses

        Raises:
            AuthenticationRequiredError: require_auth and no token
            ExternalApiError: Non-2xx status or transport failure
        """
        headers: dict[str, str] = {}
        if require_auth:
            headers.update(cls.auth_headers(access_token, action))
        elif access_token:
            headers["Authorization"] = f"Bearer {access_token}"

        client = cls.get_client()

        try:
            response = client.request(
                method,
                path,
                params=cls._clean_params(params),
                json=json,
                headers=headers,
            )
        except httpx.HTTPError as e:
            logger.error(f"Error trying to {action}: {e}")
            raise ExternalApiError(action, None, str(e))

        if response.is_error:
            body = cls._error_body(response)
            logger.error(f"Error trying to {action}: HTTP {response.status_code} {body}")
            raise ExternalApiError(action, response.status_code, body)

        if not response.content:
            return None
        return response.json()


def extract_results(body: Any) -> list[dict[str, Any]]:
    """Rows from a list response or a paginated {"results": [...]} one."""
    if body is None:
        return []
    if isinstance(body, dict):
        return list(body.get("results") or [])
    return list(body)
