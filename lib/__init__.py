# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable clients and helpers:
# - supabase_client.py: Typed Supabase wrapper for table access
# - api_client.py: httpx client for the marketplace REST API
# - validation.py: Declarative input validation (field -> message)
# - utils.py: Shared utilities (UUIDs, timestamps, file names)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError, is_no_rows_error
from lib.api_client import ApiClient, extract_results
from lib.validation import validate_input, collect_field_errors
from lib.utils import file_extension, normalize_uuid, random_name, utc_now_iso

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    "is_no_rows_error",
    # REST
    "ApiClient",
    "extract_results",
    # Validation
    "validate_input",
    "collect_field_errors",
    # Utils
    "file_extension",
    "normalize_uuid",
    "random_name",
    "utc_now_iso",
]
