# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the dashboard's business logic:
# - models/: Pydantic schemas and validation contracts per resource
# - services/: One service per resource over Supabase or the REST API,
#   plus the attachment and default-address protocols
#
# Code in this package should NOT import from FastAPI routers.
# This keeps the logic testable without an HTTP client.
# =============================================================================
