# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the AgriDash admin web API:
# - main.py: App entry point, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - auth/: Supabase JWT verification
# - routers/: API endpoint definitions organized by dashboard page
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================
