# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception types for the service layer plus the FastAPI
# handlers that turn them into structured JSON error bodies.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class AgriDashException(Exception):
    """
    Base exception for the AgriDash admin API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "AGRIDASH_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Resource Exceptions
# =============================================================================

class ResourceNotFoundError(AgriDashException):
    """Raised when a record ID doesn't exist in its table."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            message=f"{resource.capitalize()} not found: {resource_id}",
            code="RESOURCE_NOT_FOUND",
            status_code=404,
            suggestion=f"Check that the {resource} id is correct",
            details={"resource": resource, "id": resource_id}
        )


class AuthenticationRequiredError(AgriDashException):
    """Raised when an operation needs a signed-in user and there is none."""

    def __init__(self, action: str):
        super().__init__(
            message=f"User must be authenticated to {action}",
            code="AUTHENTICATION_REQUIRED",
            status_code=401,
            suggestion="Sign in and send the Supabase access token as a Bearer header",
            details={"action": action}
        )


class OwnershipError(AgriDashException):
    """Raised when a user tries to modify a record they don't own."""

    def __init__(self, resource: str, resource_id: str, action: str = "update"):
        super().__init__(
            message=f"You can only {action} your own {resource}s",
            code="NOT_OWNER",
            status_code=403,
            details={"resource": resource, "id": resource_id}
        )


class PayloadValidationError(AgriDashException):
    """Raised when an input fails its validation contract."""

    def __init__(self, resource: str, field_errors: dict[str, str]):
        super().__init__(
            message=f"Invalid {resource} data",
            code="VALIDATION_ERROR",
            status_code=422,
            suggestion="Fix the listed fields and submit again",
            details={"fields": field_errors}
        )
        self.field_errors = field_errors


# =============================================================================
# Upload Exceptions
# =============================================================================

class InvalidFileTypeError(AgriDashException):
    """Raised when an uploaded image has a disallowed extension."""

    def __init__(self, filename: str, allowed: list[str]):
        super().__init__(
            message=f"Invalid file type: {filename}",
            code="INVALID_FILE_TYPE",
            status_code=400,
            suggestion=f"Only these file types are supported: {', '.join(allowed)}",
            details={"filename": filename, "allowed_types": allowed}
        )


class FileTooLargeError(AgriDashException):
    """Raised when uploaded file exceeds size limit."""

    def __init__(self, size_mb: float, max_mb: int):
        super().__init__(
            message=f"File too large: {size_mb:.1f}MB (max: {max_mb}MB)",
            code="FILE_TOO_LARGE",
            status_code=413,
            suggestion=f"Upload a file smaller than {max_mb}MB",
            details={"size_mb": size_mb, "max_mb": max_mb}
        )


class StorageUploadError(AgriDashException):
    """Raised when an image upload fails for a reason other than permissions."""

    def __init__(self, path: str, error: str):
        super().__init__(
            message=f"Failed to upload file to storage: {error}",
            code="STORAGE_UPLOAD_ERROR",
            status_code=502,
            suggestion="Try again later or contact support if the issue persists",
            details={"path": path, "error": error}
        )


class RecordNotWrittenError(AgriDashException):
    """Raised when an insert returns no row, e.g. a policy silently filtered it."""

    def __init__(self, resource: str):
        super().__init__(
            message=f"The {resource} was not saved",
            code="RECORD_NOT_WRITTEN",
            status_code=502,
            suggestion="Check the table's row-level security policies for inserts",
            details={"resource": resource}
        )


# =============================================================================
# External API Exceptions
# =============================================================================

class ExternalApiError(AgriDashException):
    """Raised when the marketplace REST API answers with a non-2xx status."""

    def __init__(
        self,
        action: str,
        status: int | None,
        body: Any = None,
    ):
        message = f"Failed to {action}"
        if status is not None:
            message += f": HTTP {status}"
        super().__init__(
            message=message,
            code="EXTERNAL_API_ERROR",
            status_code=502,
            suggestion="Check that the marketplace API is reachable and the request is valid",
            details={"upstream_status": status, "upstream_body": body}
        )
        self.upstream_status = status
        self.body = body


# =============================================================================
# Exception Handlers
# =============================================================================

async def agridash_exception_handler(
    request: Request,
    exc: AgriDashException
) -> JSONResponse:
    """
    Convert AgriDashException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )
