# =============================================================================
# lib/validation.py - Declarative Input Validation
# =============================================================================
# Input models declare their constraints with pydantic Field(...) and their
# user-facing messages in an `error_messages` class attribute:
#
#   class MarketPriceInput(BaseModel):
#       error_messages: ClassVar[dict[str, str]] = {
#           "crop_name": "Crop is required",
#           "price": "Price must be positive",
#       }
#       crop_name: str = Field(..., min_length=1)
#       price: float = Field(..., gt=0)
#
# validate_input() runs the model and, on failure, raises
# PayloadValidationError with one message per failing field. Services call
# it before any network request so invalid input never reaches the backend.
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from app.exceptions import PayloadValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def collect_field_errors(
    model_cls: type[BaseModel],
    error: ValidationError,
) -> dict[str, str]:
    """
    Turn a pydantic ValidationError into {field: message}.

    The first error per top-level field wins. Fields listed in the model's
    `error_messages` get that message; others keep pydantic's own text.
    """
    messages: dict[str, str] = getattr(model_cls, "error_messages", {}) or {}
    field_errors: dict[str, str] = {}

    for err in error.errors():
        loc = err.get("loc") or ()
        field = str(loc[0]) if loc else "__root__"
        if field in field_errors:
            continue
        field_errors[field] = messages.get(field, err.get("msg", "Invalid value"))

    return field_errors


def validate_input(
    model_cls: type[ModelT],
    data: BaseModel | dict[str, Any],
    resource: str,
) -> ModelT:
    """
    Validate raw input against a model's contract.

    Args:
        model_cls: The input model to validate against
        data: A dict, or a model instance (re-validated as a dict)
        resource: Resource name used in the error message

    Returns:
        The validated model instance

    Raises:
        PayloadValidationError: If any field fails its constraint
    """
    if isinstance(data, BaseModel):
        data = data.model_dump(exclude_unset=True)

    try:
        return model_cls.model_validate(data)
    except ValidationError as e:
        field_errors = collect_field_errors(model_cls, e)
        logger.info(f"Rejected {resource} input: {field_errors}")
        raise PayloadValidationError(resource, field_errors)
