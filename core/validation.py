# =============================================================================
# core/validation.py - Schema Validation Entry Point
# =============================================================================
# One function turns untyped input (parsed form fields) into a validated
# model, or raises ValidationError with every violated rule in one message.
# =============================================================================

import logging
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.exceptions import ValidationError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _describe(error: dict[str, Any]) -> str:
    """Human-readable message for one pydantic error entry."""
    if error["type"] == "missing":
        field = ".".join(str(part) for part in error["loc"])
        return f"{field} is required"
    if error["type"] == "value_error":
        # Rule messages are shown as written, without pydantic's "Value error, " prefix
        return str(error["ctx"]["error"])
    return error["msg"]


def validate_with_schema(schema: type[SchemaT], data: Any) -> SchemaT:
    """
    Validate untyped input against a schema.

    Args:
        schema: Pydantic model class describing the accepted shape
        data: Mapping of raw values (e.g., form fields)

    Returns:
        The validated (and coerced) model instance

    Raises:
        ValidationError: With all rule messages joined by ", "

    Example:
        fields = validate_with_schema(ProductInput, {"name": "Chair", ...})
    """
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        errors = [_describe(error) for error in e.errors()]
        logger.debug(f"{schema.__name__} validation failed: {errors}")
        raise ValidationError(errors)
