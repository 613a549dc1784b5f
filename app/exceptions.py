# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception definitions for the storefront API.
# Action handlers catch these and reduce them to a user-facing message;
# the FastAPI handlers below only see the ones that escape a route.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class StorefrontException(Exception):
    """
    Base exception for the storefront API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "STOREFRONT_ERROR",
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
# Validation Exceptions
# =============================================================================

class ValidationError(StorefrontException):
    """
    Raised when submitted input violates a schema.

    The message is every violated rule joined with ", ".
    """

    def __init__(self, errors: list[str]):
        super().__init__(
            message=", ".join(errors),
            code="VALIDATION_ERROR",
            status_code=400,
            details={"errors": errors}
        )
        self.errors = errors


# =============================================================================
# Storage Exceptions
# =============================================================================

class StorageError(StorefrontException):
    """Raised when an image upload or delete against storage fails."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(
            message=message,
            code="STORAGE_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details={"path": path} if path else None
        )


# =============================================================================
# Record Exceptions
# =============================================================================

class ProductNotFoundError(StorefrontException):
    """Raised when a product ID doesn't exist."""

    def __init__(self, product_id: str):
        super().__init__(
            message=f"Product not found: {product_id}",
            code="PRODUCT_NOT_FOUND",
            status_code=404,
            suggestion="Check that the product id is correct and it hasn't been deleted",
            details={"product_id": product_id}
        )


class FavoriteNotFoundError(StorefrontException):
    """Raised when a favorite doesn't exist or belongs to another user."""

    def __init__(self, favorite_id: str):
        super().__init__(
            message=f"Favorite not found: {favorite_id}",
            code="FAVORITE_NOT_FOUND",
            status_code=404,
            details={"favorite_id": favorite_id}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def storefront_exception_handler(
    request: Request,
    exc: StorefrontException
) -> JSONResponse:
    """
    Convert StorefrontException to JSON response.

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
