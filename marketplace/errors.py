"""
Error taxonomy and common error messages.

Handlers raise these; api/index.py maps them to the JSON error envelope
({"message": ...}, plus "errors" for validation failures).
"""

from typing import Any

# Auth errors
ERROR_UNAUTHORIZED = "Unauthorized"
ERROR_NOT_AUTHENTICATED = "Not authenticated"
ERROR_FORBIDDEN = "Not authorized. Admin access required."
ERROR_INVALID_CREDENTIALS = "Invalid credentials or not an admin"

# Cart errors
ERROR_CART_ITEM_NOT_FOUND = "Cart item not found"
ERROR_USER_ID_REQUIRED = "userId is required"
ERROR_MISSING_FIELDS = "Missing required fields"

# Entity errors
ERROR_USER_NOT_FOUND = "User not found"
ERROR_PRODUCT_NOT_FOUND = "Product not found"

# Generic errors
ERROR_VALIDATION = "Validation error"
ERROR_INTERNAL = "Internal server error"


class MarketplaceError(Exception):
    """Base for errors that carry their own HTTP status."""

    status_code = 500
    default_message = ERROR_INTERNAL

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message}


class ValidationError(MarketplaceError):
    """Missing or malformed request fields."""

    status_code = 400
    default_message = ERROR_VALIDATION

    def __init__(self, message: str | None = None, errors: list[dict] | None = None):
        super().__init__(message)
        self.errors = errors or []

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        if self.errors:
            body["errors"] = self.errors
        return body


class NotFound(MarketplaceError):
    status_code = 404
    default_message = "Not found"


class Unauthorized(MarketplaceError):
    """No credentials, or credentials that do not identify a usable principal."""

    status_code = 401
    default_message = ERROR_UNAUTHORIZED


class Forbidden(MarketplaceError):
    """Authenticated, but the role is not allowed."""

    status_code = 403
    default_message = ERROR_FORBIDDEN


__all__ = [
    "ERROR_UNAUTHORIZED",
    "ERROR_NOT_AUTHENTICATED",
    "ERROR_FORBIDDEN",
    "ERROR_INVALID_CREDENTIALS",
    "ERROR_CART_ITEM_NOT_FOUND",
    "ERROR_USER_ID_REQUIRED",
    "ERROR_MISSING_FIELDS",
    "ERROR_USER_NOT_FOUND",
    "ERROR_PRODUCT_NOT_FOUND",
    "ERROR_VALIDATION",
    "ERROR_INTERNAL",
    "MarketplaceError",
    "ValidationError",
    "NotFound",
    "Unauthorized",
    "Forbidden",
]
