"""
Custom business exceptions for the HTTP query surface.

WHAT: Domain-specific exceptions that map to HTTP status codes
WHY: Consistent error bodies across all API endpoints
HOW: Custom exception classes with error codes and messages
"""

from typing import Optional, Any


class BusinessException(Exception):
    """Base class for business logic exceptions."""

    def __init__(self, message: str, code: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details


class ProductNotFoundException(BusinessException):
    """Raised when a product id is not in the catalog."""

    def __init__(self, product_id: Any):
        super().__init__(
            message=f"Product not found: {product_id}",
            code="PRODUCT_NOT_FOUND",
            details={"product_id": product_id}
        )


class UserNotFoundException(BusinessException):
    """Raised when no joined user holds the given connection id."""

    def __init__(self, connection_id: str):
        super().__init__(
            message=f"User not found for connection: {connection_id}",
            code="USER_NOT_FOUND",
            details={"connection_id": connection_id}
        )
