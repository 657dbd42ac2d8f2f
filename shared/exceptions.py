"""
Domain errors raised by the store and services.

Each error carries the HTTP status it maps to; the API renders every one of
them as ``{"message": ...}``.
"""
from typing import Optional


class StorefrontError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(StorefrontError):
    status_code = 400
    default_message = "Validation failed"


class UnauthorizedError(StorefrontError):
    status_code = 401
    default_message = "Unauthorized"


class ForbiddenError(StorefrontError):
    status_code = 403
    default_message = "Forbidden"


class NotFoundError(StorefrontError):
    status_code = 404
    default_message = "Not found"


class ConflictError(StorefrontError):
    status_code = 409
    default_message = "Already exists"


class PaymentGatewayError(StorefrontError):
    status_code = 502
    default_message = "Payment gateway error"
