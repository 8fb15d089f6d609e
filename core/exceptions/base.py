"""
Storefront Exception Hierarchy
==============================

Domain-specific exceptions for structured error handling across the API.

Usage::

    from core.exceptions import ServiceError, ValidationError, NotFoundError

    # In a service:
    raise ServiceError("Vision API timed out", vendor="openai")

    # In a view:
    raise ValidationError("Query must be at least 2 characters long", field="q")
"""

from rest_framework import status


# =============================================================================
# Base Exception
# =============================================================================

class StorefrontError(Exception):
    """Base exception for all storefront application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "server_error"

    def __init__(self, message="An unexpected error occurred", **kwargs):
        self.message = message
        self.details = kwargs
        super().__init__(message)

    def to_dict(self):
        result = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["detail"] = self.details
        return result


# =============================================================================
# Service Errors (external dependencies)
# =============================================================================

class ServiceError(StorefrontError):
    """External service or API call failed."""

    status_code = status.HTTP_502_BAD_GATEWAY
    error_code = "service_error"

    def __init__(self, message="External service unavailable", vendor=None, **kwargs):
        if vendor:
            kwargs["vendor"] = vendor
        super().__init__(message, **kwargs)


class MLServiceError(ServiceError):
    """Generative-AI vision call failed or returned something unusable."""

    error_code = "ml_service_error"

    def __init__(self, message="Vision service unavailable", **kwargs):
        kwargs.setdefault("vendor", "openai")
        super().__init__(message, **kwargs)


# =============================================================================
# Client Errors
# =============================================================================

class ValidationError(StorefrontError):
    """Invalid input from the client."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "validation_error"

    def __init__(self, message="Invalid request data", field=None, **kwargs):
        if field:
            kwargs["field"] = field
        super().__init__(message, **kwargs)


class NotFoundError(StorefrontError):
    """Requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "not_found"

    def __init__(self, message="Resource not found", resource=None, **kwargs):
        if resource:
            kwargs["resource"] = resource
        super().__init__(message, **kwargs)


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(StorefrontError):
    """Missing or invalid configuration (env vars, settings)."""

    error_code = "configuration_error"

    def __init__(self, message="Configuration error", setting=None, **kwargs):
        if setting:
            kwargs["setting"] = setting
        super().__init__(message, **kwargs)
