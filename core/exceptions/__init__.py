"""
core.exceptions — Re-exports for convenient imports.

Usage::

    from core.exceptions import ValidationError, NotFoundError, ServiceError
    from core.exceptions import storefront_exception_handler
"""

from .base import (
    StorefrontError,
    ServiceError,
    MLServiceError,
    ValidationError,
    NotFoundError,
    ConfigurationError,
)

from .handlers import storefront_exception_handler

__all__ = [
    # Base
    "StorefrontError",
    # Service
    "ServiceError",
    "MLServiceError",
    # Client
    "ValidationError",
    "NotFoundError",
    # Config
    "ConfigurationError",
    # Handler
    "storefront_exception_handler",
]
