# Request hygiene middleware package

from .security import (
    SecurityHeadersMiddleware,
    RequestLoggingMiddleware,
)

from .request_filters import (
    ContentTypeFilter,
    RequestSizeFilter,
    ParameterValidationFilter,
)

__all__ = [
    "SecurityHeadersMiddleware",
    "RequestLoggingMiddleware",
    "ContentTypeFilter",
    "RequestSizeFilter",
    "ParameterValidationFilter",
]
