"""
Request Filters - Pre-processing and validation before API handlers

Stateless validation that happens before any business logic:
1. Content-type validation
2. Request size limits
3. Pagination parameter bounds
"""

import logging
from django.http import JsonResponse

logger = logging.getLogger(__name__)


class ContentTypeFilter:
    """
    Validate Content-Type header on requests that carry a body.
    """

    BODY_METHODS = ["POST", "PUT", "PATCH"]

    ALLOWED_CONTENT_TYPES = [
        "application/json",
        "multipart/form-data",
        "application/x-www-form-urlencoded",
    ]

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if not request.path.startswith("/api/"):
            return self.get_response(request)

        if request.method in self.BODY_METHODS:
            content_type = (request.content_type or "").split(";")[0].strip().lower()

            if not content_type:
                return JsonResponse(
                    {"error": "Content-Type header required"},
                    status=400
                )

            if content_type not in self.ALLOWED_CONTENT_TYPES:
                return JsonResponse(
                    {"error": "Unsupported Content-Type"},
                    status=415
                )

        return self.get_response(request)


class RequestSizeFilter:
    """
    Enforce request size limits per content type.
    """

    SIZE_LIMITS = {
        "application/json": 1 * 1024 * 1024,      # 1MB for JSON
        "multipart/form-data": 10 * 1024 * 1024,  # 10MB for image uploads
        "default": 512 * 1024,                     # 512KB default
    }

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if not request.path.startswith("/api/"):
            return self.get_response(request)

        content_length = request.META.get("CONTENT_LENGTH")
        if content_length:
            try:
                size = int(content_length)
            except ValueError:
                return JsonResponse({"error": "Invalid Content-Length"}, status=400)

            content_type = (request.content_type or "").split(";")[0].strip().lower()
            limit = self.SIZE_LIMITS.get(content_type, self.SIZE_LIMITS["default"])

            if size > limit:
                logger.warning(f"Request too large: {size} bytes from {request.META.get('REMOTE_ADDR')}")
                return JsonResponse(
                    {"error": f"Request too large. Maximum size: {limit // 1024}KB"},
                    status=413
                )

        return self.get_response(request)


class ParameterValidationFilter:
    """
    Enforce safe bounds on pagination parameters.
    """

    PARAM_LIMITS = {
        "limit": 100,
        "offset": 10000,
        "page": 1000,
    }

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if not request.path.startswith("/api/"):
            return self.get_response(request)

        for param, max_val in self.PARAM_LIMITS.items():
            value = request.GET.get(param)
            if value:
                try:
                    num_val = int(value)
                except ValueError:
                    return JsonResponse(
                        {"error": f"Invalid {param}: must be a number"},
                        status=400
                    )
                if num_val < 0 or num_val > max_val:
                    return JsonResponse(
                        {"error": f"Invalid {param}: must be 0-{max_val}"},
                        status=400
                    )

        return self.get_response(request)
