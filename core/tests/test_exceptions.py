"""
Tests for the exception hierarchy and the DRF exception handler.

Run with: python -m pytest core/tests/test_exceptions.py -v
"""

import pytest
from rest_framework.exceptions import NotFound

from core.exceptions import (
    ConfigurationError,
    MLServiceError,
    NotFoundError,
    ServiceError,
    StorefrontError,
    ValidationError,
    storefront_exception_handler,
)


class TestExceptionPayloads:

    def test_validation_error(self):
        exc = ValidationError("Query too short", field="q")
        assert exc.status_code == 400
        assert exc.to_dict() == {
            "error": "validation_error",
            "message": "Query too short",
            "detail": {"field": "q"},
        }

    def test_detail_omitted_when_empty(self):
        assert StorefrontError("boom").to_dict() == {"error": "server_error", "message": "boom"}

    def test_ml_service_error_defaults_vendor(self):
        exc = MLServiceError("timeout")
        assert isinstance(exc, ServiceError)
        assert exc.status_code == 502
        assert exc.details == {"vendor": "openai"}

    @pytest.mark.parametrize("exc,status", [
        (NotFoundError(resource="product"), 404),
        (ConfigurationError(setting="OPENAI_API_KEY"), 500),
        (ServiceError(vendor="openai"), 502),
    ])
    def test_status_codes(self, exc, status):
        assert exc.status_code == status


class TestExceptionHandler:

    def test_storefront_errors_are_structured(self):
        response = storefront_exception_handler(ValidationError("bad", field="image"), {})
        assert response.status_code == 400
        assert response.data["detail"] == {"field": "image"}

    def test_drf_errors_use_default_handler(self):
        response = storefront_exception_handler(NotFound(), {})
        assert response.status_code == 404

    def test_unknown_errors_are_left_to_django(self):
        assert storefront_exception_handler(ValueError("oops"), {"view": "test"}) is None
