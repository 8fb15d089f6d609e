"""
Catalog Views

API endpoints for intent-based product search, the category taxonomy,
and AI-assisted category suggestion / tagging for the admin product form.
"""

import logging

from django.http import JsonResponse
from django.views import View
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import ServiceError, ValidationError

from .query_sanitizer import get_pagination_params, page_meta, sanitize_query, validate_query
from .repositories import ProductRepository
from .serializers import ProductSerializer, SearchParamsSerializer
from .services import (
    FALLBACK_CATEGORY,
    all_categories,
    build_predicate,
    category_groups,
    extract_intent,
    group_for,
    match_category,
)
from .services.vision_service import ImageTags, vision_service

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = ['image/jpeg', 'image/png', 'image/webp', 'image/gif']
MAX_IMAGE_SIZE = 10 * 1024 * 1024  # 10MB


def _read_uploaded_image(request) -> bytes:
    """Validate the multipart ``image`` field and return its bytes."""
    if 'image' not in request.FILES:
        raise ValidationError("No image file provided. Use 'image' field.", field="image")

    image_file = request.FILES['image']

    if image_file.content_type not in ALLOWED_IMAGE_TYPES:
        raise ValidationError(
            f"Invalid file type. Allowed: {', '.join(ALLOWED_IMAGE_TYPES)}",
            field="image",
        )

    if image_file.size > MAX_IMAGE_SIZE:
        raise ValidationError("File too large. Maximum size is 10MB.", field="image")

    return image_file.read()


class ProductSearchView(APIView):
    """
    Search products with a free-text query.

    GET /api/v1/products/search/?q=<query>&page=1&limit=24

    Query params:
        q          - Search query (required, 2-200 chars)
        page       - Page number (default: 1)
        limit      - Results per page (default: 24, max: 100)
        offset     - Alternative to page (overrides page if present)
        sort       - newest | price_asc | price_desc | rating
        min_price  - Lower price bound in whole currency units
        max_price  - Upper price bound in whole currency units

    The query is split into gender / color / category facets
    ("red shirt for men") and turned into a structured product filter.
    """
    permission_classes = [AllowAny]

    def get(self, request):
        query = sanitize_query(request.query_params.get('q', ''))

        error = validate_query(query)
        if error:
            raise ValidationError(error, field="q")

        params = SearchParamsSerializer(data=request.query_params)
        if not params.is_valid():
            raise ValidationError("Invalid search parameters", errors=params.errors)
        filters = params.validated_data

        offset, limit = get_pagination_params(request)

        intent = extract_intent(query)
        predicate = build_predicate(intent)

        products = ProductRepository.search(
            predicate,
            sort=filters["sort"],
            min_price=filters.get("min_price"),
            max_price=filters.get("max_price"),
        )
        total = products.count()
        page = products[offset:offset + limit]

        logger.info(
            f"Search '{query}' → intent={intent.to_dict()} total={total}"
        )

        return Response({
            "query": {
                "original": query,
                "intent": intent.to_dict(),
                "predicate": predicate.to_dict(),
            },
            "products": ProductSerializer(page, many=True).data,
            **page_meta(total, offset, limit),
        })


class CategoryListView(APIView):
    """
    Canonical product categories.

    GET /api/v1/products/categories/

    Returns the full taxonomy (flat and grouped by domain), the fallback
    category, and the categories currently used by published products.
    """
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({
            "categories": all_categories(),
            "groups": category_groups(),
            "fallback": FALLBACK_CATEGORY,
            "in_use": ProductRepository.distinct_categories(),
        })


class CategorySuggestView(APIView):
    """
    Suggest a canonical category for a product photo.

    POST /api/v1/products/ai/suggest-category/

    Request: multipart/form-data with 'image' field

    The vision model produces a free-text label which is resolved against
    the taxonomy. When the model call fails the label is treated as empty,
    so the response carries the fallback category (``confident: false``)
    rather than an error.
    """
    permission_classes = [AllowAny]
    parser_classes = [MultiPartParser, FormParser]

    def post(self, request):
        image_data = _read_uploaded_image(request)

        try:
            label = vision_service.image_to_label(image_data)
        except ServiceError as e:
            logger.warning(f"AI category suggestion failed, using fallback: {e.message}")
            label = ""

        match = match_category(label)
        return Response({
            "category": match.category,
            "group": group_for(match.category),
            "label": label,
            "tier": match.tier.value,
            "confident": match.is_confident,
        })


class ProductTagView(APIView):
    """
    Generate catalog tags for a product photo.

    POST /api/v1/products/ai/tags/

    Request: multipart/form-data with 'image' field

    Response: dominant_color_name, style_tags, material_tags. A failed model
    call yields the neutral ``unknown`` / empty tags.
    """
    permission_classes = [AllowAny]
    parser_classes = [MultiPartParser, FormParser]

    def post(self, request):
        image_data = _read_uploaded_image(request)

        try:
            tags = vision_service.tag_image(image_data)
        except ServiceError as e:
            logger.warning(f"AI tagging failed, returning empty tags: {e.message}")
            tags = ImageTags()

        return Response(tags.to_dict())


class HealthView(View):
    """
    Health check endpoint for load balancers and deployment platforms.
    """

    def get(self, request):
        return JsonResponse({
            "status": "healthy",
            "service": "storefront-api",
            "version": "1.0.0",
        })
