"""
Repository Layer
================

Encapsulates all ORM queries for catalog models.
Views call repository methods instead of Model.objects directly.

Usage:
    from catalog.repositories import ProductRepository

    products = ProductRepository.search(predicate, sort="price_asc")
"""

from typing import List, Optional

from django.db.models import QuerySet

from core.repositories import BaseRepository

from .models import Product
from .services.query_builder import QueryPredicate


class ProductRepository(BaseRepository[Product]):
    """Encapsulates Product ORM queries."""

    model = Product

    SORT_OPTIONS = {
        "newest": ("-created_at", "-id"),
        "price_asc": ("price_cents", "-created_at"),
        "price_desc": ("-price_cents", "-created_at"),
        "rating": ("-rating", "-created_at"),
    }
    DEFAULT_SORT = "newest"

    @classmethod
    def search(
        cls,
        predicate: QueryPredicate,
        sort: str = DEFAULT_SORT,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
    ) -> QuerySet[Product]:
        """
        Products matching a search predicate.

        Prices are whole currency units, compared against ``price_cents``.
        ``distinct()`` is required because the color facet joins variants.
        """
        qs = cls.filter_q(predicate.to_q())

        if min_price is not None:
            qs = qs.filter(price_cents__gte=round(min_price * 100))
        if max_price is not None:
            qs = qs.filter(price_cents__lte=round(max_price * 100))

        ordering = cls.SORT_OPTIONS.get(sort, cls.SORT_OPTIONS[cls.DEFAULT_SORT])
        return qs.distinct().order_by(*ordering).prefetch_related("variants")

    @classmethod
    def distinct_categories(cls) -> List[str]:
        """Categories in use by published products, sorted."""
        return list(
            cls.get_all().filter(is_published=True)
            .exclude(category="")
            .order_by("category")
            .values_list("category", flat=True)
            .distinct()
        )
