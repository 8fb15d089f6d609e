"""
Generic Base Repository
=======================

Typed read helpers shared by app repositories.

Usage:
    from core.repositories import BaseRepository
    from catalog.models import Product

    class ProductRepository(BaseRepository[Product]):
        model = Product
"""

from typing import TypeVar, Generic, Type
from django.db import models
from django.db.models import QuerySet

T = TypeVar("T", bound=models.Model)


class BaseRepository(Generic[T]):
    """
    Generic repository over a single model.

    Subclasses MUST set the `model` class attribute.
    """

    model: Type[T]

    @classmethod
    def get_all(cls) -> QuerySet[T]:
        """Return all instances (respects model's default ordering)."""
        return cls.model.objects.all()

    @classmethod
    def filter_q(cls, predicate) -> QuerySet[T]:
        """Filter instances by a ``Q`` expression."""
        return cls.model.objects.filter(predicate)

