"""
Query Builder

Converts a ``SearchIntent`` into a ``QueryPredicate``: a plain description of
the product filter that the repository turns into an ORM query. Building a
predicate never touches the database.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from django.db.models import Q

from .search_intent import Gender, SearchIntent


@dataclass(frozen=True)
class QueryPredicate:
    """Product filter. ``is_published`` is always required."""
    is_published: bool = True
    category_equals: Optional[str] = None   # case-insensitive exact
    gender_equals: Optional[Gender] = None
    color_matches: Optional[str] = None     # dominant color OR any variant color

    def to_dict(self) -> Dict[str, Any]:
        """Populated constraints only, e.g. for echoing back in API responses."""
        result: Dict[str, Any] = {"is_published": self.is_published}
        if self.category_equals:
            result["category_equals"] = self.category_equals
        if self.gender_equals:
            result["gender_equals"] = self.gender_equals.value
        if self.color_matches:
            result["color_matches"] = self.color_matches
        return result

    def to_q(self) -> Q:
        """Render as a Django ``Q`` over ``catalog.Product``."""
        q = Q(is_published=self.is_published)
        if self.category_equals:
            q &= Q(category__iexact=self.category_equals)
        if self.gender_equals:
            q &= Q(gender=self.gender_equals.value)
        if self.color_matches:
            q &= (
                Q(dominant_color_name__icontains=self.color_matches)
                | Q(variants__color__icontains=self.color_matches)
            )
        return q


def build_predicate(intent: SearchIntent) -> QueryPredicate:
    """Product filter for an extracted search intent."""
    return QueryPredicate(
        category_equals=intent.category or None,
        gender_equals=intent.gender,
        color_matches=intent.color or None,
    )
