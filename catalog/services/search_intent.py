"""
Search Intent Extractor

Turns a raw search box string into structured facets:

    "red shirt for men"  →  SearchIntent(category="Shirts", gender=Men, color="red")

Steps run in a fixed order on a lowercased working copy:
1. gender keyword (first in table order, all its occurrences removed)
2. color keyword (first in list order, all its occurrences removed)
3. filler words stripped, whitespace collapsed
4. whatever text is left goes to the category resolver

Gender and color are pulled out before category resolution so tokens like
"men" or "red" never reach the resolver's prefix tiers.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from .category_resolver import CategoryResolver, category_resolver

logger = logging.getLogger(__name__)


class Gender(str, Enum):
    MEN = "Men"
    WOMEN = "Women"
    KIDS = "Kids"


# =============================================================================
# KEYWORD TABLES (order is significant: first match wins)
# =============================================================================
GENDER_KEYWORDS: Tuple[Tuple[str, Gender], ...] = (
    ("men", Gender.MEN),
    ("man", Gender.MEN),
    ("male", Gender.MEN),
    ("mens", Gender.MEN),
    ("gents", Gender.MEN),
    ("gentleman", Gender.MEN),

    ("women", Gender.WOMEN),
    ("woman", Gender.WOMEN),
    ("female", Gender.WOMEN),
    ("womens", Gender.WOMEN),
    ("ladies", Gender.WOMEN),
    ("lady", Gender.WOMEN),

    ("kids", Gender.KIDS),
    ("kid", Gender.KIDS),
    ("children", Gender.KIDS),
    ("child", Gender.KIDS),
    ("boys", Gender.KIDS),
    ("boy", Gender.KIDS),
    ("girls", Gender.KIDS),
    ("girl", Gender.KIDS),
)

COLOR_KEYWORDS: Tuple[str, ...] = (
    "red", "blue", "green", "yellow", "black", "white", "gray", "grey",
    "pink", "purple", "orange", "brown", "navy", "maroon", "olive",
    "beige", "cream", "gold", "silver", "khaki", "lavender", "teal",
    "mustard", "peach", "magenta", "charcoal",
)

FILLER_WORDS: Tuple[str, ...] = ("for", "with", "in", "the", "a", "an")


def _word_pattern(keyword: str) -> "re.Pattern[str]":
    return re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE)


_GENDER_PATTERNS = tuple((_word_pattern(kw), gender) for kw, gender in GENDER_KEYWORDS)
_COLOR_PATTERNS = tuple((_word_pattern(color), color) for color in COLOR_KEYWORDS)
_FILLER_PATTERN = re.compile(
    r"\b(" + "|".join(re.escape(w) for w in FILLER_WORDS) + r")\b", re.IGNORECASE
)
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class SearchIntent:
    """Facets extracted from one search string. Built per request, never stored."""
    category: Optional[str] = None
    gender: Optional[Gender] = None
    color: Optional[str] = None
    remaining_text: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.category or self.gender or self.color)

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "category": self.category,
            "gender": self.gender.value if self.gender else None,
            "color": self.color,
            "remaining_text": self.remaining_text,
        }


class SearchIntentExtractor:
    """Gender/color/category facet extraction over a category resolver."""

    def __init__(self, resolver: CategoryResolver = category_resolver):
        self.resolver = resolver

    def extract(self, query) -> SearchIntent:
        if not query or not isinstance(query, str):
            return SearchIntent()

        text = query.lower().strip()
        gender: Optional[Gender] = None
        color: Optional[str] = None

        for pattern, value in _GENDER_PATTERNS:
            if pattern.search(text):
                gender = value
                text = pattern.sub("", text).strip()
                logger.debug("Detected gender %s from %r", value.value, pattern.pattern)
                break

        for pattern, value in _COLOR_PATTERNS:
            if pattern.search(text):
                color = value
                text = pattern.sub("", text).strip()
                logger.debug("Detected color %r", value)
                break

        text = _FILLER_PATTERN.sub("", text)
        text = _WHITESPACE.sub(" ", text).strip()

        category = None
        if text:
            category = self.resolver.resolve(text)
            logger.debug("Resolved category %r → %r", text, category)

        return SearchIntent(
            category=category,
            gender=gender,
            color=color,
            remaining_text=text,
        )


# Singleton instance
search_intent_extractor = SearchIntentExtractor()


def extract_intent(query) -> SearchIntent:
    """Extract search facets using the default taxonomy."""
    return search_intent_extractor.extract(query)
