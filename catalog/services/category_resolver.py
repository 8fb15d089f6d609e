"""
Category Resolver

Maps an arbitrary text label (an AI-generated tag, the residue of a search
query, an admin's free-text entry) onto a canonical taxonomy category.

Tiers, first match wins:
1. Empty input        → fallback, nothing else attempted
2. Alias exact        → ``alias_index.lookup``
3. Canonical exact    → case-insensitive compare against the taxonomy
4. Alias prefix       → alias is a prefix of the input, or the input is a
                        prefix of the alias; aliases walked in table order
5. Canonical prefix   → same test against canonical names, taxonomy order
6. Fallback           → ``FALLBACK_CATEGORY``

Resolution never raises. Callers that care whether the answer was a real
match or the catch-all inspect ``CategoryMatch.tier`` / ``is_confident``.

The prefix tiers are bidirectional on purpose and can match loosely: a long
phrase such as "top quality cotton kurti" begins with the alias "top" and
resolves to Tops. That behavior is kept as-is.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple

from .category_aliases import AliasIndex, alias_index
from .taxonomy import FALLBACK_CATEGORY, VALID_CATEGORIES

logger = logging.getLogger(__name__)


class MatchTier(str, Enum):
    """Which resolver stage produced a category."""
    EMPTY = "empty"
    ALIAS_EXACT = "alias_exact"
    CANONICAL_EXACT = "canonical_exact"
    ALIAS_PREFIX = "alias_prefix"
    CANONICAL_PREFIX = "canonical_prefix"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class CategoryMatch:
    """Result of a resolution, with the tier that produced it."""
    category: str
    tier: MatchTier
    matched_on: Optional[str] = None  # alias or canonical key that matched

    @property
    def is_confident(self) -> bool:
        return self.tier not in (MatchTier.EMPTY, MatchTier.FALLBACK)

    def to_dict(self) -> Dict[str, object]:
        return {
            "category": self.category,
            "tier": self.tier.value,
            "matched_on": self.matched_on,
            "confident": self.is_confident,
        }


def _prefix_compatible(key: str, text: str) -> bool:
    return text.startswith(key) or key.startswith(text)


class CategoryResolver:
    """
    Tiered category matcher over a taxonomy and an alias index.

    Tables are injected so that tie-break behavior can be exercised against
    small, contrived tables:

        resolver = CategoryResolver(
            categories=["A", "B"],
            aliases=AliasIndex([("s", "A"), ("saree", "B")]),
            fallback="A",
        )
        resolver.resolve("sare")   # → "A" ("s" is defined first)
    """

    def __init__(
        self,
        categories: Iterable[str] = VALID_CATEGORIES,
        aliases: AliasIndex = alias_index,
        fallback: str = FALLBACK_CATEGORY,
    ):
        self.categories: Tuple[str, ...] = tuple(categories)
        self.aliases = aliases
        self.fallback = fallback
        self._canonical_by_lower: Dict[str, str] = {}
        for name in self.categories:
            self._canonical_by_lower.setdefault(name.lower(), name)

    def match(self, raw_label) -> CategoryMatch:
        """Resolve ``raw_label`` and report which tier matched."""
        if not isinstance(raw_label, str) or not raw_label.strip():
            logger.debug("Empty category label, using fallback %r", self.fallback)
            return CategoryMatch(self.fallback, MatchTier.EMPTY)

        normalized = raw_label.strip().lower()

        aliased = self.aliases.lookup(normalized)
        if aliased is not None:
            return self._found(raw_label, aliased, MatchTier.ALIAS_EXACT, normalized)

        exact = self._canonical_by_lower.get(normalized)
        if exact is not None:
            return self._found(raw_label, exact, MatchTier.CANONICAL_EXACT, exact)

        # Table order is the tie-break: first prefix-compatible alias wins.
        for key, canonical in self.aliases.items():
            if _prefix_compatible(key, normalized):
                return self._found(raw_label, canonical, MatchTier.ALIAS_PREFIX, key)

        for name in self.categories:
            if _prefix_compatible(name.lower(), normalized):
                return self._found(raw_label, name, MatchTier.CANONICAL_PREFIX, name)

        logger.warning(
            "Unknown category label %r, defaulting to %r", raw_label, self.fallback
        )
        return CategoryMatch(self.fallback, MatchTier.FALLBACK)

    def resolve(self, raw_label) -> str:
        """Canonical category for ``raw_label``; never fails."""
        return self.match(raw_label).category

    @staticmethod
    def _found(raw_label, category, tier, matched_on) -> CategoryMatch:
        logger.debug("Category %r → %r (%s via %r)", raw_label, category, tier.value, matched_on)
        return CategoryMatch(category, tier, matched_on)


# Singleton instance
category_resolver = CategoryResolver()


def resolve_category(raw_label) -> str:
    """Resolve a label against the default taxonomy."""
    return category_resolver.resolve(raw_label)


def match_category(raw_label) -> CategoryMatch:
    """Resolve a label against the default taxonomy, with tier diagnostics."""
    return category_resolver.match(raw_label)
