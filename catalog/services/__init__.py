# Services package
from .taxonomy import (
    VALID_CATEGORIES,
    FALLBACK_CATEGORY,
    is_canonical,
    all_categories,
    category_groups,
    group_for,
)
from .category_aliases import alias_index, AliasIndex, lookup_alias
from .category_resolver import (
    category_resolver,
    CategoryResolver,
    CategoryMatch,
    MatchTier,
    resolve_category,
    match_category,
)
from .search_intent import (
    search_intent_extractor,
    SearchIntentExtractor,
    SearchIntent,
    Gender,
    extract_intent,
)
from .query_builder import QueryPredicate, build_predicate

__all__ = [
    # Taxonomy
    "VALID_CATEGORIES",
    "FALLBACK_CATEGORY",
    "is_canonical",
    "all_categories",
    "category_groups",
    "group_for",
    # Aliases
    "alias_index",
    "AliasIndex",
    "lookup_alias",
    # Resolver
    "category_resolver",
    "CategoryResolver",
    "CategoryMatch",
    "MatchTier",
    "resolve_category",
    "match_category",
    # Search intent
    "search_intent_extractor",
    "SearchIntentExtractor",
    "SearchIntent",
    "Gender",
    "extract_intent",
    # Query builder
    "QueryPredicate",
    "build_predicate",
]
