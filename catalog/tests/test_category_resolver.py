"""
Tests for the tiered category resolver.

Run with: python -m pytest catalog/tests/test_category_resolver.py -v
"""

import pytest

from catalog.services.category_aliases import AliasIndex, alias_index
from catalog.services.category_resolver import (
    CategoryResolver,
    MatchTier,
    match_category,
    resolve_category,
)
from catalog.services.taxonomy import FALLBACK_CATEGORY, VALID_CATEGORIES


class TestEmptyInput:

    @pytest.mark.parametrize("label", ["", "   ", "\t\n", None, 12, ["top"]])
    def test_empty_or_non_string_returns_fallback(self, label):
        match = match_category(label)
        assert match.category == FALLBACK_CATEGORY
        assert match.tier == MatchTier.EMPTY
        assert not match.is_confident


class TestExactTiers:

    @pytest.mark.parametrize("label,expected", [
        ("kurti", "Kurtis"),
        ("KURTI", "Kurtis"),
        ("  tee  ", "Tshirts"),
        ("tshirts", "Tshirts"),
        ("coat", "Jackets"),
    ])
    def test_alias_exact(self, label, expected):
        match = match_category(label)
        assert match.category == expected
        assert match.tier == MatchTier.ALIAS_EXACT

    def test_canonical_exact_is_case_insensitive(self):
        match = match_category("lehenga CHOLI")
        assert match.category == "Lehenga Choli"
        assert match.tier == MatchTier.CANONICAL_EXACT
        assert match.matched_on == "Lehenga Choli"

    def test_tshirts_does_not_resolve_to_shirts(self):
        assert resolve_category("tshirts") == "Tshirts"
        assert resolve_category("T-Shirts") == "Tshirts"


class TestPrefixTiers:

    def test_input_is_prefix_of_alias(self):
        match = match_category("sare")
        assert match.category == "Sarees"
        assert match.tier == MatchTier.ALIAS_PREFIX
        assert match.matched_on == "saree"

    def test_alias_is_prefix_of_input(self):
        match = match_category("top quality cotton kurti")
        assert match.category == "Tops"
        assert match.tier == MatchTier.ALIAS_PREFIX
        assert match.matched_on == "top"

    def test_first_alias_in_table_order_wins(self):
        # "kur" is compatible with kurti, kurtis, kurta, kurtas; kurti is listed first
        assert resolve_category("kur") == "Kurtis"
        assert resolve_category("t") == "Tshirts"

    def test_canonical_prefix(self):
        match = match_category("innerwear vests xl")
        assert match.category == "Innerwear Vests"
        assert match.tier == MatchTier.CANONICAL_PREFIX

        assert resolve_category("innerwear") == "Innerwear Vests"


class TestFallback:

    @pytest.mark.parametrize("label", ["zzz", "quantum widget", "xyzzy"])
    def test_unknown_labels_fall_back(self, label):
        match = match_category(label)
        assert match.category == "Tshirts"
        assert match.tier == MatchTier.FALLBACK
        assert match.matched_on is None

    def test_fallback_is_logged(self, caplog):
        with caplog.at_level("WARNING", logger="catalog.services.category_resolver"):
            resolve_category("zzz")
        assert "zzz" in caplog.text


class TestResolverProperties:

    def test_total_over_taxonomy(self):
        for name in VALID_CATEGORIES:
            assert resolve_category(name) in VALID_CATEGORIES

    def test_self_identity(self):
        for name in VALID_CATEGORIES:
            assert resolve_category(name) == name
            assert resolve_category(name.upper()) == name

    def test_every_alias_resolves_to_its_target(self):
        for variant, canonical in alias_index.items():
            assert resolve_category(variant) == canonical

    @pytest.mark.parametrize("label", ["sare", "top quality cotton kurti", "zzz", "", "Hoodie"])
    def test_idempotent(self, label):
        once = resolve_category(label)
        assert resolve_category(once) == once

    def test_match_to_dict(self):
        assert match_category("kurti").to_dict() == {
            "category": "Kurtis",
            "tier": "alias_exact",
            "matched_on": "kurti",
            "confident": True,
        }


class TestInjectedTables:
    """Tie-breaks exercised against small tables."""

    def test_alias_table_order_breaks_prefix_ties(self):
        resolver = CategoryResolver(
            categories=["A", "B"],
            aliases=AliasIndex([("s", "A"), ("saree", "B")]),
            fallback="A",
        )
        assert resolver.resolve("sare") == "A"

    def test_reordered_table_changes_winner(self):
        resolver = CategoryResolver(
            categories=["A", "B"],
            aliases=AliasIndex([("saree", "B"), ("s", "A")]),
            fallback="A",
        )
        assert resolver.resolve("sare") == "B"

    def test_canonical_prefix_follows_taxonomy_order(self):
        resolver = CategoryResolver(
            categories=["Rings", "Ring Sets"],
            aliases=AliasIndex([]),
            fallback="Rings",
        )
        match = resolver.match("ring")
        assert match.category == "Rings"
        assert match.tier == MatchTier.CANONICAL_PREFIX

    def test_custom_fallback(self):
        resolver = CategoryResolver(categories=["A"], aliases=AliasIndex([]), fallback="A")
        assert resolver.match("zzz").tier == MatchTier.FALLBACK
        assert resolver.resolve("") == "A"
