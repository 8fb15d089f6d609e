"""
Tests for the canonical category taxonomy.

Run with: python -m pytest catalog/tests/test_taxonomy.py -v
"""

import pytest

from catalog.services.taxonomy import (
    CATEGORY_GROUPS,
    FALLBACK_CATEGORY,
    VALID_CATEGORIES,
    all_categories,
    canonical_name,
    category_groups,
    group_for,
    is_canonical,
)


class TestTaxonomyTable:

    def test_size_is_roughly_150(self):
        assert 130 <= len(VALID_CATEGORIES) <= 170

    def test_no_duplicates(self):
        lowered = [c.lower() for c in VALID_CATEGORIES]
        assert len(lowered) == len(set(lowered))

    def test_fallback_is_canonical(self):
        assert FALLBACK_CATEGORY == "Tshirts"
        assert is_canonical(FALLBACK_CATEGORY)

    def test_all_categories_preserves_definition_order(self):
        cats = all_categories()
        assert cats[:3] == ["Tshirts", "Shirts", "Tops"]
        assert cats == list(VALID_CATEGORIES)

    def test_all_categories_returns_a_copy(self):
        cats = all_categories()
        cats.append("Spaceships")
        assert "Spaceships" not in all_categories()

    def test_groups_flatten_to_valid_categories(self):
        flattened = [c for names in category_groups().values() for c in names]
        assert flattened == list(VALID_CATEGORIES)

    def test_covers_expected_domains(self):
        for group in ("topwear", "footwear", "bags", "jewellery", "beauty"):
            assert group in CATEGORY_GROUPS


class TestIsCanonical:

    @pytest.mark.parametrize("name", ["Kurtis", "kurtis", "KURTIS", "  Sports Shoes  "])
    def test_case_insensitive(self, name):
        assert is_canonical(name)

    @pytest.mark.parametrize("name", ["kurti", "T-Shirts", "Shoes", "", "Spaceships"])
    def test_non_members_fail_closed(self, name):
        assert not is_canonical(name)

    @pytest.mark.parametrize("value", [None, 42, ["Tops"]])
    def test_non_strings_are_never_canonical(self, value):
        assert not is_canonical(value)

    def test_canonical_name_returns_stored_spelling(self):
        assert canonical_name("lehenga choli") == "Lehenga Choli"
        assert canonical_name("lehenga") is None

    def test_group_for(self):
        assert group_for("earrings") == "jewellery"
        assert group_for("not a category") is None
