"""
Tests for search intent extraction.

Run with: python -m pytest catalog/tests/test_search_intent.py -v
"""

import pytest

from catalog.services.category_aliases import AliasIndex
from catalog.services.category_resolver import CategoryResolver
from catalog.services.search_intent import (
    Gender,
    SearchIntent,
    SearchIntentExtractor,
    extract_intent,
)


class TestExtractIntent:

    def test_category_and_gender(self):
        intent = extract_intent("top for women")
        assert intent.category == "Tops"
        assert intent.gender == Gender.WOMEN
        assert intent.color is None
        assert intent.remaining_text == "top"

    def test_color_and_category(self):
        intent = extract_intent("red shirt")
        assert intent.category == "Shirts"
        assert intent.color == "red"
        assert intent.gender is None

    def test_tshirts_for_men(self):
        intent = extract_intent("tshirts for men")
        assert intent.category == "Tshirts"
        assert intent.gender == Gender.MEN

    def test_mixed_case(self):
        intent = extract_intent("Red KURTI for Women")
        assert intent.category == "Kurtis"
        assert intent.gender == Gender.WOMEN
        assert intent.color == "red"

    def test_filler_words_removed(self):
        intent = extract_intent("blue jeans in denim")
        assert intent.color == "blue"
        assert intent.remaining_text == "jeans denim"
        assert intent.category == "Jeans"

    def test_extended_colors(self):
        intent = extract_intent("navy blazer")
        assert intent.color == "navy"
        assert intent.category == "Blazers"

    def test_kids_with_grey(self):
        intent = extract_intent("grey hoodie for kids")
        assert intent.gender == Gender.KIDS
        assert intent.color == "grey"
        assert intent.category == "Sweatshirts"


class TestWordBoundaries:

    def test_women_is_not_read_as_men(self):
        assert extract_intent("top for women").gender == Gender.WOMEN

    def test_plural_keyword(self):
        intent = extract_intent("womens kurti")
        assert intent.gender == Gender.WOMEN
        assert intent.category == "Kurtis"

    def test_substring_is_not_a_keyword(self):
        intent = extract_intent("mango kurti")
        assert intent.gender is None
        assert "mango" in intent.remaining_text

    def test_colour_inside_word_is_ignored(self):
        # "shredded" contains "red" but not as a word
        assert extract_intent("shredded jeans").color is None


class TestSingleFacetPerKind:

    def test_only_first_gender_is_extracted(self):
        intent = extract_intent("boys girls shorts")
        assert intent.gender == Gender.KIDS
        assert "girls" in intent.remaining_text
        assert "boys" not in intent.remaining_text

    def test_only_first_color_is_extracted(self):
        intent = extract_intent("black and white sneakers")
        assert intent.color == "black"
        assert "white" in intent.remaining_text

    def test_all_occurrences_of_matched_keyword_removed(self):
        intent = extract_intent("red red kurti")
        assert intent.color == "red"
        assert intent.remaining_text == "kurti"


class TestEmptyResults:

    @pytest.mark.parametrize("query", ["", None, 123, ["red"]])
    def test_empty_or_invalid_input(self, query):
        intent = extract_intent(query)
        assert intent == SearchIntent()
        assert intent.is_empty

    def test_only_facets_and_fillers_leave_no_category(self):
        intent = extract_intent("for the men")
        assert intent.gender == Gender.MEN
        assert intent.category is None
        assert intent.remaining_text == ""

    def test_to_dict(self):
        assert extract_intent("red shirt for men").to_dict() == {
            "category": "Shirts",
            "gender": "Men",
            "color": "red",
            "remaining_text": "shirt",
        }


class TestInjectedResolver:

    def test_uses_given_resolver(self):
        resolver = CategoryResolver(
            categories=["Widgets", "Gadgets"],
            aliases=AliasIndex([("gizmo", "Gadgets")]),
            fallback="Widgets",
        )
        extractor = SearchIntentExtractor(resolver)
        intent = extractor.extract("blue gizmo for kids")
        assert intent.category == "Gadgets"
        assert intent.color == "blue"
        assert intent.gender == Gender.KIDS
