"""
Tests for predicate building and its ORM rendering.

Run with: python -m pytest catalog/tests/test_query_builder.py -v
"""

import pytest

from catalog.models import Product
from catalog.repositories import ProductRepository
from catalog.services.query_builder import QueryPredicate, build_predicate
from catalog.services.search_intent import Gender, SearchIntent, extract_intent


class TestBuildPredicate:

    def test_empty_intent_only_requires_published(self):
        predicate = build_predicate(SearchIntent())
        assert predicate == QueryPredicate()
        assert predicate.to_dict() == {"is_published": True}

    def test_category_only(self):
        predicate = build_predicate(SearchIntent(category="Tops"))
        assert predicate.to_dict() == {"is_published": True, "category_equals": "Tops"}

    def test_all_facets(self):
        predicate = build_predicate(extract_intent("red top for women"))
        assert predicate.category_equals == "Tops"
        assert predicate.gender_equals == Gender.WOMEN
        assert predicate.color_matches == "red"
        assert predicate.to_dict() == {
            "is_published": True,
            "category_equals": "Tops",
            "gender_equals": "Women",
            "color_matches": "red",
        }

    def test_building_is_pure(self):
        intent = SearchIntent(category="Shirts", color="blue")
        assert build_predicate(intent) == build_predicate(intent)


@pytest.mark.django_db
class TestPredicateAgainstDatabase:

    @pytest.fixture
    def catalog_rows(self, make_product):
        return {
            "red_top": make_product("Red Top", "Tops", "Women", color="Red"),
            "variant_red": make_product(
                "Blue Top", "Tops", "Women", color="Blue", variant_colors=["Dark Red", "Dark Red Melange"]
            ),
            "mens_red": make_product("Mens Red Top", "Tops", "Men", color="red"),
            "hidden": make_product("Draft Top", "Tops", "Women", color="red", is_published=False),
            "shirt": make_product("Red Shirt", "Shirts", "Women", color="red"),
            "upper": make_product("Caps Top", "TOPS", "Women", color="crimson red"),
        }

    def test_all_facets_filter(self, catalog_rows):
        predicate = build_predicate(extract_intent("red top for women"))
        names = set(ProductRepository.search(predicate).values_list("name", flat=True))
        assert names == {"Red Top", "Blue Top", "Caps Top"}

    def test_variant_match_is_not_duplicated(self, catalog_rows):
        predicate = QueryPredicate(category_equals="Tops", color_matches="red")
        results = list(ProductRepository.search(predicate))
        assert len(results) == len({p.pk for p in results})

    def test_unpublished_never_returned(self, catalog_rows):
        results = Product.objects.filter(QueryPredicate().to_q())
        assert catalog_rows["hidden"] not in results
        assert results.count() == 5
