"""
Tests for free-text relevance scoring.
"""

import pytest

from switcher.catalog import CatalogItem
from switcher.scoring import STOP_WORDS, ScoredItem, query_words, score
from switcher.tags import TagSet, synthesize


def _score(query, catalog, tag_index, key):
    return score(query, catalog[key], tag_index[key])


class TestQueryWords:
    def test_lowercases_and_splits(self):
        assert query_words("  Coffee   SHOP ") == ["coffee", "shop"]

    def test_drops_stop_words_and_single_chars(self):
        assert query_words("a free bootstrap template for x dentist") == ["dentist"]

    def test_empty(self):
        assert query_words("") == []
        assert query_words(None) == []


class TestScore:
    """Per-field tiers and bonuses."""

    def test_tag_match_scores_three(self, catalog, tag_index):
        assert _score("shop", catalog, tag_index, "cozastore") == 3

    def test_no_match_scores_zero(self, catalog, tag_index):
        assert _score("shop", catalog, tag_index, "dento") == 0

    def test_name_match_scores_ten(self, catalog, tag_index):
        assert _score("coffee", catalog, tag_index, "coffeeblend") == 10

    def test_category_match_scores_eight(self, catalog, tag_index):
        assert _score("medical", catalog, tag_index, "dento") == 8

    def test_first_matching_field_wins(self):
        item = CatalogItem(key="shop", name="Shop", category="Shop")
        tags = TagSet(tokens=("shop",))
        # name, category and tags all contain the word; only the name counts
        assert score("shop", item, tags) == 10

    def test_two_word_query_gets_both_bonuses(self, catalog, tag_index):
        # "ecommerce" is the category (+8), "shop" a tag (+3),
        # two matched words (+4) and every word matched (+20)
        assert _score("ecommerce shop", catalog, tag_index, "cozastore") == 35
        assert _score("ecommerce shop", catalog, tag_index, "dento") == 0

    def test_partial_match_gets_multi_word_bonus_only(self):
        item = CatalogItem(key="k", name="Coffee Blend", category="Restaurant")
        tags = synthesize("k", "Coffee Blend", "Restaurant")
        # coffee (+10), blend (+10), 2 matched (+4); "zzzz" misses
        assert score("coffee blend zzzz", item, tags) == 24
        # all three words match now: +20 on top of 10 + 10 + 3 + 6
        assert score("coffee blend bakery", item, tags) == 49

    def test_single_word_gets_no_bonus(self, catalog, tag_index):
        assert _score("dento", catalog, tag_index, "dento") == 10

    def test_all_words_bonus_is_decisive(self, catalog, tag_index):
        # "doc" hits both medical items, "clinic" only their tags;
        # matching both words beats any single-word tier
        both = _score("doc clinic", catalog, tag_index, "docmed")
        single = _score("doc", catalog, tag_index, "docmed")
        assert both > single + 3
        assert both == 10 + 3 + 4 + 20

    def test_substring_of_multi_word_tag(self):
        item = CatalogItem(key="homeland", name="Homeland", category="Property")
        tags = synthesize("homeland", "Homeland", "Property")
        # "estat" is only inside the "real-estate" tag
        assert score("estat", item, tags) == 3

    def test_script_like_input_is_plain_text(self, catalog, tag_index):
        query = "<script>alert(1)</script> .* (shop|store)"
        for key in catalog.keys():
            assert _score(query, catalog, tag_index, key) >= 0
        assert _score("(shop|store)", catalog, tag_index, "cozastore") == 0


class TestStopWordNeutrality:
    @pytest.mark.parametrize("query", ["", "   ", "the template", "free bootstrap 2025 theme", "a b c"])
    def test_degenerate_query_scores_one(self, catalog, tag_index, query):
        for key in catalog.keys():
            assert _score(query, catalog, tag_index, key) == 1

    def test_stop_words_cover_years(self):
        assert {"2024", "2025", "2026"} <= STOP_WORDS


class TestDeterminism:
    def test_repeated_calls_agree(self, catalog, tag_index):
        for key in catalog.keys():
            results = {_score("dark ecommerce shop", catalog, tag_index, key) for _ in range(3)}
            assert len(results) == 1


class TestScoredItem:
    def test_visible_needs_score_and_facets(self):
        assert ScoredItem("a", 3, True).visible
        assert not ScoredItem("a", 0, True).visible
        assert not ScoredItem("a", 3, False).visible
