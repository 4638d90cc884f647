"""Tests for the derived views."""

import random
from collections import Counter

import pytest
from fakes import make_neologism

from neologism_cache import queries
from neologism_cache.entities import NeologismStatus


@pytest.fixture
def words():
    return [
        make_neologism("C", minutes=3, name="Snackrifice", category_id="food",
                       definition="Giving up the LAST snack", root_words=("snack", "sacrifice")),
        make_neologism("B", minutes=2, name="Quantoodle", category_id="sci", status="Draft",
                       definition="A doodle drawn in physics", root_words=("Quantum", "doodle")),
        make_neologism("A", minutes=1, name="Glimmerance", category_id=None, status="Archived",
                       definition="The glow of a memory", root_words=("glimmer", "radiance")),
    ]


@pytest.mark.parametrize("query", ["", None])
def test_search_without_query_returns_everything_in_order(words, query):
    assert queries.search_neologisms(words, query) == words


@pytest.mark.parametrize(
    "query, expected",
    [
        ("snack", ["C"]),            # name and root word
        ("last", ["C"]),             # definition, case-insensitive
        ("QUANTUM", ["B"]),          # root word only
        ("oo", ["B"]),
        ("a", ["C", "B", "A"]),
        ("zzz", []),
    ],
)
def test_search_matches_name_definition_and_root_words(words, query, expected):
    found = queries.search_neologisms(words, query)

    assert [n.id for n in found] == expected
    assert all(n in words for n in found)


def test_search_does_not_mutate_input(words):
    original = list(words)
    queries.search_neologisms(words, "snack")
    assert words == original


@pytest.mark.parametrize("sentinel", ["", "all", None])
def test_category_filter_sentinels(words, sentinel):
    assert queries.filter_by_category(words, sentinel) == words


def test_category_filter_matches_id(words):
    assert [n.id for n in queries.filter_by_category(words, "sci")] == ["B"]
    assert queries.filter_by_category(words, "Science") == []


@pytest.mark.parametrize("sentinel", ["", "all", None])
def test_status_filter_sentinels(words, sentinel):
    assert queries.filter_by_status(words, sentinel) == words


def test_status_filter_accepts_enum_and_string(words):
    assert [n.id for n in queries.filter_by_status(words, NeologismStatus.DRAFT)] == ["B"]
    assert [n.id for n in queries.filter_by_status(words, "Archived")] == ["A"]


def test_latest_is_head_of_sequence(words):
    assert queries.get_latest_neologism(words).id == "C"
    assert queries.get_latest_neologism([]) is None


def test_random_only_samples_ready_records(words):
    rng = random.Random(3)
    assert {queries.get_random_neologism(words, rng=rng).id for _ in range(50)} == {"C"}


def test_random_is_none_without_ready_records(words):
    assert queries.get_random_neologism(words[1:]) is None
    assert queries.get_random_neologism([]) is None


def test_random_samples_uniformly():
    ready = [make_neologism(str(i), minutes=i) for i in range(5)]
    rng = random.Random(42)

    counts = Counter(queries.get_random_neologism(ready, rng=rng).id for _ in range(5000))

    assert set(counts) == {"0", "1", "2", "3", "4"}
    assert all(800 < c < 1200 for c in counts.values())


def test_sticky_id_wins_while_present(words):
    # Sticky record is returned even though it is not Ready
    picks = {queries.get_random_neologism(words, sticky_id="B", rng=random.Random(i)).id for i in range(100)}
    assert picks == {"B"}


def test_missing_sticky_id_falls_back_to_sampling(words):
    assert queries.get_random_neologism(words, sticky_id="gone").id == "C"
