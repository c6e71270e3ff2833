from pathlib import Path

import pytest

from literal_typo_finder.bktree import build_index
from literal_typo_finder.collector import MatchSet, collect_matches, group_results
from literal_typo_finder.models import Position


def _index(words):
    pairs = [
        (word, Position(Path("src/app.py"), line, 1))
        for line, word in enumerate(words, 1)
    ]
    return build_index(pairs), words


def test_reciprocal_pair_is_reported_once() -> None:
    tree, candidates = _index(["Hello", "Hella"])

    result = collect_matches(tree, candidates, radius=1)

    assert result.queries == ["Hello"]
    (assoc,) = result["Hello"]
    assert assoc.word == "hella"
    assert assoc.label == "Hello <-> hella"
    assert str(assoc.position) == "src/app.py:2:1"


def test_identical_match_set_keeps_first_query_only() -> None:
    tree, candidates = _index(["cat", "cats", "cot"])

    result = collect_matches(tree, candidates, radius=1)

    # "cats" and "cot" both match exactly ["cat"]; "cot" comes later
    assert result.queries == ["cat", "cats"]
    assert "cot" not in result
    assert [a.word for a in result["cat"]] == ["cats", "cot"]
    assert [a.word for a in result["cats"]] == ["cat"]


def test_query_dedup_mode_keeps_distinct_queries() -> None:
    tree, candidates = _index(["cat", "cats", "cot"])

    result = collect_matches(tree, candidates, radius=1, dedup="query")

    assert result.queries == ["cat", "cats", "cot"]


def test_candidates_without_neighbours_are_omitted() -> None:
    tree, candidates = _index(["Hello", "Hella", "completely different"])

    result = collect_matches(tree, candidates, radius=2)

    assert "completely different" not in result
    assert len(result) == 1


def test_radius_zero_yields_empty_result() -> None:
    tree, candidates = _index(["Hello", "Hella", "Help"])

    result = collect_matches(tree, candidates, radius=0)

    assert len(result) == 0
    assert not result
    assert result.match_count == 0


def test_hits_are_sorted_by_normalized_word() -> None:
    tree, candidates = _index(["bat", "Zat", "cat", "Aat"])

    result = collect_matches(tree, ["bat"], radius=1)

    assert [a.word for a in result["bat"]] == ["aat", "cat", "zat"]


def test_repeated_candidates_are_queried_once() -> None:
    tree, _ = _index(["Hello", "Hella"])

    result = collect_matches(tree, ["Hello", "Hello", "Hella"], radius=1)

    assert result.queries == ["Hello"]


def test_collect_does_not_mutate_index() -> None:
    tree, candidates = _index(["Hello", "Hella", "Help", "World"])
    before = sorted((n.word, len(n.children)) for n in tree)

    collect_matches(tree, candidates, radius=2)

    assert sorted((n.word, len(n.children)) for n in tree) == before
    assert tree.size == 4


def test_parallel_search_matches_sequential() -> None:
    words = [
        "Hello", "Hella", "Help", "World", "Word", "config", "confg",
        "cat", "cats", "cot", "settings", "setting", "receive", "recieve",
    ]
    tree, candidates = _index(words)

    sequential = collect_matches(tree, candidates, radius=2)
    parallel = collect_matches(tree, candidates, radius=2, workers=4)

    assert parallel.queries == sequential.queries
    for query in sequential.queries:
        assert [a.label for a in parallel[query]] == [a.label for a in sequential[query]]


def test_progress_callback_reports_each_query() -> None:
    tree, candidates = _index(["Hello", "Hella", "World"])
    calls = []

    collect_matches(tree, candidates, radius=1, on_progress=lambda c, t, m: calls.append((c, t)))

    assert calls == [(1, 3), (2, 3), (3, 3)]


def test_unknown_dedup_mode_is_rejected() -> None:
    tree, candidates = _index(["Hello"])

    with pytest.raises(ValueError):
        collect_matches(tree, candidates, radius=1, dedup="bogus")


def test_rows_expose_position_word_and_label() -> None:
    tree, candidates = _index(["Hello", "Hella"])

    rows = list(collect_matches(tree, candidates, radius=1).rows())

    assert rows == [("Hello", [(Position(Path("src/app.py"), 2, 1), "hella", "Hello <-> hella")])]


def test_digest_depends_on_hit_content() -> None:
    tree, _ = _index(["cat", "cats", "cot"])

    first = MatchSet.from_hits("cats", tree.search("cats", 1))
    second = MatchSet.from_hits("cot", tree.search("cot", 1))
    other = MatchSet.from_hits("cat", tree.search("cat", 1))

    assert first.digest() == second.digest()
    assert first.digest() != other.digest()


def test_grouping_key_is_symmetric() -> None:
    tree, _ = _index(["Hello", "Hella"])

    forward = MatchSet.from_hits("Hello", tree.search("Hello", 1))
    backward = MatchSet.from_hits("Hella", tree.search("Hella", 1))

    assert forward.grouping_key() == backward.grouping_key()
    assert list(group_results([forward, backward])) == list(group_results([forward]))
