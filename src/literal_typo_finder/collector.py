# Literal Typo Finder - Find near-duplicate string literals in source code
# Copyright (C) 2025  Jonathan Louis
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
Match collector - turns raw BK-tree hits into grouped results.

Every distinct candidate is queried against the finished index. Hit lists
are sorted, fingerprinted and deduplicated, then reciprocal pairs such as

    query "hello"  -> match "hella"
    query "hella"  -> match "hello"

are collapsed so each relationship is reported once.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Set, Tuple
import hashlib

from .bktree import BKTree, IndexedWord
from .models import Association, GroupedResult


# Dedup modes: first query per match set, or per (query, match set)
DEDUP_DIGEST = "digest"
DEDUP_QUERY = "query"
DEDUP_MODES = (DEDUP_DIGEST, DEDUP_QUERY)


@dataclass(frozen=True)
class MatchSet:
    """A query with its hits sorted by normalized word."""

    query: str
    hits: Tuple[IndexedWord, ...]

    @classmethod
    def from_hits(cls, query: str, hits: Iterable[IndexedWord]) -> "MatchSet":
        # sorted() is stable, so equal words keep traversal order
        return cls(query=query, hits=tuple(sorted(hits, key=lambda n: n.word)))

    @property
    def words(self) -> List[str]:
        return [node.word for node in self.hits]

    def digest(self) -> str:
        """SHA-256 fingerprint of the hit list content."""
        h = hashlib.sha256()
        for node in self.hits:
            h.update(node.word.encode("utf-8"))
            h.update(b"\x00")
            h.update(str(node.position).encode("utf-8"))
            h.update(b"\x01")
        return h.hexdigest()

    def grouping_key(self) -> str:
        """Symmetric key shared by a query and its reciprocal."""
        node_words = "".join(sorted(w.lower() for w in self.words))
        return "\x00".join(sorted([self.query.lower(), node_words]))


def search_all(
    tree: BKTree,
    queries: List[str],
    radius: int,
    workers: int = 0,
    on_progress: Optional[Callable[[int, int, str], None]] = None,
) -> List[MatchSet]:
    """
    Query the tree once per candidate.

    The tree is read-only here, so searches may run on a thread pool.
    Results are always returned in query order.
    """
    total = len(queries)

    def _search(query: str) -> MatchSet:
        return MatchSet.from_hits(query, tree.search(query, radius))

    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = []
            for i, match_set in enumerate(executor.map(_search, queries), 1):
                results.append(match_set)
                if on_progress:
                    on_progress(i, total, "literals searched")
            return results

    results = []
    for i, query in enumerate(queries, 1):
        results.append(_search(query))
        if on_progress:
            on_progress(i, total, "literals searched")
    return results


def collect_matches(
    tree: BKTree,
    candidates: Iterable[str],
    radius: int,
    dedup: str = DEDUP_DIGEST,
    workers: int = 0,
    on_progress: Optional[Callable[[int, int, str], None]] = None,
) -> GroupedResult:
    """
    Find approximate matches for every candidate and group them.

    Args:
        tree: Fully built index
        candidates: Candidate strings, first-seen order decides ties
        radius: Maximum edit distance for a match
        dedup: "digest" drops any later query whose sorted hits equal an
            earlier query's; "query" only drops repeats of the same query
        workers: Thread pool size for searching (0 or 1 = sequential)
        on_progress: Callback(current, total, message)

    Returns:
        GroupedResult mapping each retained query to its associations
    """
    if dedup not in DEDUP_MODES:
        raise ValueError(f"Unknown dedup mode: {dedup}")

    queries = list(dict.fromkeys(candidates))
    match_sets = search_all(tree, queries, radius, workers, on_progress)

    # Drop empty results and repeated match sets (first query wins)
    retained: List[MatchSet] = []
    seen_digests: Set[str] = set()
    for match_set in match_sets:
        if not match_set.hits:
            continue
        digest = match_set.digest()
        key = digest if dedup == DEDUP_DIGEST else f"{match_set.query}\x00{digest}"
        if key in seen_digests:
            continue
        seen_digests.add(key)
        retained.append(match_set)

    return group_results(retained)


def group_results(match_sets: Iterable[MatchSet]) -> GroupedResult:
    """Collapse reciprocal match sets, keeping the first of each pair."""
    groups: Dict[str, Tuple[Association, ...]] = {}
    encountered: Set[str] = set()

    for match_set in match_sets:
        key = match_set.grouping_key()
        if key in encountered:
            continue
        encountered.add(key)
        groups[match_set.query] = tuple(
            Association(node=node, label=f"{match_set.query} <-> {node.word}")
            for node in match_set.hits
        )

    return GroupedResult(groups=groups)
