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
BK-tree index over string literals.

Each node partitions its descendants by their exact edit distance to it,
so a range search can skip any child whose edge label lies outside
[d - radius, d + radius] of the distance d to the visited node.
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from .distance import distance, normalize


class IndexedWord:
    """A stored literal and its children keyed by distance."""

    __slots__ = ("word", "position", "children")

    def __init__(self, word: str, position: Any = None):
        self.word = normalize(word)
        self.position = position
        self.children: Dict[int, "IndexedWord"] = {}

    def __repr__(self) -> str:
        return f"IndexedWord({self.word!r}, {self.position!s})"


class BKTree:
    """Metric tree answering bounded edit-distance range queries."""

    def __init__(self):
        self.root: Optional[IndexedWord] = None
        self.size = 0

    def insert(self, word: str, position: Any = None) -> bool:
        """
        Insert a word with its provenance.

        Exact duplicates (after normalization) are ignored and keep the
        position of the first occurrence.

        Returns:
            True if a new node was stored
        """
        word = normalize(word)

        if self.root is None:
            self.root = IndexedWord(word, position)
            self.size += 1
            return True

        node = self.root
        while True:
            d = distance(node.word, word)
            if d == 0:
                return False
            child = node.children.get(d)
            if child is None:
                node.children[d] = IndexedWord(word, position)
                self.size += 1
                return True
            node = child

    def search(self, query: str, radius: int) -> List[IndexedWord]:
        """
        Find stored words within radius of query, excluding exact matches.

        Results come back in traversal order.
        """
        matches: List[IndexedWord] = []
        if self.root is None:
            return matches

        query = normalize(query)
        stack = [self.root]
        while stack:
            node = stack.pop()
            d = distance(node.word, query)
            if d != 0 and d <= radius:
                matches.append(node)

            low, high = d - radius, d + radius
            for key, child in node.children.items():
                if low <= key <= high:
                    stack.append(child)

        return matches

    def __len__(self) -> int:
        return self.size

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or self.root is None:
            return False
        word = normalize(word)
        node: Optional[IndexedWord] = self.root
        while node is not None:
            d = distance(node.word, word)
            if d == 0:
                return True
            node = node.children.get(d)
        return False

    def __iter__(self) -> Iterator[IndexedWord]:
        if self.root is None:
            return
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(node.children.values())


def build_index(pairs: Iterable[Tuple[str, Any]]) -> BKTree:
    """Build a BKTree from (word, position) pairs, inserted in order."""
    tree = BKTree()
    for word, position in pairs:
        tree.insert(word, position)
    return tree
