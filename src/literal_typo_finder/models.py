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
Data models for literal-typo-finder.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Tuple
from pathlib import Path

if TYPE_CHECKING:
    from .bktree import IndexedWord


@dataclass(frozen=True)
class Position:
    """Where a string literal starts in the scanned tree."""

    file_path: Path          # Relative path from root
    line: int                # 1-indexed
    column: int              # 1-indexed byte column

    def __str__(self) -> str:
        return f"{self.file_path}:{self.line}:{self.column}"


@dataclass
class StringLiteral:
    """A string literal extracted from a source file."""

    value: str               # Content without quotes or prefixes
    position: Position
    language: str

    def __len__(self) -> int:
        return len(self.value)


@dataclass(frozen=True)
class Association:
    """A matched node and the label relating it to its query."""

    node: "IndexedWord"
    label: str               # "<query> <-> <matched word>"

    @property
    def word(self) -> str:
        return self.node.word

    @property
    def position(self) -> Any:
        return self.node.position


@dataclass(frozen=True)
class GroupedResult:
    """
    Final approximate matches, keyed by representative query.

    Reciprocal pairs are already collapsed: each relationship between
    two literals appears once. Query order is first-seen order.
    """

    groups: Dict[str, Tuple[Association, ...]] = field(default_factory=dict)

    def __iter__(self) -> Iterator[Tuple[str, Tuple[Association, ...]]]:
        return iter(self.groups.items())

    def __len__(self) -> int:
        return len(self.groups)

    def __contains__(self, query: object) -> bool:
        return query in self.groups

    def __getitem__(self, query: str) -> Tuple[Association, ...]:
        return self.groups[query]

    @property
    def queries(self) -> List[str]:
        """Representative queries in output order."""
        return list(self.groups)

    @property
    def match_count(self) -> int:
        """Total number of associations across all queries."""
        return sum(len(assocs) for assocs in self.groups.values())

    def rows(self) -> Iterator[Tuple[str, List[Tuple[Any, str, str]]]]:
        """Yield (query, [(position, matched word, label), ...]) for display."""
        for query, assocs in self.groups.items():
            yield query, [(a.position, a.word, a.label) for a in assocs]
