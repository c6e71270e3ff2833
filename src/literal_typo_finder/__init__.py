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
Literal Typo Finder - find near-duplicate string literals in source code.

Indexes every string literal in a BK-tree keyed by Damerau-Levenshtein
distance, then queries each literal against the tree to surface likely
typos ("Hello" vs "Hella") that exact-match tooling misses.
"""

__version__ = "0.1.0"

from .distance import distance, normalize
from .bktree import BKTree, IndexedWord, build_index
from .collector import MatchSet, collect_matches
from .models import Association, GroupedResult, Position, StringLiteral
from .indexer import collect_literals, index_codebase
from .reporter import report_matches
from .config import load_config, find_config_file

__all__ = [
    "__version__",
    "distance",
    "normalize",
    "BKTree",
    "IndexedWord",
    "build_index",
    "MatchSet",
    "collect_matches",
    "Association",
    "GroupedResult",
    "Position",
    "StringLiteral",
    "collect_literals",
    "index_codebase",
    "report_matches",
    "load_config",
    "find_config_file",
]
