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
Edit distance between string literals.

Unit-cost Damerau-Levenshtein distance (insertions, deletions,
substitutions and adjacent transpositions), computed by rapidfuzz.
"""

from rapidfuzz.distance import DamerauLevenshtein


def normalize(word: str) -> str:
    """Canonical case-insensitive form used for indexing and queries."""
    return word.lower()


def distance(a: str, b: str) -> int:
    """
    Damerau-Levenshtein distance between two strings.

    Returns 0 only when the strings are identical. Callers are expected
    to pass normalized strings; no case folding happens here.
    """
    if a == b:
        return 0
    return DamerauLevenshtein.distance(a, b)
