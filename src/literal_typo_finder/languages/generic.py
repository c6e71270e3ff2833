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
Generic fallback extractor using a quoted-string regex.

Used for languages without a tree-sitter grammar here. It does not
understand comments, so apostrophes in comments can produce noise.
"""

from typing import List
from pathlib import Path
import re

from .base import BaseExtractor
from ..models import Position, StringLiteral


# Single-line "...", '...' and `...` literals with backslash escapes
QUOTED_STRING_RE = re.compile(
    r'"((?:\\.|[^"\\\n])*)"'
    r"|'((?:\\.|[^'\\\n])*)'"
    r"|`((?:\\.|[^`\\\n])*)`"
)


class GenericExtractor(BaseExtractor):
    """Fallback extractor scanning for quoted strings."""

    def extract(
        self,
        content: str,
        file_path: Path,
        language: str,
    ) -> List[StringLiteral]:
        """Extract quoted strings line by line."""
        literals = []

        for line_no, line in enumerate(content.split("\n"), 1):
            for match in QUOTED_STRING_RE.finditer(line):
                value = next(g for g in match.groups() if g is not None)
                # Byte column, to agree with tree-sitter positions
                column = len(line[:match.start()].encode("utf-8")) + 1
                literals.append(StringLiteral(
                    value=value,
                    position=Position(
                        file_path=file_path,
                        line=line_no,
                        column=column,
                    ),
                    language=language,
                ))

        return literals
