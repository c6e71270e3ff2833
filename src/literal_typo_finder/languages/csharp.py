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
C# string literal extractor using tree-sitter.
"""

from .base import TreeSitterExtractor, strip_delimiters


class CSharpExtractor(TreeSitterExtractor):
    """AST-aware C# literal extractor (regular, verbatim, raw, interpolated)."""

    STRING_NODE_TYPES = (
        "string_literal",
        "verbatim_string_literal",
        "raw_string_literal",
        "interpolated_string_expression",
    )
    IMPORT_NODE_TYPES = ("using_directive",)
    GRAMMAR_PACKAGE = "tree-sitter-c-sharp"

    def _load_language(self):
        import tree_sitter_c_sharp as tscsharp
        return tscsharp.language()

    def _literal_value(self, node, source: bytes) -> str:
        # Interpolated strings open with a "$" token and contain holes as
        # separate children, so cut the delimiters from the whole node text
        return strip_delimiters(self._node_text(node))
