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
C++ string literal extractor using tree-sitter.

Handles raw string literals (R"delim(...)delim") in addition to C strings.
"""

from .base import TreeSitterExtractor


class CppExtractor(TreeSitterExtractor):
    """AST-aware C++ literal extractor."""

    STRING_NODE_TYPES = ("string_literal", "raw_string_literal")
    IMPORT_NODE_TYPES = ("preproc_include",)
    GRAMMAR_PACKAGE = "tree-sitter-cpp"

    def _load_language(self):
        import tree_sitter_cpp as tscpp
        return tscpp.language()

    def _literal_value(self, node, source: bytes) -> str:
        if node.type == "raw_string_literal":
            for child in node.children:
                if child.type == "raw_string_content":
                    return source[child.start_byte:child.end_byte].decode(
                        "utf-8", errors="replace"
                    )
        return super()._literal_value(node, source)
