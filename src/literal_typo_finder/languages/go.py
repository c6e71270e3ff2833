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
Go string literal extractor using tree-sitter.

Extracts interpreted ("...") and raw (`...`) literals outside imports.
"""

from .base import TreeSitterExtractor


class GoExtractor(TreeSitterExtractor):
    """AST-aware Go literal extractor."""

    STRING_NODE_TYPES = ("interpreted_string_literal", "raw_string_literal")
    IMPORT_NODE_TYPES = ("import_declaration",)
    GRAMMAR_PACKAGE = "tree-sitter-go"

    def _load_language(self):
        import tree_sitter_go as tsgo
        return tsgo.language()
