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
Ruby string literal extractor using tree-sitter.

Arguments of require/require_relative/load are skipped.
"""

from .base import TreeSitterExtractor


REQUIRE_METHODS = ("require", "require_relative", "load")


class RubyExtractor(TreeSitterExtractor):
    """AST-aware Ruby literal extractor."""

    STRING_NODE_TYPES = ("string",)
    GRAMMAR_PACKAGE = "tree-sitter-ruby"

    def _load_language(self):
        import tree_sitter_ruby as tsruby
        return tsruby.language()

    def _is_skipped(self, node) -> bool:
        if node.type != "call":
            return False
        if node.child_by_field_name("receiver") is not None:
            return False
        method = node.child_by_field_name("method")
        return self._node_text(method) in REQUIRE_METHODS
