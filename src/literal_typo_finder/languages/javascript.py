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
JavaScript/TypeScript string literal extractor using tree-sitter.

Extracts quoted strings and template strings. Module specifiers of
import/export statements and require() calls are skipped.
"""

from .base import TreeSitterExtractor


class JavaScriptExtractor(TreeSitterExtractor):
    """AST-aware JavaScript literal extractor."""

    STRING_NODE_TYPES = ("string", "template_string")
    IMPORT_NODE_TYPES = ("import_statement",)
    GRAMMAR_PACKAGE = "tree-sitter-javascript"

    def _load_language(self):
        import tree_sitter_javascript as tsjavascript
        return tsjavascript.language()

    def _is_skipped(self, node) -> bool:
        # export { x } from "module"
        if node.type == "string" and node.parent is not None:
            if node.parent.type == "export_statement":
                return node.parent.child_by_field_name("source") == node

        # require("module") / import("module")
        if node.type == "call_expression":
            function = node.child_by_field_name("function")
            if function is not None and function.type in ("identifier", "import"):
                return self._node_text(function) in ("require", "import")

        return False


class TypeScriptExtractor(JavaScriptExtractor):
    """TypeScript variant; the TSX grammar is used for .tsx files."""

    GRAMMAR_PACKAGE = "tree-sitter-typescript"

    def __init__(self, tsx: bool = False):
        super().__init__()
        self.tsx = tsx

    def _load_language(self):
        import tree_sitter_typescript as tstypescript
        if self.tsx:
            return tstypescript.language_tsx()
        return tstypescript.language_typescript()
