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
Python string literal extractor using tree-sitter.

Covers plain, raw, byte and f-strings. Docstrings are skipped.
"""

from .base import TreeSitterExtractor


DOCSTRING_OWNERS = ("function_definition", "class_definition")


class PythonExtractor(TreeSitterExtractor):
    """AST-aware Python literal extractor."""

    STRING_NODE_TYPES = ("string",)
    IMPORT_NODE_TYPES = (
        "import_statement",
        "import_from_statement",
        "future_import_statement",
    )
    GRAMMAR_PACKAGE = "tree-sitter-python"

    def _load_language(self):
        import tree_sitter_python as tspython
        return tspython.language()

    def _is_skipped(self, node) -> bool:
        # A docstring is a bare string as the first statement of a module,
        # class or function body
        if not (
            node.type == "expression_statement"
            and node.named_child_count == 1
            and node.named_children[0].type == "string"
        ):
            return False

        parent = node.parent
        if parent is None:
            return False
        if parent.type == "block":
            owner = parent.parent
            if owner is None or owner.type not in DOCSTRING_OWNERS:
                return False
        elif parent.type != "module":
            return False

        statements = [c for c in parent.named_children if c.type != "comment"]
        return bool(statements) and statements[0] == node
