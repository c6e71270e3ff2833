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
Base extractor interface.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from pathlib import Path
import re

from ..models import Position, StringLiteral


# Opening delimiter (with optional prefix such as f, b, r, L, u8, @, $)
# followed by the body and the matching closing delimiter
_DELIMITED_RE = re.compile(
    r'^[A-Za-z0-9_@$]*?("""|\'\'\'|"|\'|`)(.*)\1$',
    re.DOTALL,
)


def strip_delimiters(text: str) -> str:
    """Remove quotes and string prefixes from a literal's source text."""
    match = _DELIMITED_RE.match(text)
    if match:
        return match.group(2)
    return text


class BaseExtractor(ABC):
    """Abstract base class for language-specific literal extractors."""

    @abstractmethod
    def extract(
        self,
        content: str,
        file_path: Path,
        language: str,
    ) -> List[StringLiteral]:
        """
        Extract string literals from file content.

        Args:
            content: Full file content
            file_path: Relative path to file
            language: Detected language

        Returns:
            List of StringLiteral objects in source order
        """
        pass


class TreeSitterExtractor(BaseExtractor):
    """
    AST-aware extractor driven by a tree-sitter grammar.

    Subclasses name the grammar package and the node types that hold
    string literals or import declarations.
    """

    # tree-sitter node types whose text is a string literal
    STRING_NODE_TYPES: Tuple[str, ...] = ()
    # Subtrees never searched for literals (imports, includes, ...)
    IMPORT_NODE_TYPES: Tuple[str, ...] = ()
    # pip package providing the grammar, for the install hint
    GRAMMAR_PACKAGE = ""

    def __init__(self):
        self._parser = None
        self._language = None

    @abstractmethod
    def _load_language(self):
        """Return the grammar's language pointer (e.g. tspython.language())."""

    def _ensure_parser(self):
        """Lazy-load tree-sitter parser."""
        if self._parser is not None:
            return

        try:
            from tree_sitter import Language, Parser

            self._language = Language(self._load_language())
            self._parser = Parser(self._language)
        except ImportError as e:
            raise ImportError(
                f"{self.GRAMMAR_PACKAGE} not installed. "
                f"Install with: pip install {self.GRAMMAR_PACKAGE}"
            ) from e

    def extract(
        self,
        content: str,
        file_path: Path,
        language: str,
    ) -> List[StringLiteral]:
        """Walk the syntax tree and collect string literals."""
        self._ensure_parser()

        source = content.encode("utf-8")
        tree = self._parser.parse(source)
        literals = []

        # Depth-first, children pushed reversed to keep source order
        stack = [tree.root_node]
        while stack:
            node = stack.pop()

            if node.type in self.IMPORT_NODE_TYPES or self._is_skipped(node):
                continue

            # Named check: some grammars also have keyword tokens typed "string"
            if node.is_named and node.type in self.STRING_NODE_TYPES:
                literals.append(StringLiteral(
                    value=self._literal_value(node, source),
                    position=Position(
                        file_path=file_path,
                        line=node.start_point[0] + 1,  # 1-indexed
                        column=node.start_point[1] + 1,
                    ),
                    language=language,
                ))
                continue  # Don't recurse into literals

            stack.extend(reversed(node.children))

        return literals

    def _is_skipped(self, node) -> bool:
        """Hook for language-specific exclusions beyond import nodes."""
        return False

    def _literal_value(self, node, source: bytes) -> str:
        """Text between the opening and closing delimiter tokens."""
        if node.child_count >= 2:
            start = node.children[0].end_byte
            end = node.children[-1].start_byte
            if end >= start:
                return source[start:end].decode("utf-8", errors="replace")
        text = source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")
        return strip_delimiters(text)

    @staticmethod
    def _node_text(node) -> Optional[str]:
        if node is None:
            return None
        return node.text.decode("utf-8")
