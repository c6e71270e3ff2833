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
Language-specific string literal extraction.

Uses tree-sitter for AST-aware extraction where a grammar is bundled,
falls back to a generic quoted-string scanner for other languages.
"""

from pathlib import Path
from typing import Callable, Dict, Optional, Set

from .base import BaseExtractor
from .generic import GenericExtractor
from .python import PythonExtractor
from .go import GoExtractor
from .javascript import JavaScriptExtractor, TypeScriptExtractor
from .java import JavaExtractor
from .c import CExtractor
from .cpp import CppExtractor
from .csharp import CSharpExtractor
from .ruby import RubyExtractor


# Language registry - maps language name to extractor factory
_EXTRACTOR_REGISTRY: Dict[str, Callable[[], BaseExtractor]] = {}

# Extension to language mapping
EXTENSION_MAP = {
    ".py": "python",
    ".pyw": "python",
    ".go": "go",
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".tsx": "tsx",
    ".java": "java",
    ".c": "c",
    ".h": "c",
    ".cpp": "cpp",
    ".cc": "cpp",
    ".cxx": "cpp",
    ".hpp": "cpp",
    ".hxx": "cpp",
    ".cs": "csharp",
    ".rb": "ruby",
    # Generic extractor
    ".php": "php",
    ".kt": "kotlin",
    ".kts": "kotlin",
    ".scala": "scala",
    ".swift": "swift",
    ".lua": "lua",
    ".rs": "rust",
    ".sh": "bash",
    ".bash": "bash",
}

# Languages we have tree-sitter support for
SUPPORTED_LANGUAGES = {
    "python", "go", "javascript", "typescript", "tsx", "java",
    "c", "cpp", "csharp", "ruby",
}


def register_extractor(language: str, factory: Callable[[], BaseExtractor]) -> None:
    """Register an extractor factory for a language."""
    _EXTRACTOR_REGISTRY[language.lower()] = factory


def get_extractor(language: str) -> BaseExtractor:
    """
    Get an extractor instance for the given language.

    Falls back to the generic extractor if no specific one exists.
    """
    factory = _EXTRACTOR_REGISTRY.get(language.lower())
    if factory is None:
        return GenericExtractor()
    return factory()


def detect_language(file_path: Path) -> Optional[str]:
    """Detect language from file extension."""
    return EXTENSION_MAP.get(file_path.suffix.lower())


def extensions_for_language(language: str) -> Set[str]:
    """File extensions mapped to a language (typescript includes .tsx)."""
    language = language.lower()
    names = {"typescript", "tsx"} if language in ("typescript", "tsx") else {language}
    return {ext for ext, lang in EXTENSION_MAP.items() if lang in names}


def all_extensions() -> Set[str]:
    """All file extensions we know how to scan."""
    return set(EXTENSION_MAP)


register_extractor("python", PythonExtractor)
register_extractor("go", GoExtractor)
register_extractor("javascript", JavaScriptExtractor)
register_extractor("typescript", TypeScriptExtractor)
register_extractor("tsx", lambda: TypeScriptExtractor(tsx=True))
register_extractor("java", JavaExtractor)
register_extractor("c", CExtractor)
register_extractor("cpp", CppExtractor)
register_extractor("csharp", CSharpExtractor)
register_extractor("ruby", RubyExtractor)
