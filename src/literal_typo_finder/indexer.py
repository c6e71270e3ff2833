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
Code indexer - extracts string literals from source files and builds
the BK-tree over them.

Files are parsed in parallel but consumed in sorted path order, so the
same tree always produces the same index.
"""

from pathlib import Path
from typing import Callable, List, Optional, Tuple
from concurrent.futures import ThreadPoolExecutor
import fnmatch
import os
import re

from .bktree import BKTree, build_index
from .models import StringLiteral
from .languages import get_extractor, detect_language, extensions_for_language, all_extensions


# Default patterns to always exclude
DEFAULT_EXCLUDES = [
    "*.git/*",
    "*node_modules/*",
    "*__pycache__/*",
    "*venv/*",
    "*.egg-info/*",
    "*build/*",
    "*dist/*",
    "*.tox/*",
    "*target/*",  # Rust
    "*vendor/*",  # Go, PHP
    "*.cache/*",
]

# printf-style placeholders ("%d", "%-10s", "%(name)s", "%%") and
# brace-style fields ("{}", "{0}", "{name}")
# Adapted from https://stackoverflow.com/a/29403060
FORMAT_PLACEHOLDER_RE = re.compile(
    r"%(?:\x25\x25)"
    r"|(\x25(?:(?:[1-9]\d*)\$|\((?:[^\)]+)\))?(?:\+)?(?: )?(?:\#)?(?:0|'[^$])?(?:-)?"
    r"(?:\d+)?(?:\.(?:\d+))?(?:[vT%bcdoqxXUeEfFgGsqp]))"
    r"|\{[^{}]*\}"
)

# Literals up to this length that contain a placeholder are format strings
MAX_PLACEHOLDER_LENGTH = 5


def is_format_placeholder(value: str) -> bool:
    """True for short literals that are just formatting directives."""
    return len(value) <= MAX_PLACEHOLDER_LENGTH and FORMAT_PLACEHOLDER_RE.search(value) is not None


def should_index(value: str, min_length: int = 1) -> bool:
    """Decide whether a literal is worth matching."""
    if not value or len(value) < min_length:
        return False
    return not is_format_placeholder(value)


def collect_literals(
    root_path: Path,
    exclude_patterns: Optional[List[str]] = None,
    focus_patterns: Optional[List[str]] = None,
    forced_language: Optional[str] = None,
    min_length: int = 1,
    verbose: bool = False,
    on_progress: Optional[Callable[[int, int, str], None]] = None,
) -> List[StringLiteral]:
    """
    Extract indexable string literals from a codebase.

    Args:
        root_path: Root directory to scan
        exclude_patterns: Glob patterns to exclude (added to defaults)
        focus_patterns: Only include files matching these patterns
        forced_language: Force all files to be parsed as this language
        min_length: Shortest literal to keep
        verbose: Print warnings for unreadable files
        on_progress: Callback(current, total, message)

    Returns:
        List of StringLiteral objects in file order, then source order
    """
    # Combine default and user excludes
    all_excludes = DEFAULT_EXCLUDES + (exclude_patterns or [])

    source_files = _find_source_files(
        root_path=root_path,
        exclude_patterns=all_excludes,
        focus_patterns=focus_patterns,
        forced_language=forced_language,
    )

    if verbose:
        print(f"   Found {len(source_files)} source files")

    literals: List[StringLiteral] = []
    total = len(source_files)

    with ThreadPoolExecutor(max_workers=os.cpu_count()) as executor:
        futures = [
            executor.submit(_process_file, file_path, root_path, forced_language)
            for file_path in source_files
        ]

        # Consume in submission order to keep insertion order stable
        for processed, (file_path, future) in enumerate(zip(source_files, futures), 1):
            try:
                extracted = future.result()
            except OSError as e:
                extracted = []
                if verbose:
                    print(f"   Warning: Failed to process {file_path}: {e}")

            literals.extend(lit for lit in extracted if should_index(lit.value, min_length))

            if on_progress:
                on_progress(processed, total, "files")

    return literals


def index_codebase(
    root_path: Path,
    exclude_patterns: Optional[List[str]] = None,
    focus_patterns: Optional[List[str]] = None,
    forced_language: Optional[str] = None,
    min_length: int = 1,
    verbose: bool = False,
    on_progress: Optional[Callable[[int, int, str], None]] = None,
) -> Tuple[BKTree, List[str]]:
    """
    Index a codebase's string literals.

    Returns:
        (tree, candidates) where candidates are the distinct raw literal
        values in first-seen order
    """
    literals = collect_literals(
        root_path=root_path,
        exclude_patterns=exclude_patterns,
        focus_patterns=focus_patterns,
        forced_language=forced_language,
        min_length=min_length,
        verbose=verbose,
        on_progress=on_progress,
    )

    tree = build_index((lit.value, lit.position) for lit in literals)
    candidates = list(dict.fromkeys(lit.value for lit in literals))

    if verbose:
        print(f"   Indexed {tree.size} distinct literals ({len(literals)} occurrences)")

    return tree, candidates


def _find_source_files(
    root_path: Path,
    exclude_patterns: List[str],
    focus_patterns: Optional[List[str]],
    forced_language: Optional[str],
) -> List[Path]:
    """Find all source files matching criteria, sorted by relative path."""
    source_files = []

    # Determine which extensions to look for
    if forced_language:
        extensions = extensions_for_language(forced_language)
    else:
        extensions = all_extensions()

    for file_path in root_path.rglob("*"):
        if not file_path.is_file():
            continue

        # Check extension
        if file_path.suffix.lower() not in extensions:
            continue

        # Make relative for pattern matching
        rel_path = file_path.relative_to(root_path).as_posix()

        # Check excludes
        if any(fnmatch.fnmatch(rel_path, pat) or fnmatch.fnmatch(str(file_path), pat)
               for pat in exclude_patterns):
            continue

        # Check focus patterns (if specified, file must match at least one)
        if focus_patterns:
            if not any(fnmatch.fnmatch(rel_path, pat) or fnmatch.fnmatch(file_path.name, pat)
                       for pat in focus_patterns):
                continue

        source_files.append(file_path)

    return sorted(source_files, key=lambda p: p.relative_to(root_path).as_posix())


def _process_file(
    file_path: Path,
    root_path: Path,
    forced_language: Optional[str],
) -> List[StringLiteral]:
    """Extract every string literal from a single file."""
    language = forced_language or detect_language(file_path)
    if not language:
        return []

    content = file_path.read_text(encoding="utf-8", errors="replace")

    extractor = get_extractor(language)
    return extractor.extract(
        content=content,
        file_path=file_path.relative_to(root_path),
        language=language,
    )
