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
CLI entry point for literal-typo-finder.

Usage:
    ltf [path] [options]
    ltf --help
"""

import os
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .collector import collect_matches, DEDUP_DIGEST, DEDUP_MODES
from .config import load_config
from .indexer import index_codebase
from .reporter import report_matches, OutputFormat


# Extension to output format mapping for -o FILE.EXT
EXTENSION_FORMAT_MAP = {
    '.md': 'markdown',
    '.html': 'html',
    '.json': 'json',
    '.txt': 'text',
}

DEFAULT_DISTANCE = 2


def merge_config_with_cli(
    config: dict,
    cli_value,
    config_key: str,
    default_value,
):
    """
    Merge config file value with CLI value.

    If CLI value differs from default, use CLI (user explicitly set it).
    Otherwise, use config value if present, else use default.
    """
    if cli_value != default_value:
        return cli_value
    return config.get(config_key, default_value)


def print_progress(current: int, total: int, message: str, width: int = 30):
    """Print a progress bar with message."""
    filled = int(width * current / max(total, 1))
    bar = "=" * filled + ">" + " " * (width - filled - 1) if filled < width else "=" * width
    # Use \r to overwrite line, \033[K to clear to end of line
    click.echo(f"\r   [{bar}] {current}/{total} {message}\033[K", nl=False)
    if current >= total:
        click.echo()


def _fail(message: str) -> None:
    click.echo(f"❌ Error: {message}", err=True)
    sys.exit(1)


@click.command()
@click.argument("path", type=click.Path(exists=True, file_okay=False, dir_okay=True), required=False)
@click.option(
    "-d", "--dist",
    type=click.IntRange(min=0),
    default=DEFAULT_DISTANCE,
    help=f"Damerau-Levenshtein distance threshold (default: {DEFAULT_DISTANCE})"
)
@click.option(
    "-o", "--output",
    type=str,
    default=None,
    help="Write report to file (report.txt, report.md, report.json, report.html)"
)
@click.option(
    "-e", "--exclude",
    multiple=True,
    help="Glob patterns to exclude (repeatable)"
)
@click.option(
    "-f", "--focus",
    multiple=True,
    help="Only analyze matching paths (repeatable)"
)
@click.option(
    "-l", "--lang",
    type=str,
    default=None,
    help="Force language detection"
)
@click.option(
    "--min-length",
    type=click.IntRange(min=1),
    default=1,
    help="Ignore literals shorter than this (default: 1)"
)
@click.option(
    "-w", "--workers",
    type=click.IntRange(min=0),
    default=0,
    help="Threads used to search the index (0=sequential)"
)
@click.option(
    "--dedup",
    type=click.Choice(DEDUP_MODES),
    default=DEDUP_DIGEST,
    help="Drop repeated match sets across queries (digest) or per query only (query)"
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Show extra detail for each stage"
)
@click.option(
    "-q", "--quiet",
    is_flag=True,
    help="Only print the report"
)
@click.version_option(version=__version__)
def main(
    path: Optional[str],
    dist: int,
    output: Optional[str],
    exclude: tuple,
    focus: tuple,
    lang: Optional[str],
    min_length: int,
    workers: int,
    dedup: str,
    verbose: bool,
    quiet: bool,
):
    """
    Find near-duplicate string literals that are likely typos.

    PATH is the root directory to analyze (default: current directory).

    Examples:

      # Report literals one edit apart
      ltf ./src --dist 1

      # Only Go sources, report as markdown
      ltf ./cmd --focus "*.go" -o typos.md
    """
    root_path = Path(path or os.getcwd()).resolve()

    # Config values override defaults, but explicit CLI args override config
    config = load_config(root_path)
    dist = merge_config_with_cli(config, dist, "distance", DEFAULT_DISTANCE)
    min_length = merge_config_with_cli(config, min_length, "min_length", 1)
    workers = merge_config_with_cli(config, workers, "workers", 0)
    dedup = merge_config_with_cli(config, dedup, "dedup", DEDUP_DIGEST)
    verbose = merge_config_with_cli(config, verbose, "verbose", False)

    # These are lists in config, tuples from CLI
    if not exclude and isinstance(config.get("exclude"), list):
        exclude = tuple(config["exclude"])
    if not focus and isinstance(config.get("focus"), list):
        focus = tuple(config["focus"])
    if lang is None and "lang" in config:
        lang = config["lang"]

    if not isinstance(dist, int) or dist < 0:
        _fail(f"distance must be a non-negative integer, got {dist!r}")
    if not isinstance(workers, int) or isinstance(workers, bool) or workers < 0:
        _fail(f"workers must be a non-negative integer, got {workers!r}")
    if not isinstance(min_length, int) or isinstance(min_length, bool) or min_length < 1:
        _fail(f"min_length must be a positive integer, got {min_length!r}")
    if dedup not in DEDUP_MODES:
        _fail(f"dedup must be one of {', '.join(DEDUP_MODES)}, got {dedup!r}")

    output_format = OutputFormat.TEXT
    if output:
        ext = Path(output).suffix.lower()
        if ext not in EXTENSION_FORMAT_MAP:
            valid_exts = ', '.join(EXTENSION_FORMAT_MAP.keys())
            _fail(f"Invalid output extension '{ext}'. Valid: {valid_exts}")
        output_format = OutputFormat(EXTENSION_FORMAT_MAP[ext])

    def progress(current: int, total: int, message: str) -> None:
        if not quiet:
            print_progress(current, total, message)

    if verbose and not quiet:
        if config:
            click.echo("📝 Loaded config from .ltfrc/.ltf.toml")
        click.echo(f"🔍 Analyzing: {root_path}")
        click.echo(f"   Distance: {dist}")
        click.echo(f"   Dedup: {dedup}")
        if workers > 1:
            click.echo(f"   Search workers: {workers}")

    # Stage 1: Index
    if not quiet:
        click.echo("📂 Stage 1: Indexing string literals...")
    tree, candidates = index_codebase(
        root_path=root_path,
        exclude_patterns=list(exclude),
        focus_patterns=list(focus),
        forced_language=lang,
        min_length=min_length,
        verbose=verbose and not quiet,
        on_progress=progress,
    )

    if not candidates:
        _fail("No string literals found. Check your path and filters.")

    if not quiet:
        click.echo(f"   Indexed {tree.size} distinct literals")

    # Stage 2: Search
    if not quiet:
        click.echo(f"\n🔎 Stage 2: Searching within distance {dist}...")
    result = collect_matches(
        tree=tree,
        candidates=candidates,
        radius=dist,
        dedup=dedup,
        workers=workers,
        on_progress=progress,
    )

    if not result:
        if not quiet:
            click.echo("✨ No near-duplicate string literals found.")
        sys.exit(0)

    if not quiet:
        click.echo(f"   Found {len(result)} groups ({result.match_count} matches)")

    report = report_matches(
        result=result,
        root_path=root_path,
        distance=dist,
        output_format=output_format,
        literal_count=tree.size,
    )

    if output:
        output_path = Path(output)
        output_path.write_text(report, encoding="utf-8")
        if not quiet:
            click.echo(f"\n📝 Report written to: {output_path}")
    else:
        click.echo()
        click.echo(report)


# Entry point alias for pyproject.toml
cli = main


if __name__ == "__main__":
    main()
