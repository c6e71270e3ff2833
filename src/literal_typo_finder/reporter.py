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
Report generator - formats grouped approximate matches for output.

Supports text, markdown, json and html output formats.
"""

from typing import Optional
from pathlib import Path
from enum import Enum
import json
from datetime import datetime

from .models import GroupedResult


class OutputFormat(Enum):
    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"
    HTML = "html"


def report_matches(
    result: GroupedResult,
    root_path: Path,
    distance: int,
    output_format: OutputFormat = OutputFormat.TEXT,
    literal_count: Optional[int] = None,
) -> str:
    """
    Generate a report of near-duplicate string literals.

    Args:
        result: Grouped matches from collect_matches
        root_path: Root path (for display)
        distance: Edit distance threshold used
        output_format: Desired output format
        literal_count: Number of distinct literals indexed, if known

    Returns:
        Formatted report string
    """
    if output_format == OutputFormat.TEXT:
        return _format_text(result, root_path, distance, literal_count)
    elif output_format == OutputFormat.MARKDOWN:
        return _format_markdown(result, root_path, distance, literal_count)
    elif output_format == OutputFormat.JSON:
        return _format_json(result, root_path, distance, literal_count)
    elif output_format == OutputFormat.HTML:
        return _format_html(result, root_path, distance, literal_count)
    else:
        raise ValueError(f"Unknown format: {output_format}")


def _format_text(
    result: GroupedResult,
    root_path: Path,
    distance: int,
    literal_count: Optional[int],
) -> str:
    """Plain text format with unicode decorations."""
    lines = []

    lines.append(f"🔍 Found {len(result)} literal groups in {root_path}")
    summary = f"   Damerau-Levenshtein distance: {distance} | Matches: {result.match_count}"
    if literal_count is not None:
        summary += f" | Literals indexed: {literal_count}"
    lines.append(summary)
    lines.append("")

    for query, rows in result.rows():
        lines.append(f"- query: {query}")
        for position, word, _label in rows:
            lines.append(f"     └─ approximate match in: {position} (value: {word})")
        lines.append("")

    return "\n".join(lines)


def _format_markdown(
    result: GroupedResult,
    root_path: Path,
    distance: int,
    literal_count: Optional[int],
) -> str:
    """Markdown format for documentation."""
    lines = []

    lines.append("# String Literal Typo Report")
    lines.append("")
    lines.append(f"**Path:** `{root_path}`  ")
    lines.append(f"**Distance:** {distance}  ")
    if literal_count is not None:
        lines.append(f"**Literals Indexed:** {literal_count}  ")
    lines.append(f"**Groups Found:** {len(result)}  ")
    lines.append(f"**Matches:** {result.match_count}")
    lines.append("")

    for i, (query, rows) in enumerate(result.rows(), 1):
        lines.append(f"## {i}. `{_md_code(query)}`")
        lines.append("")
        lines.append("| Location | Value | Association |")
        lines.append("|----------|-------|-------------|")
        for position, word, label in rows:
            lines.append(f"| `{position}` | `{_md_code(word)}` | {_md_cell(label)} |")
        lines.append("")

    return "\n".join(lines)


def _md_code(text: str) -> str:
    return text.replace("`", "'").replace("|", "\\|")


def _md_cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")


def _format_json(
    result: GroupedResult,
    root_path: Path,
    distance: int,
    literal_count: Optional[int],
) -> str:
    """JSON format for programmatic use."""
    data = {
        "meta": {
            "path": str(root_path),
            "distance": distance,
            "literal_count": literal_count,
            "group_count": len(result),
            "match_count": result.match_count,
            "timestamp": datetime.now().isoformat(),
        },
        "groups": [],
    }

    for query, associations in result:
        data["groups"].append({
            "query": query,
            "matches": [
                {
                    "value": assoc.word,
                    "label": assoc.label,
                    "location": _position_dict(assoc.position),
                }
                for assoc in associations
            ],
        })

    return json.dumps(data, indent=2)


def _position_dict(position) -> dict:
    """Serialize a Position, or any opaque provenance as its string form."""
    if all(hasattr(position, attr) for attr in ("file_path", "line", "column")):
        return {
            "file": str(position.file_path),
            "line": position.line,
            "column": position.column,
        }
    return {"location": str(position)}


def _format_html(
    result: GroupedResult,
    root_path: Path,
    distance: int,
    literal_count: Optional[int],
) -> str:
    """HTML format with embedded CSS/JS - fully offline, no external deps."""
    import html

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M")
    indexed = literal_count if literal_count is not None else "-"

    css = """
:root { --bg: #ffffff; --bg-alt: #f5f5f5; --text: #1a1a1a; --muted: #666;
    --border: #e0e0e0; --accent: #0066cc; }
[data-theme="dark"] { --bg: #1a1a2e; --bg-alt: #16213e; --text: #eaeaea; --muted: #aaa;
    --border: #333; --accent: #4da6ff; }
body { font-family: -apple-system, 'Segoe UI', Roboto, sans-serif; background: var(--bg);
    color: var(--text); margin: 0; padding: 20px; line-height: 1.5; }
.container { max-width: 1100px; margin: 0 auto; }
header { display: flex; justify-content: space-between; align-items: center; }
.stats { display: flex; gap: 15px; margin: 20px 0; }
.stat { background: var(--bg-alt); padding: 12px 18px; border-radius: 8px; }
.stat b { color: var(--accent); font-size: 1.4em; display: block; }
details { background: var(--bg-alt); border: 1px solid var(--border); border-radius: 8px;
    margin-bottom: 12px; padding: 0 15px; }
summary { padding: 10px 0; cursor: pointer; font-weight: bold; }
table { width: 100%; border-collapse: collapse; margin-bottom: 12px; }
th, td { padding: 6px 8px; text-align: left; border-bottom: 1px solid var(--border); }
code { font-family: 'SF Mono', Monaco, monospace; }
footer { text-align: center; color: var(--muted); padding: 20px; font-size: 0.9em; }
.hidden { display: none; }
"""

    js = """
function toggleTheme() {
    const html = document.documentElement;
    const next = html.getAttribute('data-theme') === 'dark' ? 'light' : 'dark';
    html.setAttribute('data-theme', next);
}
function filterGroups() {
    const query = document.getElementById('search').value.toLowerCase();
    document.querySelectorAll('details.group').forEach(el => {
        el.classList.toggle('hidden', query && !el.textContent.toLowerCase().includes(query));
    });
}
"""

    parts = []
    parts.append(f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>String Literal Typo Report - {html.escape(str(root_path))}</title>
    <style>{css}</style>
</head>
<body>
<div class="container">
    <header>
        <h1>🔍 String Literal Typo Report</h1>
        <div>
            <input type="text" id="search" placeholder="Filter..." oninput="filterGroups()">
            <button onclick="toggleTheme()">🌙 Theme</button>
        </div>
    </header>
    <div class="stats">
        <div class="stat"><b>{len(result)}</b>Groups</div>
        <div class="stat"><b>{result.match_count}</b>Matches</div>
        <div class="stat"><b>{distance}</b>Distance</div>
        <div class="stat"><b>{indexed}</b>Literals indexed</div>
    </div>
""")

    for query, rows in result.rows():
        parts.append(f"""    <details class="group" open>
        <summary><code>{html.escape(query)}</code> ({len(rows)} matches)</summary>
        <table>
            <thead><tr><th>Location</th><th>Value</th><th>Association</th></tr></thead>
            <tbody>
""")
        for position, word, label in rows:
            parts.append(f"""                <tr><td><code>{html.escape(str(position))}</code></td>
                    <td><code>{html.escape(word)}</code></td><td>{html.escape(label)}</td></tr>
""")
        parts.append("""            </tbody>
        </table>
    </details>
""")

    parts.append(f"""    <footer>Generated by <strong>literal-typo-finder</strong> on {timestamp}</footer>
</div>
<script>{js}</script>
</body>
</html>""")

    return "".join(parts)
