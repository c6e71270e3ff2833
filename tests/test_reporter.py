import json
from pathlib import Path

import pytest

from literal_typo_finder.bktree import build_index
from literal_typo_finder.collector import collect_matches
from literal_typo_finder.models import Position
from literal_typo_finder.reporter import OutputFormat, report_matches


@pytest.fixture
def result():
    tree = build_index([
        ("Hello", Position(Path("a.py"), 1, 12)),
        ("Hella", Position(Path("b.py"), 3, 5)),
        ("<tag>", Position(Path("c.py"), 2, 1)),
        ("<tog>", Position(Path("c.py"), 4, 1)),
    ])
    return collect_matches(tree, ["Hello", "Hella", "<tag>", "<tog>"], radius=1)


def test_text_report_lists_queries_and_locations(result) -> None:
    report = report_matches(result, Path("/repo"), distance=1)

    assert "Found 2 literal groups in /repo" in report
    assert "- query: Hello" in report
    assert "approximate match in: b.py:3:5 (value: hella)" in report


def test_markdown_report_has_table_per_query(result) -> None:
    report = report_matches(result, Path("/repo"), 1, OutputFormat.MARKDOWN, literal_count=4)

    assert report.startswith("# String Literal Typo Report")
    assert "**Literals Indexed:** 4" in report
    assert "## 1. `Hello`" in report
    assert "| `b.py:3:5` | `hella` | Hello <-> hella |" in report


def test_json_report_is_machine_readable(result) -> None:
    data = json.loads(report_matches(result, Path("/repo"), 1, OutputFormat.JSON))

    assert data["meta"]["distance"] == 1
    assert data["meta"]["group_count"] == 2
    first = data["groups"][0]
    assert first["query"] == "Hello"
    assert first["matches"] == [{
        "value": "hella",
        "label": "Hello <-> hella",
        "location": {"file": "b.py", "line": 3, "column": 5},
    }]


def test_html_report_escapes_literals(result) -> None:
    report = report_matches(result, Path("/repo"), 1, OutputFormat.HTML)

    assert report.startswith("<!DOCTYPE html>")
    assert "&lt;tag&gt;" in report
    assert "<tag>" not in report


def test_opaque_positions_are_rendered_as_strings() -> None:
    tree = build_index([("Hello", "file-1"), ("Hella", "file-2")])
    result = collect_matches(tree, ["Hello", "Hella"], radius=1)

    data = json.loads(report_matches(result, Path("."), 1, OutputFormat.JSON))

    assert data["groups"][0]["matches"][0]["location"] == {"location": "file-2"}


def test_unknown_format_raises(result) -> None:
    with pytest.raises(ValueError):
        report_matches(result, Path("/repo"), 1, "pdf")
