from pathlib import Path

from literal_typo_finder.indexer import (
    collect_literals,
    index_codebase,
    is_format_placeholder,
    should_index,
)


def _write(root: Path, rel: str, content: str) -> None:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_format_placeholders_are_recognized() -> None:
    assert is_format_placeholder("%d")
    assert is_format_placeholder("%-10s")
    assert is_format_placeholder("%%")
    assert is_format_placeholder("{}")
    assert is_format_placeholder("{0}")
    assert not is_format_placeholder("Total: %d items")
    assert not is_format_placeholder("hello")


def test_should_index_filters_empty_short_and_placeholder_literals() -> None:
    assert not should_index("")
    assert not should_index("%s")
    assert not should_index("ab", min_length=3)
    assert should_index("abc", min_length=3)


def test_files_are_indexed_in_sorted_path_order(tmp_path: Path) -> None:
    _write(tmp_path, "pkg/b.py", 'X = "Hella"\n')
    _write(tmp_path, "a.py", 'X = "Hello"\n')
    _write(tmp_path, "pkg/c.go", 'package pkg\n\nvar Y = "World"\n')

    tree, candidates = index_codebase(tmp_path)

    assert candidates == ["Hello", "Hella", "World"]
    assert tree.root.word == "hello"
    assert str(tree.root.position) == "a.py:1:5"
    assert tree.size == 3


def test_duplicate_literals_become_one_candidate(tmp_path: Path) -> None:
    _write(tmp_path, "a.py", 'A = "Hello"\nB = "Hello"\nC = "hello"\n')

    tree, candidates = index_codebase(tmp_path)

    assert candidates == ["Hello", "hello"]
    assert tree.size == 1


def test_collect_literals_drops_placeholders_and_short_values(tmp_path: Path) -> None:
    _write(tmp_path, "a.py", 'A = "%d"\nB = ""\nC = "ok"\nD = "Total: %d items"\n')

    values = [lit.value for lit in collect_literals(tmp_path)]
    assert values == ["ok", "Total: %d items"]

    values = [lit.value for lit in collect_literals(tmp_path, min_length=3)]
    assert values == ["Total: %d items"]


def test_exclude_and_focus_patterns(tmp_path: Path) -> None:
    _write(tmp_path, "src/a.py", 'A = "alpha"\n')
    _write(tmp_path, "tests/test_a.py", 'A = "alpah"\n')
    _write(tmp_path, "src/b.js", 'const b = "beta";\n')

    excluded = collect_literals(tmp_path, exclude_patterns=["tests/*"])
    assert [lit.value for lit in excluded] == ["alpha", "beta"]

    focused = collect_literals(tmp_path, focus_patterns=["*.js"])
    assert [lit.value for lit in focused] == ["beta"]


def test_default_excludes_skip_dependency_directories(tmp_path: Path) -> None:
    _write(tmp_path, "node_modules/lib/index.js", 'const x = "vendored";\n')
    _write(tmp_path, "app.js", 'const x = "mine";\n')

    assert [lit.value for lit in collect_literals(tmp_path)] == ["mine"]


def test_forced_language_limits_extensions(tmp_path: Path) -> None:
    _write(tmp_path, "a.py", 'A = "python"\n')
    _write(tmp_path, "b.go", 'package b\n\nvar B = "golang"\n')

    literals = collect_literals(tmp_path, forced_language="go")

    assert [lit.value for lit in literals] == ["golang"]


def test_progress_reports_every_file(tmp_path: Path) -> None:
    _write(tmp_path, "a.py", 'A = "one"\n')
    _write(tmp_path, "b.py", 'B = "two"\n')
    calls = []

    collect_literals(tmp_path, on_progress=lambda c, t, m: calls.append((c, t, m)))

    assert calls == [(1, 2, "files"), (2, 2, "files")]
