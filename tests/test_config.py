from pathlib import Path

from literal_typo_finder.config import find_config_file, load_config


def test_load_config_reads_ltf_section(tmp_path: Path) -> None:
    (tmp_path / ".ltfrc").write_text(
        '[ltf]\ndistance = 1\nexclude = ["tests/*"]\n', encoding="utf-8"
    )

    assert load_config(tmp_path) == {"distance": 1, "exclude": ["tests/*"]}


def test_config_is_found_in_parent_directory(tmp_path: Path) -> None:
    config_path = tmp_path / ".ltf.toml"
    config_path.write_text("[ltf]\nworkers = 2\n", encoding="utf-8")
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)

    assert find_config_file(nested) == config_path.resolve()
    assert load_config(nested) == {"workers": 2}


def test_invalid_toml_yields_empty_config(tmp_path: Path) -> None:
    (tmp_path / ".ltfrc").write_text("[ltf\ndistance = ", encoding="utf-8")

    assert load_config(tmp_path) == {}


def test_missing_section_yields_empty_config(tmp_path: Path) -> None:
    (tmp_path / ".ltfrc").write_text("[other]\nkey = 1\n", encoding="utf-8")

    assert load_config(tmp_path) == {}
