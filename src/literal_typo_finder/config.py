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
Configuration file support for ltf.

Looks for .ltfrc or .ltf.toml in the scanned directory or its parents.
"""

from pathlib import Path
from typing import Optional, Dict, Any

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore


CONFIG_NAMES = (".ltfrc", ".ltf.toml")
CONFIG_SECTION = "ltf"


def find_config_file(start_path: Path) -> Optional[Path]:
    """
    Search for .ltfrc or .ltf.toml in start_path and parent directories.

    Args:
        start_path: Directory to start searching from

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_path.resolve()

    while True:
        for name in CONFIG_NAMES:
            config_path = current / name
            if config_path.is_file():
                return config_path

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config(path: Path) -> Dict[str, Any]:
    """
    Load ltf configuration from the nearest config file.

    Returns the [ltf] section, or an empty dict if no config file is
    found or it cannot be parsed.

    Example config file (.ltfrc or .ltf.toml):
        [ltf]
        distance = 1
        exclude = ["**/tests/**", "**/migrations/**"]
        focus = ["*.py", "*.go"]
        lang = "python"
        min_length = 3
        workers = 4
        dedup = "digest"
        verbose = true
    """
    config_path = find_config_file(path)

    if config_path is None:
        return {}

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        # File unreadable or invalid TOML - return empty config
        return {}

    section = data.get(CONFIG_SECTION, {})
    return section if isinstance(section, dict) else {}
