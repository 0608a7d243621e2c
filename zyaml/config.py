"""Shared configuration for the zuxi YAML commands."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from zyaml.errors import ZyamlError
from zyaml.jsonbridge import to_json_value
from zyaml.parser import parse_file

# Centralized path configuration
HOME = Path.home()
CONFIG = Path(os.environ.get("XDG_CONFIG_HOME", HOME / ".config")) / "zuxi"

# Default values
DEFAULT_JSON_INDENT = 4
MAX_INPUT_SIZE = 16 * 1024 * 1024


def get_config_path() -> Path:
    return CONFIG / "config.yml"


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping from disk with the bundled parser.

    Args:
        path: Path to YAML file

    Returns:
        Parsed content as dictionary, empty if the document is not a mapping
    """
    with parse_file(path) as document:
        data = to_json_value(document.value)
    return data if isinstance(data, dict) else {}


def _int_with_default(value: Any, default: int) -> int:
    if isinstance(value, bool) or value is None:
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number >= 0 else default


@dataclass
class Settings:
    json_indent: int = DEFAULT_JSON_INDENT
    max_input_size: int = MAX_INPUT_SIZE
    log_file: Path | None = None

    @classmethod
    def load(cls, path: Path | None = None) -> Settings:
        """Read settings from config.yml, then apply environment overrides."""
        config_path = path or get_config_path()
        data: dict[str, Any] = {}
        if config_path.exists():
            try:
                data = load_yaml(config_path)
            except (OSError, UnicodeDecodeError, ZyamlError):
                data = {}

        json_indent = _int_with_default(data.get("json_indent"), DEFAULT_JSON_INDENT)
        json_indent = _int_with_default(os.environ.get("ZUXI_JSON_INDENT"), json_indent)
        max_input_size = _int_with_default(data.get("max_input_size"), MAX_INPUT_SIZE)

        log_file = os.environ.get("ZUXI_LOG_FILE") or data.get("log_file")
        return cls(
            json_indent=json_indent,
            max_input_size=max_input_size,
            log_file=Path(str(log_file)).expanduser() if log_file else None,
        )
