"""Load a user configuration from a JSON file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from twinstyle.errors import UserConfigError

DEFAULT_CONFIG_FILE = "tailwind.json"


def load_config(path: str | Path) -> dict[str, Any]:
    """Read a JSON configuration file into a dict."""
    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise UserConfigError(f"Config file not found: {config_path}", cause=exc) from exc
    except json.JSONDecodeError as exc:
        raise UserConfigError(
            f"Invalid JSON in {config_path} (line {exc.lineno}, column {exc.colno}): {exc.msg}",
            cause=exc,
        ) from exc
    if not isinstance(data, dict):
        raise UserConfigError(f"{config_path} must contain a JSON object")
    return data


def find_config(directory: str | Path = ".") -> Path | None:
    """Return the default config file in *directory*, if there is one."""
    candidate = Path(directory) / DEFAULT_CONFIG_FILE
    return candidate if candidate.is_file() else None
