"""YAML config loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from nerakit.contracts.exceptions import ConfigError


def load_config(path: str | Path) -> Any:
    """Load a YAML config file into a fresh mapping.

    Returns an empty ``dict`` when nothing exists at *path* or when the document
    decodes to a falsy value. Unreadable files and malformed YAML are not
    recovered here: they raise :class:`ConfigError` for the caller to handle.
    """
    config_path = Path(path)
    if not config_path.exists():
        return {}

    try:
        payload: Any = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in config file: {config_path}") from exc

    return payload or {}
