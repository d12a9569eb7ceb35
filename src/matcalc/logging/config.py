"""Persisted user settings for matcalc.

Settings live in a small JSON document, ``~/.matcalc/logging.json`` unless
``MATCALC_LOG_CONFIG`` or ``MATCALC_CONFIG_DIR`` say otherwise. Two keys are
understood:

``log_level``
    Level name used by :func:`matcalc.logging.get_logger` when the caller does
    not pass one.
``pretty``
    Whether the interactive session renders matrices as ``rich`` tables.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

PathLike = Optional[os.PathLike[str] | str]


def _config_path(config_file: PathLike = None) -> Path:
    if config_file is not None:
        return Path(config_file)

    explicit = os.environ.get("MATCALC_LOG_CONFIG", "").strip()
    if explicit:
        return Path(explicit).expanduser()

    base = os.environ.get("MATCALC_CONFIG_DIR", "").strip()
    root = Path(base).expanduser() if base else Path.home() / ".matcalc"
    return root / "logging.json"


def load_config(config_file: PathLike = None) -> Dict[str, Any]:
    """Return the stored settings.

    A missing, unreadable or non-object file yields an empty dict.
    """

    path = _config_path(config_file)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: Dict[str, Any], config_file: PathLike = None) -> Path:
    """Write ``config`` and return the path it was written to."""

    path = _config_path(config_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    return path


def _level_number(level: str | int) -> Optional[int]:
    if isinstance(level, int):
        return level
    candidate = logging.getLevelName(str(level).upper())
    return candidate if isinstance(candidate, int) else None


def load_log_level(config_file: PathLike = None) -> Optional[int]:
    """Return the persisted numeric log level, or ``None``."""

    value = load_config(config_file).get("log_level")
    if value is None:
        return None
    return _level_number(value)


def save_log_level(level: str | int, config_file: PathLike = None) -> Path:
    """Persist ``level`` by name.

    Raises
    ------
    ValueError
        If ``level`` is not a known logging level.
    """

    numeric = _level_number(level)
    if numeric is None:
        raise ValueError(f"Unknown logging level: {level!r}")

    config = load_config(config_file)
    config["log_level"] = logging.getLevelName(numeric)
    return save_config(config, config_file)


def load_pretty(config_file: PathLike = None) -> bool:
    return bool(load_config(config_file).get("pretty", False))


def save_pretty(enabled: bool, config_file: PathLike = None) -> Path:
    config = load_config(config_file)
    config["pretty"] = bool(enabled)
    return save_config(config, config_file)


__all__ = [
    "load_config",
    "load_log_level",
    "load_pretty",
    "save_config",
    "save_log_level",
    "save_pretty",
]
