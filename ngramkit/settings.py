#!/usr/bin/env python3
"""
Settings loader for ngramkit.

Reads ``configs/app.yaml`` inside the package, or the file named by the
``NGRAMKIT_CONFIG`` environment variable.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_ROOT / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"
CONFIG_ENV_VAR = "NGRAMKIT_CONFIG"


def config_path() -> Path:
    """Path of the active settings file."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return resolve_path(override) if override else APP_CONFIG_PATH


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    path = config_path()
    if not path.exists():
        raise FileNotFoundError(f"Missing app config: {path}")
    data = yaml.safe_load(path.read_text())
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"App config must be a mapping: {path}")
    return data or {}


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path, e.g. ``report.top_k``."""
    current: Any = load_app_config()
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def resolve_path(value, base: Path | None = None) -> Path:
    """
    Resolve a user-supplied path.

    Expands ``~`` and ``$VARS``; a relative result is taken against ``base``
    (default: the current working directory).
    """
    if value is None or str(value) == "":
        raise ValueError("path value is required")
    path = Path(os.path.expandvars(os.path.expanduser(str(value))))
    if not path.is_absolute():
        path = (base or Path.cwd()) / path
    return path.resolve()


__all__ = [
    "load_app_config",
    "get_setting",
    "resolve_path",
    "config_path",
    "APP_CONFIG_PATH",
    "CONFIG_ENV_VAR",
]
