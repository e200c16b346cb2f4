"""Config file discovery.

Walk-up finder locates valuefmt.toml the way git finds .git/, so a
project can pin its string table and fonts once at its root.
Supports the VALUEFMT_CONFIG env var and the --config CLI flag.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "valuefmt.toml"
CONFIG_ENV_VAR = "VALUEFMT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for valuefmt.toml.

    Returns the path to the config file, or None if not found.
    An existing file named by VALUEFMT_CONFIG wins over the walk-up;
    a dangling VALUEFMT_CONFIG disables discovery.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config_path(value: str, base_dir: Path) -> Path | None:
    """Resolve a path setting relative to the config file's directory.

    Empty strings mean "not configured" and yield None. ``~`` is expanded.
    """
    if not value:
        return None
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return path
