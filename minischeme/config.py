from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List


# Defaults
_DEFAULT_LOAD_DIRS: list[Path] = []
_DEFAULT_LOG_LEVEL = "WARNING"


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_load_roots() -> List[Path]:
    """Directories searched by `load` for relative paths, before the cwd."""
    return paths_from_env('MINISCHEME_LOAD_PATH', _DEFAULT_LOAD_DIRS)


def get_log_level() -> int:
    name = os.environ.get('MINISCHEME_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def resolve_load_path(name: str) -> Path:
    """Map a `load` argument to a file path.

    Absolute paths are used as given. Relative paths are tried against each
    MINISCHEME_LOAD_PATH root, then against the current directory.
    """
    p = Path(name)
    if p.is_absolute():
        return p
    for root in get_load_roots():
        candidate = root / p
        if candidate.is_file():
            return candidate
    return Path.cwd() / p
