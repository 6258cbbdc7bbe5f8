"""Working-copy detection: a pure filesystem check, no git invocation."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from imgreview.git.errors import PathNotFound

METADATA_DIR = ".git"

PathLike = Union[str, Path]


def require_path(path: PathLike, label: str = "Repository path") -> Path:
    """Return *path* as a Path, raising PathNotFound if it does not exist."""
    p = Path(path)
    if not p.exists():
        raise PathNotFound(f"{label} does not exist: {path}")
    return p


def validate_repository(path: PathLike) -> bool:
    """Return True iff *path* has a ``.git`` directory directly beneath it.

    A ``.git`` *file* (as left by ``git worktree`` or submodules) does not
    count. Raises PathNotFound if *path* itself is missing.
    """
    root = require_path(path, label="Path")
    return (root / METADATA_DIR).is_dir()
