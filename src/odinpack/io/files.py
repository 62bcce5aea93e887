"""Small filesystem helpers shared by the packing stages."""

from __future__ import annotations

from contextlib import suppress
from pathlib import Path


def unlink_if_exists(path: Path) -> bool:
    """Delete *path*, returning ``False`` when it was already gone."""
    with suppress(FileNotFoundError):
        path.unlink()
        return True
    return False


def is_regular_file(path: Path) -> bool:
    """True for regular files only; symlinks are never followed."""
    return path.is_file() and not path.is_symlink()
