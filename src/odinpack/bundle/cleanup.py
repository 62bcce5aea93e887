"""Removal of stale outputs before a run and of intermediates after it."""

from __future__ import annotations

import logging
from pathlib import Path

from odinpack.config import PackConfig
from odinpack.io import is_regular_file

logger = logging.getLogger(__name__)


def clean_workspace(root: Path, config: PackConfig) -> tuple[str, ...]:
    """Delete leftover artifacts and bundles directly inside *root*.

    Subdirectories are never touched. Returns the deleted names in sorted
    order; an already clean directory returns an empty tuple.
    """
    stale_names = {config.archive_name, config.deliverable_name}
    removed: list[str] = []
    for entry in sorted(root.iterdir()):
        if not is_regular_file(entry):
            continue
        if entry.name.endswith(config.compressed_extension) or entry.name in stale_names:
            entry.unlink()
            logger.debug("Removed stale file: %s", entry.name)
            removed.append(entry.name)
    return tuple(removed)


def remove_intermediates(root: Path, ledger: tuple[str, ...]) -> tuple[str, ...]:
    """Delete every ledger entry from *root*; return the entries that were already gone.

    A missing entry is only a warning because the deliverable is final by now.
    """
    missing: list[str] = []
    for name in ledger:
        target = root / name
        if target.is_file():
            target.unlink()
            logger.info("Deleted intermediate file: %s", name)
        else:
            logger.warning("Intermediate file '%s' listed for deletion was not found.", name)
            missing.append(name)
    return tuple(missing)
