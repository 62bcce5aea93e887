"""Candidate discovery and artifact-name collision detection."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from odinpack.io import is_regular_file
from odinpack.model import Candidate

logger = logging.getLogger(__name__)


def discover_candidates(root: Path, extensions: tuple[str, ...]) -> list[Candidate]:
    """Recursively find regular files under *root* whose name ends with one of *extensions*.

    Directory symlinks are not followed and file symlinks are skipped. The
    result is ordered by relative POSIX path, which fixes which candidate wins
    when two of them share a basename.
    """
    resolved_root = root.resolve()
    found: list[Candidate] = []

    for dirpath, dirnames, filenames in os.walk(resolved_root, onerror=_log_walk_error):
        dirnames.sort()
        for filename in filenames:
            if not filename.endswith(extensions):
                continue
            path = Path(dirpath) / filename
            if not is_regular_file(path):
                continue
            found.append(Candidate(path=path, relative=_stable_path_key(path, resolved_root)))

    return sorted(found, key=lambda candidate: candidate.relative)


def find_collisions(candidates: list[Candidate]) -> dict[str, tuple[str, ...]]:
    """Map each artifact name produced by more than one candidate to those candidates' relative paths."""
    sources_by_name: dict[str, list[str]] = {}
    for candidate in candidates:
        sources_by_name.setdefault(candidate.artifact_name, []).append(candidate.relative)
    return {name: tuple(sorted(sources)) for name, sources in sorted(sources_by_name.items()) if len(sources) > 1}


def _stable_path_key(file_path: Path, root: Path) -> str:
    try:
        return file_path.relative_to(root).as_posix()
    except ValueError:
        return file_path.as_posix()


def _log_walk_error(exc: OSError) -> None:
    logger.warning("Cannot read directory %s: %s", exc.filename, exc.strerror)
