"""Per-file lz4 compression stage."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from odinpack.io import is_regular_file, unlink_if_exists
from odinpack.model import Candidate, CompressionFailure, CompressionResult
from odinpack.tools.commands import lz4_command
from odinpack.tools.runner import ProcessRunner

logger = logging.getLogger(__name__)


def compress_candidates(root: Path, candidates: list[Candidate], runner: ProcessRunner) -> CompressionResult:
    """Compress each candidate into a flat ``<basename>.lz4`` under *root*.

    A failing candidate is logged, its partial output removed, and the batch
    carries on. Candidates sharing a basename write the same artifact, so the
    last one processed wins and the ledger lists the name once.
    """
    produced: set[str] = set()
    failures: list[CompressionFailure] = []
    compressed = 0

    for candidate in candidates:
        output = root / candidate.artifact_name
        logger.info("Compressing '%s' to '%s'...", candidate.relative, candidate.artifact_name)
        try:
            result = runner.run(lz4_command(candidate.path), cwd=root, stdout_path=output)
        except BaseException:
            _discard_partial(output)
            raise

        if not result.ok:
            stderr = result.stderr_text()
            logger.warning(
                "Failed to compress '%s' (exit %d)%s. Skipping.",
                candidate.relative,
                result.returncode,
                f": {stderr}" if stderr else "",
            )
            _discard_partial(output)
            # An earlier candidate with the same basename lost its artifact too.
            produced.discard(candidate.artifact_name)
            failures.append(CompressionFailure(candidate=candidate, returncode=result.returncode, stderr=stderr))
            continue

        _copy_timestamps(candidate.path, output)
        produced.add(candidate.artifact_name)
        compressed += 1

    return CompressionResult(
        found=len(candidates),
        compressed=compressed,
        ledger=tuple(sorted(produced)),
        failures=tuple(failures),
    )


def _discard_partial(output: Path) -> None:
    """Remove a partial artifact; a directory or special file of that name is left alone."""
    if is_regular_file(output):
        unlink_if_exists(output)


def _copy_timestamps(source: Path, target: Path) -> None:
    """Give *target* the atime/mtime of *source* so repeated runs archive identical headers."""
    try:
        stat = source.stat()
        os.utime(target, ns=(stat.st_atime_ns, stat.st_mtime_ns))
    except OSError as exc:
        logger.warning("Could not copy timestamps from '%s' to '%s': %s", source, target.name, exc)
