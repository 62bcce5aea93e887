"""End-to-end pack orchestration for Odinpack.

``pack_workspace`` drives the whole run:
preflight, cleanup, discovery, compression, assembly, final cleanup.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from odinpack.bundle.assemble import assemble_bundle
from odinpack.bundle.cleanup import clean_workspace, remove_intermediates
from odinpack.bundle.compress import compress_candidates
from odinpack.bundle.discovery import discover_candidates, find_collisions
from odinpack.config import PackConfig, load_config
from odinpack.constants.bundle import COLLISION_ERROR, STATUS_NOTHING_TO_DO, STATUS_PACKED
from odinpack.exceptions import BasenameCollisionError, ConfigError, EmptyLedgerError
from odinpack.model import PackResult
from odinpack.tools import ProcessRunner, SubprocessRunner, check_required_tools

logger = logging.getLogger(__name__)


def pack_workspace(
    *,
    root: Path,
    config_path: Path | None = None,
    config: PackConfig | None = None,
    runner: ProcessRunner | None = None,
) -> PackResult:
    """Pack the firmware images under *root* into the Odin deliverable.

    Returns a ``nothing_to_do`` result when no candidates exist. Raises
    :class:`ToolMissingError` before touching the filesystem, and
    :class:`PackingError` subclasses for the other fatal conditions.
    """
    started_at = time.perf_counter()
    root = root.resolve()
    if not root.is_dir():
        raise ConfigError(f"Working directory does not exist or is not a directory: {root}")

    if config is None:
        config = load_config(root, config_path)
    if runner is None:
        runner = SubprocessRunner()

    check_required_tools(runner)

    logger.info("Cleaning up old intermediate and output files from %s...", root)
    removed_stale = clean_workspace(root, config)
    logger.info("Cleanup complete (%d stale file(s) removed).", len(removed_stale))

    extensions = "/".join(config.source_extensions)
    logger.info("Searching for %s files and compressing them to %s format...", extensions, config.compressed_extension)
    candidates = discover_candidates(root, config.source_extensions)

    collisions = find_collisions(candidates)
    if collisions:
        if config.on_collision == COLLISION_ERROR:
            raise BasenameCollisionError(collisions)
        for name, sources in collisions.items():
            logger.warning(
                "Basename collision: %s all compress to '%s'; '%s' overwrites the others.",
                ", ".join(sources),
                name,
                sources[-1],
            )

    compression = compress_candidates(root, candidates, runner)

    if compression.nothing_to_do:
        logger.info("No %s files were found to process in %s or its subdirectories.", extensions, root)
        return PackResult(
            root=root,
            status=STATUS_NOTHING_TO_DO,
            compression=compression,
            removed_stale=removed_stale,
            duration_ms=_elapsed_ms(started_at),
        )

    if not compression.ledger:
        raise EmptyLedgerError(
            f"no compressed artifacts remain to archive "
            f"({compression.compressed} of {compression.found} candidate file(s) compressed); "
            f"cannot create {config.archive_name}"
        )

    logger.info(
        "Successfully processed %d file(s); %d unique artifact(s) will be archived.",
        compression.compressed,
        len(compression.ledger),
    )

    deliverable, checksum_line = assemble_bundle(root, compression.ledger, runner, config=config)

    logger.info("Cleaning up intermediate %s files...", config.compressed_extension)
    missing = remove_intermediates(root, compression.ledger)

    return PackResult(
        root=root,
        status=STATUS_PACKED,
        candidates=tuple(candidates),
        compression=compression,
        removed_stale=removed_stale,
        collisions=collisions,
        deliverable=deliverable,
        checksum_line=checksum_line,
        missing_intermediates=missing,
        duration_ms=_elapsed_ms(started_at),
    )


def _elapsed_ms(started_at: float) -> int:
    return int((time.perf_counter() - started_at) * 1000)
