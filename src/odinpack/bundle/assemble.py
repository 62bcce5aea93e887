"""Archive, checksum and rename stage producing the Odin deliverable."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from odinpack.config import PackConfig
from odinpack.constants.bundle import CHECKSUM_SEPARATOR, MD5_HEX_LENGTH
from odinpack.exceptions import ArchiveError, ChecksumError
from odinpack.io import unlink_if_exists
from odinpack.tools.commands import md5_command, tar_command, tar_member_list
from odinpack.tools.runner import ProcessRunner

logger = logging.getLogger(__name__)

# md5sum prefixes the line with a backslash when it had to escape the file name.
_CHECKSUM_LINE = re.compile(rf"^(\\?)[0-9a-f]{{{MD5_HEX_LENGTH}}}{CHECKSUM_SEPARATOR}(.+)\n$", re.DOTALL)


def build_archive(root: Path, ledger: tuple[str, ...], runner: ProcessRunner, *, config: PackConfig) -> Path:
    """Create the flat GNU tar of *ledger* members inside *root*."""
    archive = root / config.archive_name
    logger.info("Creating TAR archive '%s' from %d file(s)...", archive.name, len(ledger))
    result = runner.run(tar_command(archive.name, root), cwd=root, input=tar_member_list(ledger))
    if not result.ok:
        unlink_if_exists(archive)
        stderr = result.stderr_text()
        detail = f": {stderr}" if stderr else ""
        raise ArchiveError(f"tar exited with status {result.returncode} while creating {archive.name}{detail}")
    if not archive.is_file():
        raise ArchiveError(f"tar reported success but {archive.name} was not created")
    logger.info("TAR archive created: %s", archive.name)
    return archive


def append_checksum(root: Path, archive: Path, runner: ProcessRunner) -> str:
    """Append ``md5sum``'s line for *archive* to *archive* itself and return that line.

    The digest covers the archive bytes before the append.
    """
    logger.info("Calculating MD5 checksum for '%s' and appending it...", archive.name)
    result = runner.run(md5_command(archive.name), cwd=root)
    if not result.ok:
        stderr = result.stderr_text()
        detail = f": {stderr}" if stderr else ""
        raise ChecksumError(f"md5sum exited with status {result.returncode} for {archive.name}{detail}")

    line = result.stdout.decode("utf-8", errors="surrogateescape")
    match = _CHECKSUM_LINE.match(line)
    if match is None:
        raise ChecksumError(f"unexpected md5sum output for {archive.name}: {line!r}")
    if not match.group(1) and match.group(2) != archive.name:
        raise ChecksumError(f"md5sum reported {match.group(2)!r}, expected {archive.name!r}")

    try:
        with archive.open("ab") as handle:
            handle.write(result.stdout)
    except OSError as exc:
        raise ChecksumError(f"cannot append checksum to {archive.name}: {exc}") from exc
    return line


def finalize_bundle(archive: Path, deliverable: Path) -> Path:
    """Rename the checksummed archive to its deliverable name."""
    logger.info("MD5 checksum appended. Renaming '%s' to '%s'...", archive.name, deliverable.name)
    os.replace(archive, deliverable)
    return deliverable


def assemble_bundle(
    root: Path,
    ledger: tuple[str, ...],
    runner: ProcessRunner,
    *,
    config: PackConfig,
) -> tuple[Path, str]:
    """Archive, checksum and rename; return the deliverable path and checksum line.

    On any failure or interruption the partial archive is removed before the
    exception propagates.
    """
    archive = root / config.archive_name
    try:
        build_archive(root, ledger, runner, config=config)
        checksum_line = append_checksum(root, archive, runner)
        deliverable = finalize_bundle(archive, root / config.deliverable_name)
    except BaseException:
        if unlink_if_exists(archive):
            logger.debug("Removed partial archive %s", archive.name)
        raise
    logger.info("Final file created: %s", deliverable.name)
    return deliverable, checksum_line
