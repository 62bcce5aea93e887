"""Argument-vector builders for the lz4, tar and md5sum invocations."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from odinpack.constants.bundle import (
    LZ4_TOOL,
    MD5_TOOL,
    TAR_BLOCKING_FACTOR,
    TAR_FORMAT,
    TAR_GROUP,
    TAR_MODE,
    TAR_OWNER,
    TAR_QUOTING_STYLE,
    TAR_TOOL,
)


def lz4_command(source: Path) -> list[str]:
    """Compress *source* to stdout, overwriting without prompting."""
    return [LZ4_TOOL, "-f", "-c", str(source)]


def tar_command(archive_name: str, root: Path) -> list[str]:
    """Create a flat GNU tar whose member names are read NUL-separated from stdin."""
    return [
        TAR_TOOL,
        "--create",
        f"--file={archive_name}",
        f"--format={TAR_FORMAT}",
        f"--blocking-factor={TAR_BLOCKING_FACTOR}",
        f"--quoting-style={TAR_QUOTING_STYLE}",
        f"--owner={TAR_OWNER}",
        f"--group={TAR_GROUP}",
        f"--mode={TAR_MODE}",
        "--no-recursion",
        "-C",
        str(root),
        "--null",
        "--verbatim-files-from",
        "-T",
        "-",
    ]


def tar_member_list(names: Iterable[str]) -> bytes:
    """Encode member names for ``tar --null -T -``."""
    return b"".join(os.fsencode(name) + b"\0" for name in names)


def md5_command(archive_name: str) -> list[str]:
    return [MD5_TOOL, archive_name]
