"""Narrow process-runner abstraction over blocking subprocess calls.

Every external tool the packer needs goes through :class:`ProcessRunner`, so
tests can swap in a fake that never touches real binaries.
"""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Exit status and captured streams of one finished command."""

    args: tuple[str, ...]
    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def stderr_text(self) -> str:
        """Decoded, stripped stderr for log messages."""
        return self.stderr.decode("utf-8", errors="replace").strip()


class ProcessRunner(Protocol):
    """Capability to locate and run external commands."""

    def which(self, name: str) -> str | None:
        """Return the resolved path for *name*, or ``None`` when absent."""
        ...

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path,
        stdout_path: Path | None = None,
        input: bytes | None = None,
    ) -> CommandResult:
        """Run *args* to completion.

        When *stdout_path* is given, stdout streams into that file (created or
        truncated) instead of being captured.
        """
        ...


class SubprocessRunner:
    """Production runner backed by :mod:`subprocess` and :func:`shutil.which`."""

    def which(self, name: str) -> str | None:
        return shutil.which(name)

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path,
        stdout_path: Path | None = None,
        input: bytes | None = None,
    ) -> CommandResult:
        argv = tuple(args)
        logger.debug("Executing (cwd=%s): %s", cwd, shlex.join(argv))
        try:
            if stdout_path is not None:
                with stdout_path.open("wb") as handle:
                    completed = subprocess.run(
                        argv,
                        cwd=cwd,
                        input=input,
                        stdout=handle,
                        stderr=subprocess.PIPE,
                        check=False,
                    )
                return CommandResult(argv, completed.returncode, b"", completed.stderr or b"")

            completed = subprocess.run(argv, cwd=cwd, input=input, capture_output=True, check=False)
        except OSError as exc:
            # Tool vanished after preflight, is not executable, or stdout_path is unwritable.
            logger.debug("Failed to start %s: %s", argv[0], exc)
            return CommandResult(argv, 127, b"", str(exc).encode("utf-8"))
        return CommandResult(argv, completed.returncode, completed.stdout or b"", completed.stderr or b"")
