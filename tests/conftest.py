"""Shared pytest fixtures: a fake process runner and firmware workspaces."""

from __future__ import annotations

import hashlib
import signal
import tarfile
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest

from odinpack.tools.runner import CommandResult

FAKE_LZ4_MAGIC: bytes = b"\x04\x22\x4d\x18"


class FakeRunner:
    """In-process stand-in for lz4, tar and md5sum.

    lz4 prefixes the frame magic, tar is emulated with :mod:`tarfile` using
    the same fixed header metadata, and md5sum uses :mod:`hashlib`.
    """

    def __init__(
        self,
        *,
        missing: Sequence[str] = (),
        failing_sources: Sequence[str] = (),
        tar_returncode: int = 0,
        md5_returncode: int = 0,
        md5_stdout: bytes | None = None,
        interrupt_tool: str | None = None,
        terminate_tool: str | None = None,
    ) -> None:
        self.missing = set(missing)
        self.failing_sources = set(failing_sources)
        self.tar_returncode = tar_returncode
        self.md5_returncode = md5_returncode
        self.md5_stdout = md5_stdout
        self.interrupt_tool = interrupt_tool
        self.terminate_tool = terminate_tool
        self.calls: list[tuple[str, ...]] = []
        self.which_calls: list[str] = []
        self.tar_inputs: list[bytes] = []

    def which(self, name: str) -> str | None:
        self.which_calls.append(name)
        return None if name in self.missing else f"/usr/bin/{name}"

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path,
        stdout_path: Path | None = None,
        input: bytes | None = None,
    ) -> CommandResult:
        argv = tuple(args)
        self.calls.append(argv)
        tool = argv[0]
        if tool == "lz4":
            assert stdout_path is not None
            return self._lz4(argv, stdout_path)
        if tool == "tar":
            return self._tar(argv, cwd, input or b"")
        if tool == "md5sum":
            return self._md5(argv, cwd)
        raise AssertionError(f"unexpected command: {argv}")

    def tool_calls(self, tool: str) -> list[tuple[str, ...]]:
        return [call for call in self.calls if call[0] == tool]

    def _lz4(self, argv: tuple[str, ...], stdout_path: Path) -> CommandResult:
        source = Path(argv[-1])
        try:
            handle = stdout_path.open("wb")
        except OSError as exc:
            # Same shape as SubprocessRunner when the redirect target cannot be opened.
            return CommandResult(argv, 127, b"", str(exc).encode("utf-8"))
        with handle:
            handle.write(FAKE_LZ4_MAGIC)
            if self.interrupt_tool == "lz4":
                raise KeyboardInterrupt
            if self.terminate_tool == "lz4":
                signal.raise_signal(signal.SIGTERM)
            if any(source.as_posix().endswith(suffix) for suffix in self.failing_sources):
                return CommandResult(argv, 1, b"", b"lz4: simulated failure")
            handle.write(source.read_bytes())
        return CommandResult(argv, 0)

    def _tar(self, argv: tuple[str, ...], cwd: Path, member_list: bytes) -> CommandResult:
        self.tar_inputs.append(member_list)
        archive_name = next(arg.split("=", 1)[1] for arg in argv if arg.startswith("--file="))
        archive = cwd / archive_name
        if self.tar_returncode:
            archive.write_bytes(b"partial")
            return CommandResult(argv, self.tar_returncode, b"", b"tar: simulated failure")

        names = [raw.decode("utf-8") for raw in member_list.split(b"\0") if raw]
        try:
            with tarfile.open(archive, "w", format=tarfile.GNU_FORMAT) as tar:
                for name in names:
                    info = tar.gettarinfo(str(cwd / name), arcname=name)
                    info.uid = info.gid = 0
                    info.uname = info.gname = ""
                    info.mode = 0o644
                    with (cwd / name).open("rb") as handle:
                        tar.addfile(info, handle)
        except FileNotFoundError as exc:
            return CommandResult(argv, 2, b"", f"tar: {exc.filename}: Cannot stat".encode())
        if self.interrupt_tool == "tar":
            raise KeyboardInterrupt
        if self.terminate_tool == "tar":
            signal.raise_signal(signal.SIGTERM)
        return CommandResult(argv, 0)

    def _md5(self, argv: tuple[str, ...], cwd: Path) -> CommandResult:
        if self.md5_returncode:
            return CommandResult(argv, self.md5_returncode, b"", b"md5sum: simulated failure")
        if self.md5_stdout is not None:
            return CommandResult(argv, 0, self.md5_stdout)
        digest = hashlib.md5((cwd / argv[1]).read_bytes()).hexdigest()
        return CommandResult(argv, 0, f"{digest}  {argv[1]}\n".encode())


@pytest.fixture()
def make_runner() -> Callable[..., Any]:
    """Return the FakeRunner class so tests can configure failures."""
    return FakeRunner


@pytest.fixture()
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture()
def firmware_dir(tmp_path: Path) -> Path:
    """Workspace holding boot.img (10 bytes) and modem.bin (20 bytes)."""
    workspace = tmp_path / "firmware"
    workspace.mkdir()
    (workspace / "boot.img").write_bytes(b"B" * 10)
    (workspace / "modem.bin").write_bytes(b"M" * 20)
    return workspace


def snapshot(root: Path) -> dict[str, bytes]:
    """Map every regular file under *root* to its contents."""
    return {path.relative_to(root).as_posix(): path.read_bytes() for path in sorted(root.rglob("*")) if path.is_file()}


@pytest.fixture()
def take_snapshot() -> Callable[[Path], dict[str, bytes]]:
    return snapshot
