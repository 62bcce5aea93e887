"""Tests for the lz4 compression stage."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from odinpack.bundle.compress import compress_candidates
from odinpack.bundle.discovery import discover_candidates
from odinpack.constants.bundle import SOURCE_EXTENSIONS


def test_compresses_each_candidate_to_flat_artifact(firmware_dir: Path, fake_runner: Any) -> None:
    nested = firmware_dir / "vendor" / "radio"
    nested.mkdir(parents=True)
    (nested / "cp.bin").write_bytes(b"C" * 5)
    candidates = discover_candidates(firmware_dir, SOURCE_EXTENSIONS)

    result = compress_candidates(firmware_dir, candidates, fake_runner)

    assert result.found == 3
    assert result.compressed == 3
    assert result.ledger == ("boot.img.lz4", "cp.bin.lz4", "modem.bin.lz4")
    assert result.failures == ()
    assert (firmware_dir / "cp.bin.lz4").is_file()
    assert not (nested / "cp.bin.lz4").exists()
    assert [call[:3] for call in fake_runner.tool_calls("lz4")] == [("lz4", "-f", "-c")] * 3


def test_copies_source_timestamps_onto_artifacts(firmware_dir: Path, fake_runner: Any) -> None:
    source = firmware_dir / "boot.img"
    os.utime(source, ns=(1_600_000_000_000_000_000, 1_600_000_000_000_000_000))

    compress_candidates(firmware_dir, discover_candidates(firmware_dir, SOURCE_EXTENSIONS), fake_runner)

    assert (firmware_dir / "boot.img.lz4").stat().st_mtime_ns == source.stat().st_mtime_ns


def test_failed_candidate_is_skipped_and_partial_removed(
    firmware_dir: Path,
    make_runner: Callable[..., Any],
    caplog: pytest.LogCaptureFixture,
) -> None:
    runner = make_runner(failing_sources=["modem.bin"])

    with caplog.at_level(logging.WARNING):
        result = compress_candidates(firmware_dir, discover_candidates(firmware_dir, SOURCE_EXTENSIONS), runner)

    assert result.found == 2
    assert result.compressed == 1
    assert result.ledger == ("boot.img.lz4",)
    assert [f.candidate.relative for f in result.failures] == ["modem.bin"]
    assert result.failures[0].returncode == 1
    assert result.failures[0].stderr == "lz4: simulated failure"
    assert not (firmware_dir / "modem.bin.lz4").exists()
    assert "Failed to compress 'modem.bin'" in caplog.text


def test_all_failures_yield_empty_ledger(firmware_dir: Path, make_runner: Callable[..., Any]) -> None:
    runner = make_runner(failing_sources=["boot.img", "modem.bin"])

    result = compress_candidates(firmware_dir, discover_candidates(firmware_dir, SOURCE_EXTENSIONS), runner)

    assert result.found == 2
    assert result.ledger == ()
    assert not result.nothing_to_do
    assert not list(firmware_dir.glob("*.lz4"))


def test_no_candidates_is_nothing_to_do(tmp_path: Path, fake_runner: Any) -> None:
    result = compress_candidates(tmp_path, [], fake_runner)

    assert result.nothing_to_do
    assert result.ledger == ()
    assert fake_runner.calls == []


def test_basename_collision_overwrites_and_dedupes(tmp_path: Path, fake_runner: Any) -> None:
    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()
    (tmp_path / "a" / "x.img").write_bytes(b"first")
    (tmp_path / "b" / "x.img").write_bytes(b"second")

    result = compress_candidates(tmp_path, discover_candidates(tmp_path, SOURCE_EXTENSIONS), fake_runner)

    assert result.compressed == 2
    assert result.ledger == ("x.img.lz4",)
    assert (tmp_path / "x.img.lz4").read_bytes().endswith(b"second")


def test_failed_collision_drops_shared_artifact_from_ledger(tmp_path: Path, make_runner: Callable[..., Any]) -> None:
    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()
    (tmp_path / "a" / "x.img").write_bytes(b"first")
    (tmp_path / "b" / "x.img").write_bytes(b"second")
    (tmp_path / "y.bin").write_bytes(b"other")
    runner = make_runner(failing_sources=["b/x.img"])

    result = compress_candidates(tmp_path, discover_candidates(tmp_path, SOURCE_EXTENSIONS), runner)

    assert result.ledger == ("y.bin.lz4",)
    assert result.compressed == 2
    assert not (tmp_path / "x.img.lz4").exists()


def test_interrupt_removes_partial_output(firmware_dir: Path, make_runner: Callable[..., Any]) -> None:
    runner = make_runner(interrupt_tool="lz4")

    with pytest.raises(KeyboardInterrupt):
        compress_candidates(firmware_dir, discover_candidates(firmware_dir, SOURCE_EXTENSIONS), runner)

    assert not list(firmware_dir.glob("*.lz4"))


def test_directory_in_place_of_artifact_is_a_per_file_failure(
    firmware_dir: Path,
    fake_runner: Any,
    caplog: pytest.LogCaptureFixture,
) -> None:
    blocker = firmware_dir / "boot.img.lz4"
    blocker.mkdir()

    with caplog.at_level(logging.WARNING):
        result = compress_candidates(firmware_dir, discover_candidates(firmware_dir, SOURCE_EXTENSIONS), fake_runner)

    assert [f.candidate.relative for f in result.failures] == ["boot.img"]
    assert result.failures[0].returncode == 127
    assert result.compressed == 1
    assert result.ledger == ("modem.bin.lz4",)
    assert (firmware_dir / "modem.bin.lz4").is_file()
    assert blocker.is_dir()
    assert "Failed to compress 'boot.img' (exit 127)" in caplog.text
