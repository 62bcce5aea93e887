"""Dataclasses describing candidates, compression outcomes and run results."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from odinpack.constants.bundle import COMPRESSED_EXTENSION
from odinpack.constants.reporting import SCHEMA_VERSION


@dataclass(frozen=True)
class Candidate:
    """A firmware file found under the working directory."""

    path: Path
    relative: str

    @property
    def artifact_name(self) -> str:
        """Flat compressed-artifact name written to the working-directory root."""
        return f"{self.path.name}{COMPRESSED_EXTENSION}"


@dataclass(frozen=True)
class CompressionFailure:
    """A candidate the compressor rejected."""

    candidate: Candidate
    returncode: int
    stderr: str = ""

    def to_dict(self) -> dict[str, object]:
        return {
            "source": self.candidate.relative,
            "returncode": self.returncode,
            "stderr": self.stderr,
        }


@dataclass(frozen=True)
class CompressionResult:
    """Outcome of the compression stage."""

    found: int
    compressed: int
    ledger: tuple[str, ...]
    failures: tuple[CompressionFailure, ...] = ()

    @property
    def nothing_to_do(self) -> bool:
        return self.found == 0


@dataclass(frozen=True)
class PackResult:
    """End-to-end result of a pack run."""

    root: Path
    status: str
    candidates: tuple[Candidate, ...] = ()
    compression: CompressionResult | None = None
    removed_stale: tuple[str, ...] = ()
    collisions: dict[str, tuple[str, ...]] = field(default_factory=dict)
    deliverable: Path | None = None
    checksum_line: str | None = None
    missing_intermediates: tuple[str, ...] = ()
    duration_ms: int = 0

    def to_dict(self) -> dict[str, object]:
        compression = self.compression
        return {
            "schema_version": SCHEMA_VERSION,
            "root": str(self.root),
            "status": self.status,
            "candidates": [candidate.relative for candidate in self.candidates],
            "compressed": compression.compressed if compression else 0,
            "ledger": list(compression.ledger) if compression else [],
            "failures": [failure.to_dict() for failure in compression.failures] if compression else [],
            "removed_stale": list(self.removed_stale),
            "collisions": {name: list(sources) for name, sources in sorted(self.collisions.items())},
            "deliverable": self.deliverable.name if self.deliverable else None,
            "checksum_line": self.checksum_line,
            "missing_intermediates": list(self.missing_intermediates),
            "duration_ms": self.duration_ms,
        }
