"""Fatal packing-stage exceptions."""

from __future__ import annotations

from odinpack.exceptions.base import OdinPackError


class PackingError(OdinPackError):
    """Raised when a packing stage fails and the run must stop."""


class EmptyLedgerError(PackingError):
    """Raised when candidates were found but none compressed successfully."""


class BasenameCollisionError(PackingError):
    """Raised when candidates map to the same artifact name under the ``error`` policy."""

    def __init__(self, collisions: dict[str, tuple[str, ...]]) -> None:
        self.collisions = collisions
        parts = [f"{name} <- {', '.join(sources)}" for name, sources in sorted(collisions.items())]
        super().__init__(f"basename collision(s) would overwrite artifacts: {'; '.join(parts)}")


class ArchiveError(PackingError):
    """Raised when the tar archive cannot be created."""


class ChecksumError(PackingError):
    """Raised when the archive checksum cannot be computed or appended."""
