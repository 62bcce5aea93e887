"""Config data model for Odinpack runs."""

from __future__ import annotations

from dataclasses import dataclass

from odinpack.constants.bundle import (
    ARCHIVE_EXTENSION,
    COMPRESSED_EXTENSION,
    DEFAULT_COLLISION_POLICY,
    DELIVERABLE_EXTENSION,
    OUTPUT_BASENAME,
    SOURCE_EXTENSIONS,
)


@dataclass(frozen=True)
class PackConfig:
    """Resolved packer config.

    Only the collision policy is configurable; names and extensions are the
    fixed values the flashing tool expects.
    """

    on_collision: str = DEFAULT_COLLISION_POLICY

    @property
    def output_basename(self) -> str:
        return OUTPUT_BASENAME

    @property
    def source_extensions(self) -> tuple[str, ...]:
        return SOURCE_EXTENSIONS

    @property
    def compressed_extension(self) -> str:
        return COMPRESSED_EXTENSION

    @property
    def archive_name(self) -> str:
        """Intermediate archive name, also the filename recorded in the checksum line."""
        return f"{self.output_basename}{ARCHIVE_EXTENSION}"

    @property
    def deliverable_name(self) -> str:
        """Final bundle name handed to the flashing tool."""
        return f"{self.output_basename}{DELIVERABLE_EXTENSION}"
