"""Fixed naming and archive-format constants for Odin bundles."""

from __future__ import annotations

OUTPUT_BASENAME: str = "CUSTOM-AP-FIRMWARE"
SOURCE_EXTENSIONS: tuple[str, ...] = (".img", ".bin")
COMPRESSED_EXTENSION: str = ".lz4"
ARCHIVE_EXTENSION: str = ".tar"
DELIVERABLE_EXTENSION: str = ".tar.md5"

LZ4_TOOL: str = "lz4"
TAR_TOOL: str = "tar"
MD5_TOOL: str = "md5sum"
REQUIRED_TOOLS: tuple[str, ...] = (LZ4_TOOL, MD5_TOOL, TAR_TOOL)

TOOL_INSTALL_HINTS: dict[str, str] = {
    LZ4_TOOL: "install lz4",
    MD5_TOOL: "install coreutils or a similar package",
    TAR_TOOL: "install GNU tar",
}

# Odin rejects archives that deviate from these header settings.
TAR_FORMAT: str = "gnu"
TAR_BLOCKING_FACTOR: int = 20
TAR_QUOTING_STYLE: str = "escape"
TAR_OWNER: int = 0
TAR_GROUP: int = 0
TAR_MODE: str = "u=rw,go=r"
TAR_MEMBER_MODE: int = 0o644

MD5_HEX_LENGTH: int = 32
CHECKSUM_SEPARATOR: str = "  "

COLLISION_OVERWRITE: str = "overwrite"
COLLISION_ERROR: str = "error"
VALID_COLLISION_POLICIES: frozenset[str] = frozenset({COLLISION_OVERWRITE, COLLISION_ERROR})
DEFAULT_COLLISION_POLICY: str = COLLISION_OVERWRITE

STATUS_PACKED: str = "packed"
STATUS_NOTHING_TO_DO: str = "nothing_to_do"
