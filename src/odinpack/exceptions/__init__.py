"""Shared exception hierarchy for Odinpack."""

from __future__ import annotations

from .base import OdinPackError
from .config import ConfigError
from .packing import (
    ArchiveError,
    BasenameCollisionError,
    ChecksumError,
    EmptyLedgerError,
    PackingError,
)
from .tools import ToolMissingError

__all__ = [
    "ArchiveError",
    "BasenameCollisionError",
    "ChecksumError",
    "ConfigError",
    "EmptyLedgerError",
    "OdinPackError",
    "PackingError",
    "ToolMissingError",
]
