"""Base exception type."""

from __future__ import annotations


class OdinPackError(Exception):
    """Base class for all Odinpack errors."""
