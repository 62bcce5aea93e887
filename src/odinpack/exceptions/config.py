"""Configuration-related exceptions."""

from __future__ import annotations

from odinpack.exceptions.base import OdinPackError


class ConfigError(OdinPackError, ValueError):
    """Raised when packer configuration is invalid."""
