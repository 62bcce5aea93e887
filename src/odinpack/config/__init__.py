"""Configuration loading and validation for Odinpack runs."""

from __future__ import annotations

from odinpack.config.loader import load_config
from odinpack.config.model import PackConfig
from odinpack.config.validator import validate_config_file

__all__ = ["PackConfig", "load_config", "validate_config_file"]
