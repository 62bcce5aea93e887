"""Config loading and normalization for Odinpack runs."""

from __future__ import annotations

from pathlib import Path

import yaml

from odinpack.config.model import PackConfig
from odinpack.config.validator import suggest_key
from odinpack.constants.bundle import DEFAULT_COLLISION_POLICY, VALID_COLLISION_POLICIES
from odinpack.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME, CONFIG_KEY_ON_COLLISION
from odinpack.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> PackConfig:
    """Load config from ``odinpack.yaml`` in *root* or an explicit path.

    A missing default file yields the built-in defaults; a missing explicit
    file is an error.
    """
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return PackConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        hint = suggest_key(unknown[0])
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}" + (f" ({hint})" if hint else ""))

    on_collision = raw.get(CONFIG_KEY_ON_COLLISION, DEFAULT_COLLISION_POLICY)
    if not isinstance(on_collision, str) or on_collision not in VALID_COLLISION_POLICIES:
        raise ConfigError(
            f"{CONFIG_KEY_ON_COLLISION} must be one of {sorted(VALID_COLLISION_POLICIES)}, got {on_collision!r}"
        )

    return PackConfig(on_collision=on_collision)
