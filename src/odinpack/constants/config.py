"""Configuration filenames and allowed keys."""

from __future__ import annotations

CONFIG_FILENAME: str = "odinpack.yaml"

CONFIG_KEY_ON_COLLISION: str = "on_collision"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({CONFIG_KEY_ON_COLLISION})

# Settings people try to override that are fixed by the Odin bundle format.
FIXED_SETTING_HINTS: dict[str, str] = {
    "output_basename": "the output name is fixed at CUSTOM-AP-FIRMWARE",
    "source_extensions": "the source extensions are fixed at .img and .bin",
}
