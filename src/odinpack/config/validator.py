"""Config file validation for Odinpack."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from odinpack.constants.bundle import VALID_COLLISION_POLICIES
from odinpack.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    CONFIG_KEY_ON_COLLISION,
    FIXED_SETTING_HINTS,
)
from odinpack.constants.validation import CFG001, CFG002, CFG003, CFG004, CFG005, CFG006, CFG010
from odinpack.exceptions.validation import ValidationError, sort_errors


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate an odinpack.yaml file and return every problem found.

    Never raises; ``odinpack --validate-config`` prints the returned list and
    the pack run uses it as a preflight gate.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    if not root.is_dir():
        return [
            ValidationError(
                code=CFG010,
                path=str(root),
                key="",
                message=f"root directory does not exist: {root}",
            )
        ]

    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(code=CFG001, path=path_str, key="", message=f"config file not found: {path}")
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        return [ValidationError(code=CFG002, path=path_str, key="", message=f"invalid YAML: {exc}")]

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        return [
            ValidationError(
                code=CFG003,
                path=path_str,
                key="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        ]

    for key in sorted(str(k) for k in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    key=key,
                    message=f"unknown key `{key}`",
                    hint=suggest_key(key),
                )
            )

    if CONFIG_KEY_ON_COLLISION in raw:
        value = raw[CONFIG_KEY_ON_COLLISION]
        if not isinstance(value, str):
            errors.append(_type_error(path_str, CONFIG_KEY_ON_COLLISION, "a string", value))
        elif value not in VALID_COLLISION_POLICIES:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    key=CONFIG_KEY_ON_COLLISION,
                    message=f"invalid value for `{CONFIG_KEY_ON_COLLISION}`",
                    hint=f"expected one of: {', '.join(sorted(VALID_COLLISION_POLICIES))}; got: {value!r}",
                )
            )

    return sort_errors(errors)


def suggest_key(key: str) -> str:
    """Return a hint for an unknown key: why it is fixed, or a 'did you mean' suggestion."""
    if key in FIXED_SETTING_HINTS:
        return FIXED_SETTING_HINTS[key]
    matches = difflib.get_close_matches(key, sorted(ALLOWED_CONFIG_KEYS), n=1, cutoff=0.6)
    return f"did you mean `{matches[0]}`?" if matches else ""


def _type_error(path_str: str, key: str, expected: str, value: Any) -> ValidationError:
    return ValidationError(
        code=CFG005,
        path=path_str,
        key=key,
        message=f"`{key}` must be {expected}",
        hint=f"got {type(value).__name__}",
    )
