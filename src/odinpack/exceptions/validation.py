"""Structured validation error model for config validation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """A single config problem with a stable code and the offending key."""

    code: str
    path: str
    key: str
    message: str
    hint: str = ""

    def format(self) -> str:
        """Render as ``[CODE] path: message (hint)``."""
        text = f"[{self.code}] {self.path}: {self.message}"
        if self.hint:
            text = f"{text} ({self.hint})"
        return text


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Sort errors deterministically by code, path and key."""
    return sorted(errors, key=lambda e: (e.code, e.path, e.key))


def format_errors(errors: list[ValidationError]) -> str:
    return "\n".join(error.format() for error in sort_errors(errors))
