"""Bundle packing stages."""

from __future__ import annotations

from typing import Any

__all__ = ["pack_workspace"]


def __getattr__(name: str) -> Any:
    """Lazily expose the orchestrator to avoid import cycles at package import time."""
    if name == "pack_workspace":
        from .orchestrator import pack_workspace

        return pack_workspace
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
