"""External tool exceptions."""

from __future__ import annotations

from odinpack.constants.bundle import TOOL_INSTALL_HINTS
from odinpack.exceptions.base import OdinPackError


class ToolMissingError(OdinPackError):
    """Raised when required external tools cannot be found on PATH."""

    def __init__(self, missing: tuple[str, ...]) -> None:
        self.missing = missing
        details = ", ".join(
            f"{name} ({TOOL_INSTALL_HINTS[name]})" if name in TOOL_INSTALL_HINTS else name for name in missing
        )
        super().__init__(f"required command(s) not found: {details}")
