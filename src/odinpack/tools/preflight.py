"""Required-tool availability check."""

from __future__ import annotations

import logging

from odinpack.constants.bundle import REQUIRED_TOOLS
from odinpack.exceptions import ToolMissingError
from odinpack.tools.runner import ProcessRunner

logger = logging.getLogger(__name__)


def check_required_tools(runner: ProcessRunner, tools: tuple[str, ...] = REQUIRED_TOOLS) -> None:
    """Raise :class:`ToolMissingError` listing every tool *runner* cannot resolve."""
    missing: list[str] = []
    for name in tools:
        resolved = runner.which(name)
        if resolved is None:
            missing.append(name)
        else:
            logger.debug("Found %s at %s", name, resolved)
    if missing:
        raise ToolMissingError(tuple(missing))
