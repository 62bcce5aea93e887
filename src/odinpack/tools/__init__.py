"""External tool integration: process runner, preflight and command builders."""

from .preflight import check_required_tools
from .runner import CommandResult, ProcessRunner, SubprocessRunner

__all__ = ["CommandResult", "ProcessRunner", "SubprocessRunner", "check_required_tools"]
