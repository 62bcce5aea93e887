"""Human-readable stdout summary for pack results."""

from __future__ import annotations

from odinpack.constants.branding import PACK_SUMMARY_TITLE
from odinpack.constants.bundle import STATUS_PACKED
from odinpack.constants.reporting import ANSI_BOLD, ANSI_DIM, ANSI_GREEN, ANSI_RESET, ANSI_YELLOW
from odinpack.model import PackResult


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class StdoutReporter:
    """Formats a :class:`PackResult` as a short terminal summary."""

    def __init__(self, result: PackResult, *, color: bool = True) -> None:
        self._result = result
        self._color = color

    def render(self) -> str:
        result = self._result
        lines = [self._paint(PACK_SUMMARY_TITLE, ANSI_BOLD)]

        if result.status != STATUS_PACKED:
            lines.append(f"  status:       {self._paint('nothing to do', ANSI_YELLOW)}")
            lines.append(f"  stale:        {len(result.removed_stale)} removed")
            return "\n".join(lines)

        compression = result.compression
        found = compression.found if compression else 0
        compressed = compression.compressed if compression else 0
        ledger = compression.ledger if compression else ()
        failures = compression.failures if compression else ()

        lines.append(f"  status:       {self._paint('packed', ANSI_GREEN)}")
        lines.append(f"  candidates:   {found} found, {compressed} compressed")
        lines.append(f"  archived:     {len(ledger)} member(s)")
        for name in ledger:
            lines.append(self._paint(f"    - {name}", ANSI_DIM))
        if failures:
            lines.append(self._paint(f"  failed:       {len(failures)}", ANSI_YELLOW))
            for failure in failures:
                entry = f"    - {failure.candidate.relative} (exit {failure.returncode})"
                lines.append(self._paint(entry, ANSI_YELLOW))
        if result.collisions:
            overwritten = f"  collisions:   {len(result.collisions)} artifact name(s) overwritten"
            lines.append(self._paint(overwritten, ANSI_YELLOW))
        if result.missing_intermediates:
            lines.append(
                self._paint(f"  missing:      {len(result.missing_intermediates)} intermediate(s)", ANSI_YELLOW)
            )
        if result.deliverable is not None:
            lines.append(f"  deliverable:  {self._paint(result.deliverable.name, ANSI_BOLD)}")
        if result.checksum_line:
            lines.append(f"  checksum:     {result.checksum_line.rstrip()}")
        lines.append(f"  duration:     {result.duration_ms} ms")
        return "\n".join(lines)

    def _paint(self, text: str, color: str) -> str:
        return _colorize(text, color) if self._color else text
