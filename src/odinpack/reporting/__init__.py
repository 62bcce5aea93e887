"""Run summary rendering."""

from .stdout import StdoutReporter

__all__ = ["StdoutReporter"]
