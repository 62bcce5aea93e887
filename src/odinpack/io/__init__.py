"""Shared file I/O helpers."""

from .files import is_regular_file, unlink_if_exists
from .json_io import write_json_atomic

__all__ = ["is_regular_file", "unlink_if_exists", "write_json_atomic"]
