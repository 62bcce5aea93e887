"""Atomic JSON persistence for run reports."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from odinpack.constants.reporting import REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX
from odinpack.io.files import unlink_if_exists


def write_json_atomic(
    path: Path,
    payload: object,
    *,
    temp_prefix: str = REPORT_TEMP_PREFIX,
    temp_suffix: str = REPORT_TEMP_SUFFIX,
) -> None:
    """Write *payload* next to *path* in a temp file, then rename over *path*."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            json.dump(payload, handle, indent=2, sort_keys=True)
            handle.write("\n")
        os.replace(temp_name, path)
    except BaseException:
        if temp_name:
            unlink_if_exists(Path(temp_name))
        raise
