"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "ODINPACK"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ ODINPACK",
    "     // lz4 + tar + md5 firmware bundler",
)
PACK_SUMMARY_TITLE: str = "Pack summary"
CLI_DESCRIPTION: str = "\n".join(
    (
        *ASCII_LOGO_LINES,
        "",
        f"{BRAND_NAME} packs *.img and *.bin files under the working directory",
        "into an Odin-flashable CUSTOM-AP-FIRMWARE.tar.md5 bundle.",
    )
)
