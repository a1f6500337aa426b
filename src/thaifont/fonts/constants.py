"""Static candidate lists and defaults for Thai font resolution."""

from __future__ import annotations


DEFAULT_FONT_FILES: tuple[str, ...] = (
    "Itim-Regular.ttf",
    "Sarabun-Regular.ttf",
    "NotoSansThai-Regular.ttf",
    "font.ttf",
    "thai.ttf",
)

DEFAULT_SYSTEM_FONTS: tuple[str, ...] = (
    "Itim",
    "Itim-Regular",
    "Sarabun",
    "Noto Sans Thai",
    "Leelawadee UI",
    "Leelawadee",
    "Tahoma",
    "Cordia New",
    "Browallia New",
    "Angsana New",
    "Arial Unicode MS",
)

DEFAULT_ATLAS_PADDING = 5
DEFAULT_TEMP_PREFIX = "ThaiFontMod"
FONT_SUFFIXES = frozenset({".otf", ".ttf", ".ttc"})

# Thai block, excluding the unassigned U+0E00 and the trailing reserved range.
THAI_RANGE: tuple[int, int] = (0x0E01, 0x0E5B)


__all__ = [
    "DEFAULT_ATLAS_PADDING",
    "DEFAULT_FONT_FILES",
    "DEFAULT_SYSTEM_FONTS",
    "DEFAULT_TEMP_PREFIX",
    "FONT_SUFFIXES",
    "THAI_RANGE",
]
