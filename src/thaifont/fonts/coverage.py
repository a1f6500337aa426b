"""Glyph coverage checks used as an optional acceptance criterion."""

from __future__ import annotations

from thaifont.fonts.constants import THAI_RANGE
from thaifont.fonts.engine import FontAsset, FontObject


def coverage_ratio(font: FontObject, start: int, end: int) -> float:
    """Return the share of codepoints in ``[start, end]`` mapped by ``font``."""
    if end < start:
        raise ValueError(f"Invalid range U+{start:04X}..U+{end:04X}")
    cmap = font.cmap()
    total = end - start + 1
    mapped = sum(1 for codepoint in range(start, end + 1) if codepoint in cmap)
    return mapped / total


def covers_range(font: FontObject, start: int, end: int, minimum_ratio: float = 0.9) -> bool:
    """Return True when ``font`` maps at least ``minimum_ratio`` of the range."""
    return coverage_ratio(font, start, end) >= minimum_ratio


def covers_thai(asset: FontAsset) -> bool:
    """Return True when the asset's font maps the Thai block."""
    return covers_range(asset.font, *THAI_RANGE)


__all__ = ["coverage_ratio", "covers_range", "covers_thai"]
