"""Shared fixtures: real TrueType files and a recording text engine."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont
import pytest

from thaifont.fonts.engine import FontAsset, FontObject
from thaifont.fonts.locator import SystemFontLocator


THAI_CODEPOINTS = range(0x0E01, 0x0E5C)


def _box_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((400, 700))
    pen.lineTo((400, 0))
    pen.closePath()
    return pen.glyph()


def build_font(
    path: Path, *, family: str = "Demo Thai", codepoints: Iterable[int] = THAI_CODEPOINTS
) -> Path:
    codepoints = list(codepoints)
    names = [f"uni{cp:04X}" for cp in codepoints]
    glyph_order = [".notdef", *names]

    builder = FontBuilder(1000, isTTF=True)
    builder.setupGlyphOrder(glyph_order)
    builder.setupCharacterMap(dict(zip(codepoints, names)))
    builder.setupGlyf({name: _box_glyph() for name in glyph_order})
    builder.setupHorizontalMetrics({name: (500, 100) for name in glyph_order})
    builder.setupHorizontalHeader(ascent=800, descent=-200)
    builder.setupNameTable({"familyName": family, "styleName": "Regular"})
    builder.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    builder.setupPost()
    path.parent.mkdir(parents=True, exist_ok=True)
    builder.save(str(path))
    return path


@pytest.fixture
def make_font(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing a small valid TrueType font."""

    def _make(name: str = "Sarabun-Regular.ttf", **kwargs) -> Path:
        return build_font(tmp_path / "fonts" / name, **kwargs)

    return _make


@pytest.fixture
def no_system_fonts(monkeypatch: pytest.MonkeyPatch) -> None:
    """Hide fontconfig and the machine's font folders from every locator."""
    monkeypatch.setenv("THAIFONT_SKIP_FONT_CHECKS", "1")
    monkeypatch.setattr("thaifont.fonts.locator.platform_font_dirs", lambda: [])


@pytest.fixture
def isolated_locator() -> SystemFontLocator:
    """A locator that ignores fontconfig and the machine's font folders."""
    return SystemFontLocator(use_fontconfig=False, scan_platform_dirs=False)


@pytest.fixture
def staging_dir(tmp_path: Path) -> Path:
    path = tmp_path / "staging"
    path.mkdir()
    return path


class RecordingEngine:
    """Text engine double that records every construction request."""

    def __init__(
        self,
        available: Callable[[str], bool] = lambda target: False,
        *,
        failing: Callable[[str], bool] = lambda target: False,
        asset_error: Exception | None = None,
    ) -> None:
        self.available = available
        self.failing = failing
        self.asset_error = asset_error
        self.calls: list[str] = []

    def create_font(self, target: str) -> FontObject | None:
        self.calls.append(target)
        if self.failing(target):
            raise RuntimeError(f"engine rejected {target}")
        if not self.available(target):
            return None
        return FontObject(ttfont=TTFont(), origin=target)

    def create_font_asset(self, font: FontObject) -> FontAsset | None:
        if self.asset_error is not None:
            raise self.asset_error
        return FontAsset(font=font, name=font.origin)


@pytest.fixture
def recording_engine() -> type[RecordingEngine]:
    return RecordingEngine
