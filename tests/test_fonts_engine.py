from __future__ import annotations

from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError
import pytest

from thaifont.core.diagnostics import NullEmitter
from thaifont.fonts.engine import FontObject, FontToolsEngine
from thaifont.fonts.locator import SystemFontLocator
from thaifont.fonts.models import Found, NamedSource
from thaifont.fonts.resolver import FontResolver


def _folder_locator(folder: Path) -> SystemFontLocator:
    return SystemFontLocator(search_paths=[folder], use_fontconfig=False, scan_platform_dirs=False)


def test_create_font_from_path(make_font, isolated_locator) -> None:
    path = make_font("Itim-Regular.ttf", family="Itim")
    engine = FontToolsEngine(locator=isolated_locator)

    font = engine.create_font(str(path))

    assert font is not None
    assert font.family == "Itim"
    assert font.origin == str(path)


def test_create_font_from_file_uri(make_font, isolated_locator) -> None:
    path = make_font("Sarabun-Regular.ttf")
    engine = FontToolsEngine(locator=isolated_locator)

    font = engine.create_font(path.resolve().as_uri())

    assert font is not None
    assert 0x0E01 in font.cmap()


def test_create_font_by_system_name(make_font, tmp_path: Path) -> None:
    make_font("tahoma.ttf", family="Tahoma")
    engine = FontToolsEngine(locator=_folder_locator(tmp_path / "fonts"))

    font = engine.create_font("Tahoma")

    assert font is not None
    assert font.family == "Tahoma"


def test_system_names_resolve_when_file_name_differs(make_font, tmp_path: Path) -> None:
    make_font("LeelawUI.ttf", family="Leelawadee UI")
    make_font("NotoSansThai-Regular.ttf", family="Noto Sans Thai")
    engine = FontToolsEngine(locator=_folder_locator(tmp_path / "fonts"))

    result = FontResolver(engine, emitter=NullEmitter()).resolve_first_available(
        [NamedSource("Leelawadee UI"), NamedSource("Noto Sans Thai")]
    )

    assert isinstance(result, Found)
    assert result.font.name == "Leelawadee UI (System)"
    assert result.font.asset.font.family == "Leelawadee UI"
    assert engine.create_font("Noto Sans Thai") is not None


def test_unknown_targets_return_none(isolated_locator, tmp_path: Path) -> None:
    engine = FontToolsEngine(locator=isolated_locator)

    assert engine.create_font("") is None
    assert engine.create_font("Cordia New") is None
    assert engine.create_font(str(tmp_path / "missing.ttf")) is None
    assert engine.create_font((tmp_path / "missing.ttf").as_uri()) is None


def test_corrupt_font_raises(isolated_locator, tmp_path: Path) -> None:
    path = tmp_path / "broken.ttf"
    path.write_bytes(b"\x00\x01garbage" * 4)
    engine = FontToolsEngine(locator=isolated_locator)

    with pytest.raises(TTLibError):
        engine.create_font(str(path))


def test_font_survives_source_removal(make_font, isolated_locator) -> None:
    path = make_font("font.ttf")
    engine = FontToolsEngine(locator=isolated_locator)

    font = engine.create_font(str(path))
    path.unlink()

    assert font is not None
    assert font.ttfont["maxp"].numGlyphs > 1


def test_asset_requires_a_character_map(make_font, isolated_locator) -> None:
    engine = FontToolsEngine(locator=isolated_locator)
    empty = FontObject(ttfont=TTFont(), origin="empty.ttf")

    assert engine.create_font_asset(empty) is None

    font = engine.create_font(str(make_font("Itim-Regular.ttf", family="Itim")))
    asset = engine.create_font_asset(font)
    assert asset is not None
    assert asset.name == "Itim"
    assert asset.font is font


def test_family_falls_back_to_origin_stem() -> None:
    font = FontObject(ttfont=TTFont(), origin="/tmp/NotoSansThai-Regular.ttf")
    assert font.family == "NotoSansThai-Regular"
