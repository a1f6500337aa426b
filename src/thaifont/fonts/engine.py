"""Text-rendering engine binding: font objects and renderable font assets.

The resolver only needs two operations from the text system: build a font
object from a path, a ``file:`` URI or a system family name, and wrap a font
object into a renderable asset. :class:`TextEngine` captures that contract;
:class:`FontToolsEngine` implements it on top of ``fontTools``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import io
import logging
import os
from pathlib import Path
from typing import Protocol, runtime_checkable

from fontTools.ttLib import TTFont

from thaifont.fonts.constants import DEFAULT_ATLAS_PADDING, FONT_SUFFIXES
from thaifont.fonts.locator import SystemFontLocator
from thaifont.fonts.utils import is_file_uri, path_from_uri


logger = logging.getLogger(__name__)


class AtlasPopulationMode(str, Enum):
    """How the glyph atlas of a font asset is filled."""

    STATIC = "static"
    DYNAMIC = "dynamic"


@dataclass(slots=True)
class FontObject:
    """A parsed font held entirely in memory."""

    ttfont: TTFont
    origin: str
    _cmap: dict[int, str] | None = field(default=None, init=False, repr=False)

    @property
    def family(self) -> str:
        """Return the best family name recorded in the ``name`` table."""
        if "name" in self.ttfont:
            family = self.ttfont["name"].getBestFamilyName()
            if family:
                return str(family)
        return Path(self.origin).stem or self.origin

    def cmap(self) -> dict[int, str]:
        """Return the best Unicode character map, or an empty mapping."""
        if self._cmap is None:
            best = self.ttfont.getBestCmap() if "cmap" in self.ttfont else None
            self._cmap = dict(best or {})
        return self._cmap


@dataclass(slots=True, eq=False)
class FontAsset:
    """Renderable wrapper registered with the text settings.

    Assets compare by identity, like the objects held by a text system.
    """

    font: FontObject
    name: str
    atlas_population_mode: AtlasPopulationMode = AtlasPopulationMode.STATIC
    atlas_padding: int = DEFAULT_ATLAS_PADDING


@runtime_checkable
class TextEngine(Protocol):
    """Font constructor and asset factory exposed by the text system."""

    def create_font(self, target: str) -> FontObject | None: ...

    def create_font_asset(self, font: FontObject) -> FontAsset | None: ...


class FontToolsEngine:
    """``TextEngine`` backed by ``fontTools`` and a system font locator."""

    def __init__(self, *, locator: SystemFontLocator | None = None) -> None:
        self.locator = locator or SystemFontLocator()

    @staticmethod
    def _looks_like_path(target: str) -> bool:
        candidate = Path(target)
        if candidate.suffix.lower() in FONT_SUFFIXES or candidate.is_absolute():
            return True
        separators = {os.sep, "/"}
        if os.altsep:
            separators.add(os.altsep)
        return any(sep in target for sep in separators)

    def _load(self, path: Path, origin: str) -> FontObject:
        data = path.read_bytes()
        # fontNumber is ignored for single-font files and picks the first face of a collection.
        ttfont = TTFont(io.BytesIO(data), fontNumber=0)
        # Touch the header so truncated files fail here rather than on first use.
        ttfont["head"]
        logger.debug("loaded %s (%d bytes)", origin, len(data))
        return FontObject(ttfont=ttfont, origin=origin)

    def create_font(self, target: str) -> FontObject | None:
        """Build a font from a ``file:`` URI, a path or a system family name."""
        if not target:
            return None
        if is_file_uri(target):
            path = path_from_uri(target)
            return self._load(path, target) if path.is_file() else None
        if self._looks_like_path(target):
            path = Path(target)
            return self._load(path, str(path)) if path.is_file() else None
        located = self.locator.find(target)
        if located is None:
            return None
        return self._load(located, target)

    def create_font_asset(self, font: FontObject) -> FontAsset | None:
        """Wrap ``font`` into an asset; fonts without a character map are rejected."""
        if not font.cmap():
            return None
        return FontAsset(font=font, name=font.family)


__all__ = [
    "AtlasPopulationMode",
    "FontAsset",
    "FontObject",
    "FontToolsEngine",
    "TextEngine",
]
