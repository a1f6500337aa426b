"""Font resolution façade used by the plugin and the CLI.

Architecture
: `FontResolver` walks an ordered list of `FileSource`/`NamedSource`
  candidates and returns `Found` for the first one the text engine accepts,
  or `NotFound` once every candidate missed.
: `FontToolsEngine` is the text engine binding: it builds `FontObject`s from
  paths, `file:` URIs or system family names (via `SystemFontLocator`) and wraps
  them into `FontAsset`s.
: `apply_fallback` registers the resolved asset with a `FallbackTarget`, such
  as `TextSettings`, as both a fallback entry and the default font.
"""

from thaifont.fonts.coverage import covers_range, covers_thai
from thaifont.fonts.engine import (
    AtlasPopulationMode,
    FontAsset,
    FontObject,
    FontToolsEngine,
    TextEngine,
)
from thaifont.fonts.locator import SystemFontLocator
from thaifont.fonts.models import (
    FileSource,
    FontSource,
    Found,
    NamedSource,
    NotFound,
    Provenance,
    ResolvedFont,
    SearchResult,
    build_sources,
)
from thaifont.fonts.registration import (
    FallbackTarget,
    TextSettings,
    TextSettingsBinding,
    apply_fallback,
)
from thaifont.fonts.resolver import FontResolver, resolve_first_available
from thaifont.fonts.strategies import DEFAULT_STRATEGIES


__all__ = [
    "DEFAULT_STRATEGIES",
    "AtlasPopulationMode",
    "FallbackTarget",
    "FileSource",
    "FontAsset",
    "FontObject",
    "FontResolver",
    "FontSource",
    "FontToolsEngine",
    "Found",
    "NamedSource",
    "NotFound",
    "Provenance",
    "ResolvedFont",
    "SearchResult",
    "SystemFontLocator",
    "TextEngine",
    "TextSettings",
    "TextSettingsBinding",
    "apply_fallback",
    "build_sources",
    "covers_range",
    "covers_thai",
    "resolve_first_available",
]
