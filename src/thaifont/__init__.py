"""Primary public API for thaifont."""

from __future__ import annotations

from thaifont.core.config import ResolverConfig, load_config
from thaifont.core.diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from thaifont.fonts import (
    FileSource,
    FontAsset,
    FontResolver,
    Found,
    NamedSource,
    NotFound,
    Provenance,
    TextSettings,
    apply_fallback,
    resolve_first_available,
)
from thaifont.plugin import PluginHost, StaticHost, ThaiFontPlugin
from thaifont.version import get_version


__version__ = get_version()

__all__ = [
    "DiagnosticEmitter",
    "FileSource",
    "FontAsset",
    "FontResolver",
    "Found",
    "LoggingEmitter",
    "NamedSource",
    "NotFound",
    "NullEmitter",
    "PluginHost",
    "Provenance",
    "ResolverConfig",
    "StaticHost",
    "TextSettings",
    "ThaiFontPlugin",
    "__version__",
    "apply_fallback",
    "load_config",
    "resolve_first_available",
]
