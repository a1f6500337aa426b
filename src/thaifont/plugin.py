"""Plugin entry point invoked once by the host application at startup."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable

from thaifont.core.config import ResolverConfig
from thaifont.core.diagnostics import DiagnosticEmitter, LoggingEmitter
from thaifont.fonts.coverage import covers_thai
from thaifont.fonts.engine import FontToolsEngine, TextEngine
from thaifont.fonts.models import Found, NotFound, SearchResult, build_sources
from thaifont.fonts.registration import FallbackTarget, apply_fallback
from thaifont.fonts.resolver import FontResolver


PLUGIN_GUID = "thai.font.mod"
PLUGIN_NAME = "Thai Font Fallback Mod"
PLUGIN_VERSION = "1.0.0"


@runtime_checkable
class PluginHost(Protocol):
    """What the plugin needs from its host: a resource folder and a log sink."""

    resource_dir: Path
    log: DiagnosticEmitter


@dataclass(slots=True)
class StaticHost:
    """Host description for running the plugin outside an application."""

    resource_dir: Path
    log: DiagnosticEmitter = field(default_factory=LoggingEmitter)


class ThaiFontPlugin:
    """Resolve a Thai-capable font and install it as the text system fallback."""

    def __init__(
        self,
        host: PluginHost,
        settings: FallbackTarget | None,
        *,
        config: ResolverConfig | None = None,
        engine: TextEngine | None = None,
    ) -> None:
        self.host = host
        self.settings = settings
        self.config = config or ResolverConfig()
        self.engine = engine or FontToolsEngine()
        self.result: SearchResult | None = None

    @property
    def log(self) -> DiagnosticEmitter:
        return self.host.log

    def build_resolver(self) -> FontResolver:
        """Return a resolver configured from the plugin settings."""
        return FontResolver(
            self.engine,
            emitter=self.log,
            atlas_padding=self.config.atlas_padding,
            temp_prefix=self.config.temp_prefix,
            accept=covers_thai if self.config.require_glyph_coverage else None,
        )

    def resolve(self) -> SearchResult:
        """Search the plugin folder, then the system, for a usable font."""
        self.log.info("Searching for Thai fonts...")
        self.log.info(f"Plugin folder: {self.host.resource_dir}")
        sources = build_sources(
            self.host.resource_dir, self.config.font_files, self.config.system_fonts
        )
        if not sources:
            self.log.error("No font candidates configured.")
            return NotFound()

        result = self.build_resolver().resolve_first_available(sources)
        if isinstance(result, Found):
            font = result.font
            self.log.info(f"Successfully loaded Thai font: {font.name}")
        else:
            self.log.error("No Thai-capable font found.")
            self.log.error(f"Please place a .ttf file in: {self.host.resource_dir}")
        return result

    def load(self) -> SearchResult:
        """Entry point called by the host; never raises."""
        self.log.info(f"{PLUGIN_NAME} loading...")
        try:
            self.result = self.resolve()
        except Exception as exc:
            self.log.error(f"Failed to load Thai font: {exc}", exc)
            self.result = NotFound()

        asset = self.result.font.asset if isinstance(self.result, Found) else None
        apply_fallback(asset, self.settings, self.log)
        self.log.info(f"{PLUGIN_NAME} loaded")
        return self.result


__all__ = [
    "PLUGIN_GUID",
    "PLUGIN_NAME",
    "PLUGIN_VERSION",
    "PluginHost",
    "StaticHost",
    "ThaiFontPlugin",
]
