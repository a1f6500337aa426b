"""Best-effort search for the first usable font among ordered candidates.

Resolution walks the candidate list in order and stops at the first source the
text engine accepts. Every per-source failure is logged and turned into a miss,
so :meth:`FontResolver.resolve_first_available` never raises for a bad font;
exhausting the list yields :class:`NotFound`, which callers treat as a normal
outcome.

File sources are copied to a uniquely named temporary file before loading and
the copy is removed whatever happens. Construction then goes through
:data:`DEFAULT_STRATEGIES` (file URI, plain path, bare name) until one of them
produces a font the engine can wrap into an asset.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

from thaifont.core.diagnostics import DiagnosticEmitter, LoggingEmitter
from thaifont.core.exceptions import FontConstructionError, SourceMissError, exception_hint
from thaifont.fonts.constants import DEFAULT_ATLAS_PADDING, DEFAULT_TEMP_PREFIX
from thaifont.fonts.engine import AtlasPopulationMode, FontAsset, FontToolsEngine, TextEngine
from thaifont.fonts.models import (
    FileSource,
    FontSource,
    Found,
    NamedSource,
    NotFound,
    Provenance,
    ResolvedFont,
    SearchResult,
    display_name,
)
from thaifont.fonts.staging import staged_font_file
from thaifont.fonts.strategies import DEFAULT_STRATEGIES, ConstructionStrategy


class FontResolver:
    """Materialise at most one font asset from a prioritised list of sources."""

    def __init__(
        self,
        engine: TextEngine | None = None,
        *,
        emitter: DiagnosticEmitter | None = None,
        atlas_padding: int = DEFAULT_ATLAS_PADDING,
        strategies: Sequence[ConstructionStrategy] = DEFAULT_STRATEGIES,
        temp_prefix: str = DEFAULT_TEMP_PREFIX,
        temp_dir: Path | None = None,
        accept: Callable[[FontAsset], bool] | None = None,
    ) -> None:
        if atlas_padding < 0:
            raise ValueError("atlas_padding must be zero or positive")
        if not strategies:
            raise ValueError("At least one construction strategy is required.")
        self.engine = engine or FontToolsEngine()
        self.emitter = emitter or LoggingEmitter()
        self.atlas_padding = atlas_padding
        self.strategies = tuple(strategies)
        self.temp_prefix = temp_prefix
        self.temp_dir = temp_dir
        self.accept = accept

    def resolve_first_available(self, sources: Sequence[FontSource]) -> SearchResult:
        """Return ``Found`` for the first source that yields a font, else ``NotFound``."""
        if not sources:
            raise ValueError("At least one font source is required.")

        attempted: list[FontSource] = []
        for source in sources:
            attempted.append(source)
            resolved = self.try_source(source)
            if resolved is None:
                continue
            self.emitter.event(
                "font_resolved",
                {
                    "name": resolved.name,
                    "source": str(source),
                    "provenance": resolved.provenance.value,
                },
            )
            return Found(resolved)
        return NotFound(attempted=tuple(attempted))

    def try_source(self, source: FontSource) -> ResolvedFont | None:
        """Attempt a single source, converting every failure into ``None``."""
        if isinstance(source, FileSource):
            attempt = self._from_file
        elif isinstance(source, NamedSource):
            attempt = self._from_name
        else:
            raise TypeError(f"Unsupported font source: {source!r}")

        try:
            resolved = attempt(source)
            if self.accept is not None and not self.accept(resolved.asset):
                raise SourceMissError(f"{resolved.name} lacks the required glyph coverage")
        except SourceMissError as exc:
            self.emitter.debug(f"Font source {source} missed: {exc}")
            return None
        except Exception as exc:
            self.emitter.warning(
                f"Failed to load {source.label}: {exception_hint(exc) or type(exc).__name__}",
                exc,
            )
            return None
        return resolved

    def _from_file(self, source: FileSource) -> ResolvedFont:
        path = source.path
        if not path.is_file():
            raise SourceMissError(f"{path} does not exist")

        self.emitter.info(f"Found font file: {path.name}")
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise FontConstructionError(f"Unable to read {path}") from exc
        self.emitter.debug(f"Loaded font file, size: {len(data)} bytes")

        with staged_font_file(
            data, source.label, prefix=self.temp_prefix, directory=self.temp_dir
        ) as staged:
            asset = self._construct(staged, source.label)

        if asset is None:
            raise SourceMissError(f"no construction strategy accepted {path.name}")
        return self._configure(asset, source, Provenance.EXTERNAL)

    def _construct(self, staged: Path, stem: str) -> FontAsset | None:
        for strategy in self.strategies:
            strategy_name = getattr(strategy, "__name__", repr(strategy))
            try:
                font = strategy(self.engine, staged, stem)
                if font is None:
                    continue
                asset = self.engine.create_font_asset(font)
            except Exception as exc:
                self.emitter.debug(
                    f"Strategy {strategy_name} failed for {stem}: {exception_hint(exc)}"
                )
                continue
            if asset is not None:
                return asset
        return None

    def _from_name(self, source: NamedSource) -> ResolvedFont:
        font = self.engine.create_font(source.name)
        if font is None:
            raise SourceMissError(f"system font '{source.name}' is not available")
        asset = self.engine.create_font_asset(font)
        if asset is None:
            raise SourceMissError(f"system font '{source.name}' cannot be rendered")
        return self._configure(asset, source, Provenance.SYSTEM)

    def _configure(
        self, asset: FontAsset, source: FontSource, provenance: Provenance
    ) -> ResolvedFont:
        asset.atlas_population_mode = AtlasPopulationMode.DYNAMIC
        asset.atlas_padding = self.atlas_padding
        asset.name = display_name(source.label, provenance)
        return ResolvedFont(asset=asset, label=source.label, provenance=provenance, source=source)


def resolve_first_available(
    sources: Sequence[FontSource],
    *,
    engine: TextEngine | None = None,
    emitter: DiagnosticEmitter | None = None,
    atlas_padding: int = DEFAULT_ATLAS_PADDING,
) -> SearchResult:
    """Resolve ``sources`` with a one-off :class:`FontResolver`."""
    resolver = FontResolver(engine, emitter=emitter, atlas_padding=atlas_padding)
    return resolver.resolve_first_available(sources)


__all__ = ["FontResolver", "resolve_first_available"]
