"""Register a resolved font asset with the text system settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from thaifont.core.diagnostics import DiagnosticEmitter, LoggingEmitter
from thaifont.core.exceptions import SettingsBindingError, exception_hint
from thaifont.fonts.engine import FontAsset


FALLBACK_SLOT = "fallback_font_assets"
DEFAULT_SLOT = "default_font_asset"


@runtime_checkable
class FallbackTarget(Protocol):
    """The two settings slots the plugin writes to."""

    def has_fallback(self, asset: FontAsset) -> bool: ...

    def append_fallback(self, asset: FontAsset) -> None: ...

    def set_default(self, asset: FontAsset) -> None: ...


@dataclass(slots=True)
class TextSettings:
    """In-process text settings: a fallback list and a default asset slot."""

    fallback_font_assets: list[FontAsset] = field(default_factory=list)
    default_font_asset: FontAsset | None = None

    def has_fallback(self, asset: FontAsset) -> bool:
        return any(entry is asset for entry in self.fallback_font_assets)

    def append_fallback(self, asset: FontAsset) -> None:
        self.fallback_font_assets.append(asset)

    def set_default(self, asset: FontAsset) -> None:
        self.default_font_asset = asset


class TextSettingsBinding:
    """Adapt a foreign settings object exposing the slots by attribute name."""

    def __init__(
        self,
        settings: Any,
        *,
        fallback_slot: str = FALLBACK_SLOT,
        default_slot: str = DEFAULT_SLOT,
    ) -> None:
        self.settings = settings
        self.fallback_slot = fallback_slot
        self.default_slot = default_slot

    def _fallback_list(self) -> Any:
        fallbacks = getattr(self.settings, self.fallback_slot, None)
        if fallbacks is None or not hasattr(fallbacks, "append"):
            raise SettingsBindingError(
                f"{type(self.settings).__name__} has no '{self.fallback_slot}' list"
            )
        return fallbacks

    def has_fallback(self, asset: FontAsset) -> bool:
        return any(entry is asset for entry in self._fallback_list())

    def append_fallback(self, asset: FontAsset) -> None:
        self._fallback_list().append(asset)

    def set_default(self, asset: FontAsset) -> None:
        if not hasattr(self.settings, self.default_slot):
            raise SettingsBindingError(
                f"{type(self.settings).__name__} has no '{self.default_slot}' slot"
            )
        try:
            setattr(self.settings, self.default_slot, asset)
        except AttributeError as exc:
            raise SettingsBindingError(f"'{self.default_slot}' is read-only") from exc


def apply_fallback(
    asset: FontAsset | None,
    target: FallbackTarget | None,
    emitter: DiagnosticEmitter | None = None,
) -> bool:
    """Append ``asset`` to the fallback list and make it the default font.

    Returns True when the asset ended up registered in at least one slot.
    Failures are logged and never propagate to the caller.
    """
    emitter = emitter or LoggingEmitter()
    if asset is None:
        emitter.warning("Thai font not available; fallback not applied.")
        return False
    if target is None:
        emitter.warning("Text settings instance is not available.")
        return False

    registered = False
    try:
        if target.has_fallback(asset):
            registered = True
        else:
            target.append_fallback(asset)
            registered = True
            emitter.info(f"Added '{asset.name}' to the global fallback list.")
    except Exception as exc:
        emitter.error(f"Failed to add fallback font: {exception_hint(exc)}", exc)

    try:
        target.set_default(asset)
        registered = True
        emitter.info(f"Set '{asset.name}' as the default font.")
    except Exception as exc:
        emitter.warning(f"Could not set default font: {exception_hint(exc)}", exc)

    emitter.info("Thai font will apply to new text and scenes.")
    return registered


__all__ = [
    "DEFAULT_SLOT",
    "FALLBACK_SLOT",
    "FallbackTarget",
    "TextSettings",
    "TextSettingsBinding",
    "apply_fallback",
]
