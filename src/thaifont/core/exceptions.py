"""Exception hierarchy for font resolution and fallback registration."""

from __future__ import annotations


class FontResolutionError(RuntimeError):
    """Base exception for font resolution failures."""


class SourceMissError(FontResolutionError):
    """Raised when a candidate source does not yield a font."""


class FontConstructionError(FontResolutionError):
    """Raised when staging or constructing a font fails unexpectedly."""


class SettingsBindingError(FontResolutionError):
    """Raised when a settings object does not expose the expected slots."""


class ConfigurationError(FontResolutionError):
    """Raised when a configuration file cannot be loaded or validated."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


__all__ = [
    "ConfigurationError",
    "FontConstructionError",
    "FontResolutionError",
    "SettingsBindingError",
    "SourceMissError",
    "exception_hint",
    "exception_messages",
]
