"""Construction strategies tried, in order, on a staged font file.

Each strategy is a plain function ``(engine, staged, stem) -> FontObject | None``
so the policy stays a data-driven tuple that callers can reorder or extend.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from thaifont.fonts.engine import FontObject, TextEngine


ConstructionStrategy = Callable[[TextEngine, Path, str], FontObject | None]


def from_file_uri(engine: TextEngine, staged: Path, stem: str) -> FontObject | None:
    """Load the staged file through its ``file:`` URI."""
    return engine.create_font(staged.resolve().as_uri())


def from_path(engine: TextEngine, staged: Path, stem: str) -> FontObject | None:
    """Load the staged file through its plain filesystem path."""
    return engine.create_font(str(staged))


def from_bare_name(engine: TextEngine, staged: Path, stem: str) -> FontObject | None:
    """Ask the engine for a font named after the original file stem."""
    return engine.create_font(stem)


DEFAULT_STRATEGIES: tuple[ConstructionStrategy, ...] = (from_file_uri, from_path, from_bare_name)


__all__ = [
    "DEFAULT_STRATEGIES",
    "ConstructionStrategy",
    "from_bare_name",
    "from_file_uri",
    "from_path",
]
