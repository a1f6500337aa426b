"""Value types describing candidate font sources and resolution results."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from thaifont.fonts.engine import FontAsset


class Provenance(str, Enum):
    """Where a resolved font came from."""

    EXTERNAL = "External"
    SYSTEM = "System"


@dataclass(frozen=True, slots=True)
class FileSource:
    """A font file expected on disk, usually inside the plugin folder."""

    path: Path

    @property
    def label(self) -> str:
        """Return the display label derived from the file name."""
        return self.path.stem

    def __str__(self) -> str:
        return str(self.path)


@dataclass(frozen=True, slots=True)
class NamedSource:
    """A font registered with the host system under a family name."""

    name: str

    @property
    def label(self) -> str:
        """Return the display label, which is the family name itself."""
        return self.name

    def __str__(self) -> str:
        return self.name


FontSource = FileSource | NamedSource


def display_name(label: str, provenance: Provenance) -> str:
    """Return the asset name shown by the text system, e.g. ``Tahoma (System)``."""
    return f"{label} ({provenance.value})"


@dataclass(frozen=True, slots=True)
class ResolvedFont:
    """A font asset produced by a successful resolution."""

    asset: FontAsset
    label: str
    provenance: Provenance
    source: FontSource

    @property
    def name(self) -> str:
        return display_name(self.label, self.provenance)


@dataclass(frozen=True, slots=True)
class Found:
    """Resolution outcome carrying the first usable font."""

    font: ResolvedFont

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class NotFound:
    """Resolution outcome when every candidate source missed."""

    attempted: tuple[FontSource, ...] = ()

    def __bool__(self) -> bool:
        return False


SearchResult = Found | NotFound


def build_sources(
    resource_dir: Path, font_files: Iterable[str], system_fonts: Iterable[str]
) -> list[FontSource]:
    """Return the ordered candidate list: plugin files first, then system names."""
    sources: list[FontSource] = [FileSource(resource_dir / name) for name in font_files]
    sources.extend(NamedSource(name) for name in system_fonts)
    return sources


__all__ = [
    "FileSource",
    "FontSource",
    "Found",
    "NamedSource",
    "NotFound",
    "Provenance",
    "ResolvedFont",
    "SearchResult",
    "build_sources",
    "display_name",
]
