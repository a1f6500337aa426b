"""Locate system-registered font files by family name."""

from __future__ import annotations

from collections.abc import Iterable
import os
from pathlib import Path
import shutil
import struct
import subprocess
import sys

from fontTools.ttLib import TTFont, TTLibError

from thaifont.fonts.constants import FONT_SUFFIXES
from thaifont.fonts.utils import normalize_family


SKIP_FONT_CHECKS_ENV = "THAIFONT_SKIP_FONT_CHECKS"


def read_family_name(path: Path) -> str | None:
    """Return the family name stored in the font file, or ``None`` if unreadable."""
    try:
        with TTFont(path, lazy=True, fontNumber=0) as ttfont:
            if "name" not in ttfont:
                return None
            family = ttfont["name"].getBestFamilyName()
    except (TTLibError, OSError, struct.error, ValueError):
        return None
    return str(family) if family else None


def platform_font_dirs() -> list[Path]:
    """Return the conventional font directories for the running platform."""
    home = Path.home()
    if sys.platform.startswith("win"):
        windir = Path(os.environ.get("WINDIR", "C:/Windows"))
        dirs = [windir / "Fonts"]
        local = os.environ.get("LOCALAPPDATA")
        if local:
            dirs.append(Path(local) / "Microsoft" / "Windows" / "Fonts")
        return dirs
    if sys.platform == "darwin":
        return [
            Path("/System/Library/Fonts"),
            Path("/Library/Fonts"),
            home / "Library" / "Fonts",
        ]
    return [
        Path("/usr/share/fonts"),
        Path("/usr/local/share/fonts"),
        home / ".local" / "share" / "fonts",
        home / ".fonts",
    ]


class SystemFontLocator:
    """Discover font files from fontconfig and from font directories.

    The index is built lazily on the first lookup. Every file is registered
    under its reported family names and under its file stem, so both
    ``Noto Sans Thai`` and ``NotoSansThai-Regular`` resolve.
    """

    def __init__(
        self,
        *,
        search_paths: Iterable[Path] | None = None,
        use_fontconfig: bool = True,
        scan_platform_dirs: bool = True,
    ) -> None:
        self._search_paths = list(search_paths or [])
        self._use_fontconfig = use_fontconfig
        self._scan_platform_dirs = scan_platform_dirs
        self._fonts: dict[str, Path] | None = None

    def _index(self) -> dict[str, Path]:
        if self._fonts is None:
            self._fonts = {}
            for path in self._search_paths:
                self._register_directory(path)
            if self._use_fontconfig:
                self._load_from_fontconfig()
            if self._scan_platform_dirs:
                for path in platform_font_dirs():
                    self._register_directory(path)
        return self._fonts

    def _register_entry(self, family: str, path: Path) -> None:
        key = normalize_family(family)
        if key and self._fonts is not None:
            self._fonts.setdefault(key, path)

    def _register_directory(self, path: Path) -> None:
        if not path.is_dir():
            return
        try:
            candidates = sorted(path.rglob("*"))
        except OSError:
            return
        for file_path in candidates:
            if file_path.suffix.lower() not in FONT_SUFFIXES:
                continue
            resolved = file_path.resolve()
            family = read_family_name(resolved)
            if family:
                self._register_entry(family, resolved)
            self._register_entry(file_path.stem, resolved)

    def _load_from_fontconfig(self) -> None:
        if shutil.which("fc-list") is None or os.environ.get(SKIP_FONT_CHECKS_ENV):
            return
        try:
            proc = subprocess.run(
                ["fc-list", "-f", "%{file}|%{family}\n"],
                check=True,
                capture_output=True,
                text=True,
                timeout=10,
            )
        except (OSError, subprocess.SubprocessError):
            return

        for line in proc.stdout.splitlines():
            parts = line.split("|")
            if len(parts) != 2:
                continue
            file_part, families_part = parts
            path = Path(file_part).expanduser()
            if not path.exists():
                continue
            for family in families_part.split(","):
                if family.strip():
                    self._register_entry(family.strip(), path)
            self._register_entry(path.stem, path)

    def available_families(self) -> set[str]:
        """Return the normalised family keys discovered so far."""
        return set(self._index())

    def find(self, name: str) -> Path | None:
        """Return the font file registered for ``name``, if any."""
        return self._index().get(normalize_family(name))

    def refresh(self) -> None:
        """Drop the index so the next lookup rescans the system."""
        self._fonts = None


__all__ = [
    "SKIP_FONT_CHECKS_ENV",
    "SystemFontLocator",
    "platform_font_dirs",
    "read_family_name",
]
