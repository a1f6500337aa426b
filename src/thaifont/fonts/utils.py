"""Shared helpers for font handling."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname


def normalize_family(name: str) -> str:
    """Return a normalised font family key suitable for lookups."""
    return "".join(ch for ch in name.casefold() if ch not in {" ", "-", "_"})


def is_file_uri(value: str) -> bool:
    """Return True when ``value`` looks like a ``file:`` URI."""
    return value[:5].casefold() == "file:"


def path_from_uri(uri: str) -> Path:
    """Convert a ``file:`` URI back into a filesystem path."""
    parsed = urlparse(uri)
    raw = parsed.path
    if parsed.netloc and parsed.netloc.casefold() != "localhost":
        raw = f"//{parsed.netloc}{raw}"
    return Path(url2pathname(raw))


__all__ = ["is_file_uri", "normalize_family", "path_from_uri"]
