"""CLI command implementations exposed via `thaifont.ui.cli`."""

from __future__ import annotations

from .candidates import candidates
from .resolve import resolve


__all__ = ["candidates", "resolve"]
