"""Public CLI exports for thaifont."""

from __future__ import annotations

from .app import app, main
from .commands import candidates, resolve
from .diagnostics import CliEmitter
from .state import emit_error, emit_warning, get_cli_state


__all__ = [
    "CliEmitter",
    "app",
    "candidates",
    "emit_error",
    "emit_warning",
    "get_cli_state",
    "main",
    "resolve",
]
