"""Per-invocation CLI state: verbosity, consoles and recorded resolver events."""

from __future__ import annotations

from collections.abc import Mapping
from contextvars import ContextVar
from dataclasses import dataclass, field
import sys
from typing import TYPE_CHECKING, Any, TextIO

import click


if TYPE_CHECKING:
    from rich.console import Console


@dataclass(slots=True)
class CLIState:
    """Diagnostic settings shared by the commands of one invocation."""

    verbosity: int = 0
    show_tracebacks: bool = False
    events: dict[str, list[dict[str, Any]]] = field(default_factory=dict, init=False)
    _consoles: dict[int, Console] = field(default_factory=dict, init=False, repr=False)

    def _console_for(self, stream: TextIO, **options: Any) -> Console:
        # Test runners swap sys.stdout/sys.stderr, so consoles are keyed by stream.
        from rich.console import Console

        console = self._consoles.get(id(stream))
        if console is None or console.file is not stream:
            console = Console(file=stream, **options)
            self._consoles[id(stream)] = console
        return console

    @property
    def console(self) -> Console:
        return self._console_for(sys.stdout)

    @property
    def err_console(self) -> Console:
        return self._console_for(sys.stderr, highlight=False)

    def record_event(self, name: str, payload: Mapping[str, Any] | None = None) -> None:
        self.events.setdefault(name, []).append(dict(payload or {}))

    def consume_events(self, name: str) -> list[dict[str, Any]]:
        """Return and forget the events recorded under ``name``."""
        return self.events.pop(name, [])


_STATE_VAR: ContextVar[CLIState | None] = ContextVar("thaifont_cli_state", default=None)


def get_cli_state(ctx: click.Context | None = None) -> CLIState:
    """Return the state attached to the click context chain, creating it on demand."""
    ctx = ctx or click.get_current_context(silent=True)
    if ctx is not None:
        node: click.Context | None = ctx
        while node is not None:
            if isinstance(node.obj, CLIState):
                _STATE_VAR.set(node.obj)
                return node.obj
            node = node.parent
        state = CLIState()
        ctx.obj = state
        _STATE_VAR.set(state)
        return state

    state = _STATE_VAR.get()
    if state is None:
        state = CLIState()
        _STATE_VAR.set(state)
    return state


def set_cli_state(
    *,
    ctx: click.Context | None = None,
    verbosity: int | None = None,
    debug: bool | None = None,
) -> CLIState:
    """Apply the global diagnostic flags and return the active state."""
    state = get_cli_state(ctx)
    if verbosity is not None:
        state.verbosity = max(0, verbosity)
    if debug is not None:
        state.show_tracebacks = debug
    return state


def _causes(exc: BaseException) -> list[str]:
    causes: list[str] = []
    seen: set[int] = set()
    current = exc.__cause__ or exc.__context__
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        causes.append(f"{type(current).__name__}: {current}")
        current = current.__cause__ or current.__context__
    return causes


def render_message(
    level: str,
    message: str,
    *,
    exception: BaseException | None = None,
) -> None:
    """Print ``message`` at ``level``; exception detail grows with verbosity."""
    state = get_cli_state()

    if level in {"info", "debug"}:
        if level == "info" or state.verbosity >= 1:
            state.console.log(message)
        return

    from rich.text import Text

    style = "red" if level == "error" else "yellow"
    text = Text.assemble((f"{level}: ", f"bold {style}"), (message, style))
    if exception is not None and state.verbosity >= 1:
        lines = [f"type: {type(exception).__name__}"]
        detail = str(exception).strip()
        if detail and detail not in message:
            lines.insert(0, detail)
        if state.verbosity >= 2:
            lines.extend(f"caused by {cause}" for cause in _causes(exception))
        text.append("\n" + "\n".join(lines), style=style)

    state.err_console.print(text)


def emit_warning(message: str, *, exception: BaseException | None = None) -> None:
    render_message("warning", message, exception=exception)


def emit_error(message: str, *, exception: BaseException | None = None) -> None:
    render_message("error", message, exception=exception)


__all__ = [
    "CLIState",
    "emit_error",
    "emit_warning",
    "get_cli_state",
    "render_message",
    "set_cli_state",
]
