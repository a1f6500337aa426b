"""Typer application wiring for the thaifont CLI."""

from __future__ import annotations

import typer

from .commands import candidates, resolve
from .state import emit_error, get_cli_state


app = typer.Typer(
    help="Locate a Thai-capable font and register it as the text fallback.",
    context_settings={"help_option_names": ["--help"]},
    no_args_is_help=True,
)

app.command("resolve")(resolve)
app.command("candidates")(candidates)


def main() -> None:
    """Entry point compatible with console scripts."""
    try:
        app()
    except typer.Exit:
        raise
    except KeyboardInterrupt as exc:
        if get_cli_state().show_tracebacks:
            raise
        emit_error("Operation cancelled by user.", exception=exc)
        raise typer.Exit(code=1) from exc
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - defensive catch-all
        state = get_cli_state()
        if state.show_tracebacks:
            from rich.traceback import Traceback

            tb = Traceback.from_exception(
                type(exc),
                exc,
                exc.__traceback__,
                show_locals=state.verbosity >= 2,
            )
            state.err_console.print(tb)
        else:
            emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


__all__ = ["app", "main"]
