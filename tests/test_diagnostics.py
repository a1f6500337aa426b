from __future__ import annotations

import logging

import click
import pytest

from thaifont.core.diagnostics import (
    DiagnosticEmitter,
    LoggingEmitter,
    NullEmitter,
    format_event_message,
)
from thaifont.core.exceptions import (
    FontConstructionError,
    FontResolutionError,
    exception_hint,
    exception_messages,
)
from thaifont.ui.cli.diagnostics import CliEmitter
from thaifont.ui.cli.state import CLIState, get_cli_state, set_cli_state


def test_null_emitter_is_noop(caplog: pytest.LogCaptureFixture) -> None:
    emitter = NullEmitter()
    with caplog.at_level(logging.DEBUG):
        emitter.debug("quiet")
        emitter.info("quiet")
        emitter.warning("nothing to see")
        emitter.error("still quiet")
    assert not caplog.records
    emitter.event("ignored", {"value": 1})
    assert emitter.debug_enabled is False


def test_emitters_satisfy_protocol() -> None:
    assert isinstance(NullEmitter(), DiagnosticEmitter)
    assert isinstance(LoggingEmitter(), DiagnosticEmitter)


def test_logging_emitter_logs_messages(caplog: pytest.LogCaptureFixture) -> None:
    emitter = LoggingEmitter(debug_enabled=True)
    with caplog.at_level(logging.DEBUG):
        emitter.debug("probing Itim")
        emitter.error("boom")
        emitter.event("font_resolved", {"name": "Itim (System)", "source": "Itim"})
    messages = [record.message for record in caplog.records]
    assert "probing Itim" in messages
    assert "boom" in messages
    assert "Resolved font: Itim (System) from Itim" in messages


def test_unknown_events_have_no_summary() -> None:
    assert format_event_message("custom", {"flag": True}) is None
    assert format_event_message("font_resolved", {}) == "Resolved font: <unknown>"


def test_cli_emitter_bridges_state(capsys: pytest.CaptureFixture[str]) -> None:
    state = set_cli_state(verbosity=1, debug=False)
    emitter = CliEmitter(state=state)

    emitter.info("Searching for Thai fonts...")
    emitter.warning("Heads up", exc=None)
    emitter.error("Boom", exc=RuntimeError("root cause"))
    emitter.event("custom", {"flag": True})

    captured = capsys.readouterr()
    combined_output = f"{captured.out}\n{captured.err}"
    assert "Searching for Thai fonts" in combined_output
    assert "Heads up" in combined_output
    assert "Boom" in combined_output
    assert "root cause" in combined_output
    assert state.consume_events("custom") == [{"flag": True}]


def test_cli_emitter_hides_debug_without_verbosity(capsys: pytest.CaptureFixture[str]) -> None:
    state = set_cli_state(verbosity=0, debug=False)
    CliEmitter(state=state).debug("hidden detail")
    captured = capsys.readouterr()
    assert "hidden detail" not in f"{captured.out}{captured.err}"


def test_exception_hint_reports_root_cause() -> None:
    try:
        try:
            raise OSError("disk unreadable")
        except OSError as exc:
            raise FontConstructionError("Unable to read font.ttf") from exc
    except FontResolutionError as error:
        assert exception_messages(error) == ["Unable to read font.ttf", "disk unreadable"]
        assert exception_hint(error) == "disk unreadable"


def test_cli_state_is_shared_along_the_context_chain() -> None:
    parent = click.Context(click.Command("thaifont"))
    child = click.Context(click.Command("resolve"), parent=parent)

    state = get_cli_state(parent)

    assert isinstance(state, CLIState)
    assert parent.obj is state
    assert get_cli_state(child) is state
    assert set_cli_state(ctx=child, verbosity=-2, debug=True) is state
    assert state.verbosity == 0
    assert state.show_tracebacks is True
