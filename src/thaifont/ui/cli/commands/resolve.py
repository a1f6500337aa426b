"""Run the plugin procedure outside a host and report the outcome."""

from __future__ import annotations

from pathlib import Path

import typer

from thaifont.core.config import ResolverConfig, load_config
from thaifont.core.exceptions import ConfigurationError
from thaifont.fonts.models import Found
from thaifont.fonts.registration import TextSettings
from thaifont.plugin import StaticHost, ThaiFontPlugin

from .._options import (
    ConfigOption,
    DebugOption,
    PaddingOption,
    PluginDirOption,
    RequireCoverageOption,
    VerbosityOption,
)
from ..diagnostics import CliEmitter
from ..state import emit_error, get_cli_state, set_cli_state


def load_cli_config(
    config_path: Path | None,
    *,
    padding: int | None = None,
    require_coverage: bool = False,
) -> ResolverConfig:
    """Load the configuration file and apply command-line overrides."""
    try:
        config = load_config(config_path)
    except ConfigurationError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=2) from exc

    updates: dict[str, object] = {}
    if padding is not None:
        updates["atlas_padding"] = padding
    if require_coverage:
        updates["require_glyph_coverage"] = True
    return config.model_copy(update=updates) if updates else config


def resolve(
    ctx: typer.Context,
    plugin_dir: PluginDirOption = None,
    config_path: ConfigOption = None,
    padding: PaddingOption = None,
    require_coverage: RequireCoverageOption = False,
    verbose: VerbosityOption = 0,
    debug: DebugOption = False,
) -> None:
    """Resolve a Thai font and register it with a local text settings object."""
    state = set_cli_state(ctx=ctx, verbosity=verbose, debug=debug)
    config = load_cli_config(config_path, padding=padding, require_coverage=require_coverage)

    host = StaticHost(resource_dir=plugin_dir or Path.cwd(), log=CliEmitter(state))
    settings = TextSettings()
    result = ThaiFontPlugin(host, settings, config=config).load()

    if not isinstance(result, Found):
        raise typer.Exit(code=1)

    from rich.table import Table

    font = result.font
    table = Table(title="Resolved font", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Name", font.name)
    table.add_row("Provenance", font.provenance.value)
    table.add_row("Source", str(font.source))
    table.add_row("Family", font.asset.font.family)
    table.add_row("Atlas mode", font.asset.atlas_population_mode.value)
    table.add_row("Atlas padding", str(font.asset.atlas_padding))
    table.add_row("Glyphs mapped", str(len(font.asset.font.cmap())))
    get_cli_state().console.print(table)


__all__ = ["load_cli_config", "resolve"]
