"""List the ordered candidate sources the resolver would try."""

from __future__ import annotations

from pathlib import Path

import typer

from thaifont.fonts.models import FileSource, build_sources

from .._options import ConfigOption, PluginDirOption
from ..state import get_cli_state
from .resolve import load_cli_config


def candidates(
    ctx: typer.Context,
    plugin_dir: PluginDirOption = None,
    config_path: ConfigOption = None,
) -> None:
    """Print the candidate sources in priority order."""
    from rich.table import Table

    config = load_cli_config(config_path)
    resource_dir = plugin_dir or Path.cwd()
    sources = build_sources(resource_dir, config.font_files, config.system_fonts)

    table = Table(title=f"Font candidates ({resource_dir})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind", style="cyan")
    table.add_column("Source")
    table.add_column("Status", style="green")
    for index, source in enumerate(sources, start=1):
        if isinstance(source, FileSource):
            status = "present" if source.path.is_file() else "missing"
            table.add_row(str(index), "file", source.path.name, status)
        else:
            table.add_row(str(index), "system", source.name, "-")
    get_cli_state(ctx).console.print(table)


__all__ = ["candidates"]
