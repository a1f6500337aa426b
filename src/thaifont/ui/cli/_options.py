"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


SOURCES_PANEL = "Sources"
ASSET_PANEL = "Font Asset"
DIAGNOSTICS_PANEL = "Diagnostics"

PluginDirOption = Annotated[
    Path | None,
    typer.Option(
        "--plugin-dir",
        "-d",
        help="Folder probed for bundled font files. Defaults to the current directory.",
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        rich_help_panel=SOURCES_PANEL,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="YAML file overriding the candidate lists and asset settings.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=SOURCES_PANEL,
    ),
]

PaddingOption = Annotated[
    int | None,
    typer.Option(
        "--padding",
        min=0,
        help="Glyph atlas padding applied to the resolved font asset.",
        rich_help_panel=ASSET_PANEL,
    ),
]

RequireCoverageOption = Annotated[
    bool,
    typer.Option(
        "--require-coverage",
        help="Only accept fonts that map the Thai block.",
        rich_help_panel=ASSET_PANEL,
    ),
]

VerbosityOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]
