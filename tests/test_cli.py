from __future__ import annotations

import importlib
from pathlib import Path

import pytest
from typer.testing import CliRunner

from thaifont.ui.cli import app


resolve_module = importlib.import_module("thaifont.ui.cli.commands.resolve")


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_candidates_lists_sources_in_order(runner: CliRunner, tmp_path: Path) -> None:
    (tmp_path / "font.ttf").write_bytes(b"")

    result = runner.invoke(app, ["candidates", "--plugin-dir", str(tmp_path)])

    assert result.exit_code == 0, result.output
    output = result.output
    assert output.index("Itim-Regular.ttf") < output.index("thai.ttf") < output.index("Tahoma")
    assert "present" in output
    assert "missing" in output


def test_resolve_registers_plugin_font(
    runner: CliRunner, make_font, tmp_path: Path, no_system_fonts
) -> None:
    plugin_dir = tmp_path / "plugin"
    plugin_dir.mkdir()
    make_font("font.ttf").replace(plugin_dir / "font.ttf")

    result = runner.invoke(app, ["resolve", "--plugin-dir", str(plugin_dir), "--padding", "7"])

    assert result.exit_code == 0, result.output
    assert "font (External)" in result.output
    assert "dynamic" in result.output
    assert "7" in result.output


def test_resolve_exits_non_zero_when_nothing_found(
    runner: CliRunner, tmp_path: Path, no_system_fonts
) -> None:
    config = tmp_path / "thaifont.yml"
    config.write_text(
        "font_files: [font.ttf]\nsystem_fonts: [Definitely Not A Font]\n", encoding="utf-8"
    )

    result = runner.invoke(
        app, ["resolve", "--plugin-dir", str(tmp_path), "--config", str(config)]
    )

    assert result.exit_code == 1
    assert "No Thai-capable font found." in result.output


def test_invalid_config_is_reported(runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "thaifont.yml"
    config.write_text("atlas_padding: -3\n", encoding="utf-8")

    result = runner.invoke(app, ["candidates", "--config", str(config)])

    assert result.exit_code == 2
    assert "Invalid configuration" in result.output


def test_cli_overrides_apply_on_top_of_config(tmp_path: Path) -> None:
    config = tmp_path / "thaifont.yml"
    config.write_text("atlas_padding: 2\n", encoding="utf-8")

    loaded = resolve_module.load_cli_config(config, padding=11, require_coverage=True)

    assert loaded.atlas_padding == 11
    assert loaded.require_glyph_coverage is True
    assert resolve_module.load_cli_config(config).atlas_padding == 2
