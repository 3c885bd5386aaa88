"""Tests for the CLI entry points."""

from pathlib import Path

from click.testing import CliRunner

from star_overlay.cli import cli

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"
ALPHA_CENTAURI = EXAMPLES_DIR / "alpha_centauri.sys"


def test_render_produces_svg(tmp_path):
    """render command produces an SVG file."""
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(ALPHA_CENTAURI), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert out.exists()
    assert "<svg" in out.read_text(encoding="utf-8")
    assert "5 objects" in result.output


def test_render_default_output(tmp_path):
    """render command uses input stem + .svg when no -o given."""
    sys_file = tmp_path / "test.sys"
    sys_file.write_text(ALPHA_CENTAURI.read_text(encoding="utf-8"), encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(sys_file), "--theme", "light"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "test.svg").exists()


def test_validate_success():
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(ALPHA_CENTAURI)])
    assert result.exit_code == 0
    assert "Valid: 7 objects (5 known)" in result.output


def test_validate_bad_file(tmp_path):
    bad = tmp_path / "bad.sys"
    bad.write_text("planet: a | A | nowhere | 0 | 1\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(bad)])
    assert result.exit_code == 1
    assert "Parse error" in result.output


def test_info_output():
    runner = CliRunner()
    result = runner.invoke(cli, ["info", str(ALPHA_CENTAURI)])
    assert result.exit_code == 0, result.output
    assert "Title: Alpha Centauri" in result.output
    assert "Resolution:" in result.output
    assert "ac_a: radius" in result.output
    assert "[1] Rendezvous" in result.output


def test_verbose_flag():
    runner = CliRunner()
    result = runner.invoke(cli, ["-v", "validate", str(ALPHA_CENTAURI)])
    assert result.exit_code == 0
