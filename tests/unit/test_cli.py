"""Tests for the command-line interface."""

from pathlib import Path

from typer.testing import CliRunner

from glyphstrip import __version__
from glyphstrip.cli.app import app

runner = CliRunner()


class TestCli:
    """Tests for the render command."""

    def test_version(self):
        """Test --version prints the version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_font(self, tmp_path: Path):
        """Test a missing font file exits with an error."""
        result = runner.invoke(app, ["--fontfile", str(tmp_path / "nope.ttf")])
        assert result.exit_code == 1
        assert "Font file not found" in result.output

    def test_invalid_hinting(self, box_font_path: Path):
        """Test an unknown hinting mode is rejected."""
        result = runner.invoke(app, ["-f", str(box_font_path), "--hinting", "medium"])
        assert result.exit_code == 1
        assert "Invalid hinting mode" in result.output

    def test_invalid_log_level(self, box_font_path: Path):
        """Test an unknown log level is rejected with an error line."""
        result = runner.invoke(app, ["-f", str(box_font_path), "--log-level", "FOO"])
        assert result.exit_code == 1
        assert "Invalid log level" in result.output
        assert not isinstance(result.exception, AttributeError)

    def test_verbose_and_quiet(self, box_font_path: Path):
        """Test --verbose and --quiet are mutually exclusive."""
        result = runner.invoke(app, ["-f", str(box_font_path), "-v", "-q"])
        assert result.exit_code == 1

    def test_render(self, box_font_path: Path, tmp_path: Path):
        """Test a quiet run writes one file per strip."""
        result = runner.invoke(
            app,
            [
                "-f",
                str(box_font_path),
                "--text",
                "Hi there",
                "--interval",
                "0",
                "--output",
                "{index}-{unit}.png",
                "--output-dir",
                str(tmp_path),
                "--quiet",
            ],
        )
        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in tmp_path.iterdir()) == ["0-Hi.png", "1-there.png"]

    def test_geometry_error(self, letters_font_path: Path, tmp_path: Path):
        """Test a font without the reference glyph fails cleanly."""
        result = runner.invoke(
            app,
            ["-f", str(letters_font_path), "--text", "Hi", "--output-dir", str(tmp_path)],
        )
        assert result.exit_code == 1
        assert "advance width" in result.output
        assert list(tmp_path.iterdir()) == []
