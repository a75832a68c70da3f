"""Tests for the command-line interface."""

import pytest
from pathlib import Path
import sys

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from typer.testing import CliRunner

from pitchcircle.cli import app, parse_pitches

runner = CliRunner()


class TestParsePitches:
    """Tests for pitch argument parsing."""

    def test_separate_and_joined(self):
        assert parse_pitches(["c", "e", "g"]) == ["c", "e", "g"]
        assert parse_pitches(["ceg"]) == ["c", "e", "g"]
        assert parse_pitches(["CEG"]) == ["c", "e", "g"]

    def test_unknown_symbols_skipped(self):
        assert parse_pitches(["c", "x", "e"]) == ["c", "e"]

    def test_none(self):
        assert parse_pitches(None) == []


class TestCommands:
    """Tests for CLI commands."""

    def test_detect_major(self):
        result = runner.invoke(app, ["detect", "c", "e", "g"])
        assert result.exit_code == 0
        assert "c major" in result.output
        assert "Next Chords" in result.output

    def test_detect_joined_minor(self):
        result = runner.invoke(app, ["detect", "csg"])
        assert result.exit_code == 0
        assert "c minor" in result.output

    def test_detect_ignores_stray_symbols(self):
        result = runner.invoke(app, ["detect", "c", "x", "e", "g"])
        assert result.exit_code == 0
        assert "Ignoring unknown pitch 'x'" in result.output
        assert "c major" in result.output

    def test_detect_nothing(self):
        result = runner.invoke(app, ["detect"])
        assert result.exit_code == 0
        assert "No chord detected" in result.output

    def test_transpose(self):
        result = runner.invoke(app, ["transpose", "c", "e", "g", "--by", "7"])
        assert result.exit_code == 0
        assert "g major" in result.output

    def test_transpose_trace_sound(self):
        result = runner.invoke(app, ["transpose", "c", "--by", "7", "--trace-sound"])
        assert result.exit_code == 0
        assert "+c -c +g" in result.output

    def test_mirror(self):
        result = runner.invoke(app, ["mirror", "c", "e", "g", "--center", "c"])
        assert result.exit_code == 0
        assert "f minor" in result.output

    def test_mirror_unknown_center(self):
        result = runner.invoke(app, ["mirror", "c", "--center", "x"])
        assert result.exit_code == 1
        assert "Unknown axis pitch" in result.output

    def test_rotate_fifths(self):
        result = runner.invoke(app, ["rotate", "c", "e", "g", "--steps", "1"])
        assert result.exit_code == 0
        assert "7 semitones" in result.output
        assert "g major" in result.output

    def test_rotate_chromatic(self):
        result = runner.invoke(app, ["rotate", "ceg", "-s", "2", "-l", "chromatic"])
        assert result.exit_code == 0
        assert "d major" in result.output

    def test_rotate_unknown_layout(self):
        result = runner.invoke(app, ["rotate", "c", "--layout", "spiral"])
        assert result.exit_code == 1
        assert "Unknown layout" in result.output

    def test_circle(self):
        result = runner.invoke(app, ["circle", "c", "e", "g"])
        assert result.exit_code == 0
        assert "Interval Lines" in result.output

    def test_circle_empty_has_no_lines(self):
        result = runner.invoke(app, ["circle", "--layout", "chromatic"])
        assert result.exit_code == 0
        assert "Interval Lines" not in result.output

    def test_numerals(self):
        result = runner.invoke(app, ["numerals"])
        assert result.exit_code == 0
        assert "Functional Numerals" in result.output
        assert "IVmaj7" in result.output
