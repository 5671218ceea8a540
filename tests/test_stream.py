"""Tests for the stream and image CLI commands."""

import base64

import pytest
from click.testing import CliRunner

from quantum_rand.cli import main


def test_stream_hex():
    runner = CliRunner()
    result = runner.invoke(main, ["stream", "--format", "hex", "--bytes", "16", "--clock", "perf_counter"])
    assert result.exit_code == 0
    output = result.output.strip()
    assert len(output) == 32
    assert all(c in "0123456789abcdef" for c in output)


def test_stream_base64():
    runner = CliRunner()
    result = runner.invoke(main, ["stream", "--format", "base64", "--bytes", "12"])
    assert result.exit_code == 0
    assert len(base64.b64decode(result.output.strip())) == 12


def test_stream_raw():
    runner = CliRunner()
    result = runner.invoke(main, ["stream", "--format", "raw", "--bytes", "10"])
    assert result.exit_code == 0
    assert len(result.stdout_bytes) == 10


def test_image(tmp_path):
    Image = pytest.importorskip("PIL.Image")
    path = tmp_path / "noise.png"
    runner = CliRunner()
    result = runner.invoke(main, ["image", str(path), "--width", "4", "--height", "3",
                                  "--clock", "perf_counter"])
    assert result.exit_code == 0, result.output
    assert path.exists()
    with Image.open(path) as img:
        assert img.size == (4, 3)
        assert img.mode == "L"
