"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys

from uribeacon import __version__


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "uribeacon.cli.main", *args],
        capture_output=True,
        text=True,
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = _run("--help")
    assert result.returncode == 0
    assert "uribeacon: URL Beacon Codec" in result.stdout
    assert "--encode" in result.stdout
    assert "--analyze" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = _run("--version")
    assert result.returncode == 0
    assert f"uribeacon {__version__}" in result.stdout


def test_cli_encode() -> None:
    """Test CLI --encode prints a hex payload."""
    result = _run("--encode", "http://www.eff.org")
    assert result.returncode == 0
    assert result.stdout.strip() == "0065666608"


def test_cli_encode_frame() -> None:
    """Test CLI --encode --frame prints service data."""
    result = _run("--encode", "http://www.eff.org", "--frame", "--tx-power", "-10")
    assert result.returncode == 0
    assert result.stdout.strip() == "10f60065666608"


def test_cli_decode() -> None:
    """Test CLI --decode prints the URL."""
    result = _run("--decode", "0065666608")
    assert result.returncode == 0
    assert result.stdout.strip() == "http://www.eff.org"


def test_cli_decode_frame() -> None:
    """Test CLI --decode --frame strips the frame header."""
    result = _run("--decode", "10ba0065666608", "--frame")
    assert result.returncode == 0
    assert result.stdout.strip() == "http://www.eff.org"


def test_cli_analyze() -> None:
    """Test CLI --analyze prints the breakdown."""
    result = _run("--analyze", "https://www.example.com/")
    assert result.returncode == 0
    assert "uribeacon: URL Beacon Codec" in result.stdout
    assert "Segments" in result.stdout
    assert "'example'" in result.stdout
    assert "Encoded size: 9 bytes" in result.stdout
    assert "Fits advertisement: yes" in result.stdout


def test_cli_analyze_too_long() -> None:
    """Test CLI --analyze flags URLs over the budget."""
    result = _run("--analyze", "https://www.a-very-long-host-name.example.com/")
    assert result.returncode == 0
    assert "Fits advertisement: NO" in result.stdout


def test_cli_rotate() -> None:
    """Test CLI --rotate prints a rotating URL."""
    result = _run("--rotate", "--base-url", "https://x.org/")
    assert result.returncode == 0
    url = result.stdout.strip()
    assert url.startswith("https://x.org/")
    assert len(url) == len("https://x.org/") + 5


def test_cli_unknown_scheme() -> None:
    """Test CLI --encode with an unsupported scheme."""
    result = _run("--encode", "ftp://example.com")
    assert result.returncode == 1
    assert "Error" in result.stderr


def test_cli_bad_hex() -> None:
    """Test CLI --decode with invalid hex."""
    result = _run("--decode", "zz")
    assert result.returncode == 1
    assert "Error" in result.stderr


def test_cli_decode_non_ascii() -> None:
    """Test CLI --decode with a byte above 0x7F."""
    result = _run("--decode", "0261ff80")
    assert result.returncode == 1
    assert "not an ASCII character" in result.stderr


def test_cli_decode_empty() -> None:
    """Test CLI --decode with an empty payload."""
    result = _run("--decode", "")
    assert result.returncode == 1
    assert "empty" in result.stderr


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = _run()
    assert result.returncode == 0
    assert "uribeacon: URL Beacon Codec" in result.stdout
