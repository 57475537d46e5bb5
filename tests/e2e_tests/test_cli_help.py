"""End-to-end smoke tests for the installed CLI entrypoint."""

from __future__ import annotations

import subprocess
from pathlib import Path

import image_converter


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert image_converter.__version__


def test_cli_help_smoke() -> None:
    """Ensure the installed CLI entrypoint responds to --help."""
    result = subprocess.run(
        ["convert-images", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "Recursively convert images" in result.stdout


def test_cli_missing_source_fails_cleanly(tmp_path: Path) -> None:
    """Ensure CLI returns a user-facing validation error for a missing source."""
    result = subprocess.run(
        ["convert-images", "convert", str(tmp_path / "definitely-missing")],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 2
    assert "failed to get directory" in result.stderr
