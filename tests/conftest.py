# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for bower-json tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def package_dir(tmp_path: Path) -> Path:
    """Create an empty package directory."""
    directory = tmp_path / "package"
    directory.mkdir()
    return directory


@pytest.fixture
def write_manifest(package_dir: Path) -> Callable[..., Path]:
    """Return a helper writing a JSON manifest into the package directory."""

    def _write(data: Any, filename: str = "bower.json") -> Path:
        path = package_dir / filename
        path.write_text(json.dumps(data))
        return path

    return _write
