# SPDX-License-Identifier: MIT
"""Tests for the bower-json command line."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from bower_json.cli import cli


class TestFindCommand:
    """Tests for bower-json find."""

    def test_prints_manifest_path(self, cli_runner: CliRunner, package_dir: Path, write_manifest):
        file = write_manifest({"name": "pkg"})
        result = cli_runner.invoke(cli, ["find", str(package_dir)])
        assert result.exit_code == 0
        assert result.output.strip() == str(file.resolve())

    def test_missing_manifest(self, cli_runner: CliRunner, package_dir: Path):
        result = cli_runner.invoke(cli, ["find", str(package_dir)])
        assert result.exit_code == 1


class TestReadCommand:
    """Tests for bower-json read."""

    def test_prints_manifest(self, cli_runner: CliRunner, package_dir: Path, write_manifest):
        write_manifest({"name": "pkg", "main": "index.js"})
        result = cli_runner.invoke(cli, ["read", str(package_dir)])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"name": "pkg", "main": "index.js"}

    def test_normalize_flag(self, cli_runner: CliRunner, package_dir: Path, write_manifest):
        write_manifest({"name": "pkg", "main": "index.js"})
        result = cli_runner.invoke(cli, ["read", str(package_dir), "--normalize"])
        assert result.exit_code == 0
        assert json.loads(result.output)["main"] == ["index.js"]

    def test_invalid_manifest(self, cli_runner: CliRunner, package_dir: Path, write_manifest):
        write_manifest({"name": "My-Pkg"})
        result = cli_runner.invoke(cli, ["read", str(package_dir)])
        assert result.exit_code == 1

    def test_loose_names(self, cli_runner: CliRunner, package_dir: Path, write_manifest):
        write_manifest({"name": "My-Pkg"})
        result = cli_runner.invoke(cli, ["read", str(package_dir), "--loose-names"])
        assert result.exit_code == 0
        assert json.loads(result.output)["name"] == "My-Pkg"

    def test_no_validate(self, cli_runner: CliRunner, package_dir: Path, write_manifest):
        write_manifest({"main": ["a.js", "b.js"]})
        result = cli_runner.invoke(cli, ["read", str(package_dir), "--no-validate"])
        assert result.exit_code == 0

    def test_malformed_manifest(self, cli_runner: CliRunner, package_dir: Path):
        (package_dir / "bower.json").write_text("{")
        result = cli_runner.invoke(cli, ["read", str(package_dir)])
        assert result.exit_code == 1


class TestValidateCommand:
    """Tests for bower-json validate."""

    def test_valid_manifest(self, cli_runner: CliRunner, package_dir: Path, write_manifest):
        write_manifest({"name": "pkg", "main": "index.js"})
        result = cli_runner.invoke(cli, ["validate", str(package_dir)])
        assert result.exit_code == 0
        assert "Validation passed" in result.output

    def test_reports_errors(self, cli_runner: CliRunner, package_dir: Path, write_manifest):
        write_manifest({"name": "My-Pkg", "main": ["a.js", "b.js"]})
        result = cli_runner.invoke(cli, ["validate", str(package_dir)])
        assert result.exit_code == 1
        assert "Validation passed" not in result.output

    def test_loose_names(self, cli_runner: CliRunner, package_dir: Path, write_manifest):
        write_manifest({"name": "My-Pkg"})
        result = cli_runner.invoke(cli, ["validate", str(package_dir), "--loose-names"])
        assert result.exit_code == 0

    def test_allow_missing_name(self, cli_runner: CliRunner, package_dir: Path, write_manifest):
        write_manifest({"main": "index.js"})
        assert cli_runner.invoke(cli, ["validate", str(package_dir)]).exit_code == 1
        result = cli_runner.invoke(cli, ["validate", str(package_dir), "--allow-missing-name"])
        assert result.exit_code == 0

    def test_verbose(self, cli_runner: CliRunner, package_dir: Path, write_manifest):
        file = write_manifest({"name": "pkg"})
        result = cli_runner.invoke(cli, ["-v", "validate", str(package_dir)])
        assert result.exit_code == 0
        assert f"Validating: {file.resolve()}" in result.output
