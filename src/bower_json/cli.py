# SPDX-License-Identifier: MIT
"""CLI entry point for the bower-json command."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from collections.abc import Coroutine
from pathlib import Path
from typing import Any, TypeVar

import click

from .config import ParseOptions, ValidationOptions
from .errors import ManifestError, ManifestNotFoundError
from .locator import find
from .reader import read
from .validator import find_errors


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.verbose: bool = False


T = TypeVar("T")

pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def _run(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine, reporting manifest errors and exiting with status 1."""
    try:
        return asyncio.run(coro)
    except ManifestNotFoundError as e:
        echo_error(e.message)
        raise SystemExit(1)
    except ManifestError as e:
        location = f" [{e.file}]" if e.file is not None else ""
        echo_error(f"{e.code}: {e.message}{location}")
        raise SystemExit(1)


@click.group()
@click.version_option(package_name="bower-json")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@pass_context
def cli(ctx: Context, verbose: bool) -> None:
    """Read and validate bower.json package manifests.

    \b
    Examples:
        bower-json find path/to/package
        bower-json read path/to/package --normalize
        bower-json validate path/to/bower.json
    """
    ctx.verbose = verbose
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command("find")
@click.argument("directory", type=click.Path(file_okay=False, path_type=Path))
def find_command(directory: Path) -> None:
    """Print the path of the manifest inside DIRECTORY."""
    path = _run(find(directory))
    echo_info(str(path))


@cli.command("read")
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--normalize", is_flag=True, help="Normalize fields into canonical shapes.")
@click.option("--no-validate", is_flag=True, help="Skip validation.")
@click.option("--loose-names", is_flag=True, help="Allow upper case package names.")
@click.option("--allow-missing-name", is_flag=True, help="Do not require a name field.")
def read_command(
    path: Path,
    normalize: bool,
    no_validate: bool,
    loose_names: bool,
    allow_missing_name: bool,
) -> None:
    """Read the manifest at PATH and print it as JSON.

    PATH may be a manifest file or a package directory.
    """
    options = ParseOptions(
        enforce_name_exists=not allow_missing_name,
        strict_names=not loose_names,
        normalize=normalize,
        validate=not no_validate,
    )
    manifest, _ = _run(read(path, options))
    echo_info(json.dumps(manifest, indent=2))


@cli.command("validate")
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--loose-names", is_flag=True, help="Allow upper case package names.")
@click.option("--allow-missing-name", is_flag=True, help="Do not require a name field.")
@pass_context
def validate_command(
    ctx: Context,
    path: Path,
    loose_names: bool,
    allow_missing_name: bool,
) -> None:
    """Validate the manifest at PATH and report every error.

    \b
    Examples:
        bower-json validate .                  # Validate the package in cwd
        bower-json validate bower.json         # Validate a specific file
        bower-json validate . --loose-names    # Allow upper case names
    """
    options = ValidationOptions(
        enforce_name_exists=not allow_missing_name,
        strict_names=not loose_names,
    )
    manifest, file = _run(read(path, ParseOptions(validate=False)))

    if ctx.verbose:
        echo_info(f"Validating: {file}")

    errors = find_errors(manifest, options)
    if errors:
        echo_error(f"Errors ({len(errors)}) in {file}:")
        for error in errors:
            echo_error(f"  - {error.message}")
        raise SystemExit(1)

    echo_success(f"Validation passed: {file}")


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
