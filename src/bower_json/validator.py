# SPDX-License-Identifier: MIT
"""Manifest validation for bower.json packages.

All rules live in :func:`iter_errors`, which yields violations in rule order.
:func:`find_errors` collects every violation for diagnostic reports and
:func:`validate` raises the first one.
"""

from __future__ import annotations

import json
import os
import re
from collections.abc import Iterator, Mapping
from typing import Any, Union

from .config import ValidationOptions, resolve_options
from .errors import ManifestValidationError
from .names import iter_dependency_errors, iter_name_errors

MAX_DESCRIPTION_LENGTH = 140

GLOB_PATTERN = re.compile(r"[*]")
MINIFIED_PATTERN = re.compile(r"[.]min[.][^/]+$")

DEPENDENCY_FIELDS = ("dependencies", "devDependencies")

OptionsArg = Union[ValidationOptions, Mapping[str, Any], None]


def _iter_main_errors(main: Any, options: ValidationOptions) -> Iterator[ManifestValidationError]:
    if isinstance(main, str):
        main = [main]
    if not isinstance(main, list):
        yield ManifestValidationError('The "main" field has to be either an Array or a String')
        return

    ext2files: dict[str, list[str]] = {}

    for filename in main:
        if not isinstance(filename, str):
            yield ManifestValidationError('The "main" Array has to contain only Strings')
            continue
        if GLOB_PATTERN.search(filename):
            yield ManifestValidationError('The "main" field cannot contain globs (example: "*.js")')
        if MINIFIED_PATTERN.search(filename):
            yield ManifestValidationError('The "main" field cannot contain minified files')
        if options.asset_classifier(filename):
            yield ManifestValidationError(
                'The "main" field cannot contain font, image, audio, or video files'
            )

        ext = os.path.splitext(filename)[1]
        if len(ext) >= 2:
            ext2files.setdefault(ext, []).append(filename)

    for ext, files in ext2files.items():
        if len(files) > 1:
            yield ManifestValidationError(
                'The "main" field has to contain only 1 file per filetype; '
                f"found multiple {ext} files: {json.dumps(files, separators=(',', ':'))}"
            )


def iter_errors(manifest: Any, options: OptionsArg = None) -> Iterator[ManifestValidationError]:
    """Yield every rule violation in a manifest, in rule order.

    Args:
        manifest: A decoded bower.json manifest
        options: ValidationOptions, or a mapping of option names to values

    Yields:
        ManifestValidationError for each violated rule
    """
    opts = resolve_options(options, ValidationOptions)

    if not isinstance(manifest, Mapping):
        yield ManifestValidationError("The manifest has to be an Object")
        return

    name = manifest.get("name")
    if opts.enforce_name_exists and not name:
        yield ManifestValidationError("The name must not be empty")

    if name:
        yield from iter_name_errors(name, opts.strict_names)

    description = manifest.get("description")
    if isinstance(description, (str, list)) and len(description) > MAX_DESCRIPTION_LENGTH:
        yield ManifestValidationError(
            "The description is too long. 140 characters should be more than enough"
        )

    if "main" in manifest:
        yield from _iter_main_errors(manifest["main"], opts)

    for key in DEPENDENCY_FIELDS:
        yield from iter_dependency_errors(manifest.get(key), opts.strict_names)


def find_errors(manifest: Any, options: OptionsArg = None) -> list[ManifestValidationError]:
    """Return every rule violation in a manifest.

    Example:
        >>> [e.message for e in find_errors({"name": "pkg", "main": ["a.js", "b.js"]})]
        ['The "main" field has to contain only 1 file per filetype; found multiple .js files: ["a.js","b.js"]']
    """
    return list(iter_errors(manifest, options))


def validate(manifest: Any, options: OptionsArg = None) -> Any:
    """Validate a manifest and return it unchanged.

    Args:
        manifest: A decoded bower.json manifest
        options: ValidationOptions, or a mapping such as ``{"strictNames": False}``

    Returns:
        The same manifest object

    Raises:
        ManifestValidationError: For the first violated rule
    """
    for error in iter_errors(manifest, options):
        raise error
    return manifest


def is_valid(manifest: Any, options: OptionsArg = None) -> bool:
    """Return True if the manifest violates no rule."""
    return next(iter_errors(manifest, options), None) is None
