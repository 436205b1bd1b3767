# SPDX-License-Identifier: MIT
"""Read bower.json manifests from disk.

This module provides the parse pipeline (clone, validate, normalize) shared by
every entry point, and the asynchronous reader that resolves a directory or
file path to a parsed manifest.
"""

from __future__ import annotations

import asyncio
import copy
import json
import logging
import stat
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Union

from .classifiers import ComponentClassifier, is_component
from .config import ParseOptions, ValidationOptions, resolve_options
from .errors import MalformedManifestError, ManifestError, ManifestNotFoundError
from .locator import find
from .normalizer import normalize
from .validator import validate

logger = logging.getLogger(__name__)

ParseOptionsArg = Union[ValidationOptions, Mapping[str, Any], None]


def parse(manifest: Any, options: ParseOptionsArg = None) -> Any:
    """Run a decoded manifest through the clone, validate, and normalize steps.

    Args:
        manifest: A decoded bower.json manifest
        options: ParseOptions, or a mapping such as
            ``{"normalize": True, "strictNames": False}``

    Returns:
        The manifest, or its deep copy when ``clone`` is set

    Raises:
        ManifestValidationError: If validation is enabled and a rule is violated

    Example:
        >>> parse({"name": "pkg", "main": "index.js"}, {"normalize": True})
        {'name': 'pkg', 'main': ['index.js']}
    """
    opts = resolve_options(options, ParseOptions)

    if opts.clone:
        manifest = copy.deepcopy(manifest)

    if opts.validate:
        validate(manifest, opts)

    if opts.normalize:
        normalize(manifest)

    return manifest


async def read(
    path: Union[str, Path],
    options: ParseOptionsArg = None,
    *,
    component_classifier: ComponentClassifier = is_component,
) -> tuple[Any, Path]:
    """Read and parse the manifest at ``path``.

    A directory is searched with :func:`bower_json.locator.find`; a file is
    read directly.

    Args:
        path: Package directory or manifest file
        options: ParseOptions, or a mapping of option names to values
        component_classifier: Predicate used to skip component(1) manifests

    Returns:
        Tuple of the parsed manifest and the absolute path it was read from

    Raises:
        ManifestNotFoundError: If ``path`` does not exist or holds no manifest
        MalformedManifestError: If the file is not valid JSON
        ManifestValidationError: If the manifest violates a rule
    """
    opts = resolve_options(options, ParseOptions)
    file = Path(path).resolve()

    try:
        file_stat = await asyncio.to_thread(file.stat)
    except FileNotFoundError as e:
        raise ManifestNotFoundError(f"No such file or directory: {path}", file=file) from e

    if stat.S_ISDIR(file_stat.st_mode):
        located = await find(file, component_classifier=component_classifier)
        return await read(located, opts, component_classifier=component_classifier)

    logger.debug("Reading manifest %s", file)
    contents = await asyncio.to_thread(file.read_bytes)

    try:
        manifest = json.loads(contents)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedManifestError(f"Invalid JSON syntax: {e}", file=file) from e

    try:
        manifest = parse(manifest, opts)
    except ManifestError as e:
        e.file = file
        raise

    return manifest, file
