# SPDX-License-Identifier: MIT
"""Read, validate, and normalize bower.json package manifests.

This package provides utilities for working with bower.json manifests:
- Locating the manifest inside a package directory
- Reading and decoding it, with file context attached to errors
- Validating names, entry points, and dependencies
- Normalizing fields into canonical shapes

Example:
    >>> import asyncio
    >>> from bower_json import read, validate, normalize
    >>>
    >>> # Validate a decoded manifest
    >>> validate({"name": "my-package", "main": "index.js"})
    {'name': 'my-package', 'main': 'index.js'}
    >>>
    >>> # Read from a package directory
    >>> manifest, path = asyncio.run(read("path/to/package", {"normalize": True}))
"""

__version__ = "0.1.0"

from .classifiers import is_asset, is_component
from .config import ConfigError, ParseOptions, ValidationOptions, options_from_mapping
from .errors import (
    EINVALID,
    EMALFORMED,
    ENOENT,
    MalformedManifestError,
    ManifestError,
    ManifestNotFoundError,
    ManifestValidationError,
)
from .locator import DEFAULT_CANDIDATES, find
from .names import (
    find_dependency_errors,
    find_name_errors,
    validate_dependencies,
    validate_name,
)
from .normalizer import normalize
from .reader import parse, read
from .validator import find_errors, is_valid, iter_errors, validate

__all__ = [
    # Reading
    "read",
    "parse",
    "find",
    "DEFAULT_CANDIDATES",
    # Validation
    "validate",
    "find_errors",
    "iter_errors",
    "is_valid",
    "validate_name",
    "find_name_errors",
    "validate_dependencies",
    "find_dependency_errors",
    # Normalization
    "normalize",
    # Options
    "ValidationOptions",
    "ParseOptions",
    "options_from_mapping",
    "ConfigError",
    # Classifiers
    "is_asset",
    "is_component",
    # Errors
    "ManifestError",
    "ManifestNotFoundError",
    "MalformedManifestError",
    "ManifestValidationError",
    "ENOENT",
    "EMALFORMED",
    "EINVALID",
]
