# SPDX-License-Identifier: MIT
"""Options for validating and parsing manifests.

This module provides the ValidationOptions and ParseOptions dataclasses and a
loader that builds them from plain mappings, accepting both the camelCase
option names used in bower.json tooling and their snake_case equivalents.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Optional, Union

from .classifiers import AssetClassifier, is_asset


class ConfigError(Exception):
    """Raised when an options mapping is invalid."""

    pass


@dataclass(frozen=True)
class ValidationOptions:
    """Options controlling manifest validation.

    Attributes:
        enforce_name_exists: Require a non-empty ``name`` field
        strict_names: Require all-lowercase names that start and end with a
            letter from a to z
        asset_classifier: Predicate telling whether a ``main`` entry is a
            font, image, audio, or video file
    """

    enforce_name_exists: bool = True
    strict_names: bool = True
    asset_classifier: AssetClassifier = field(default=is_asset, compare=False, repr=False)


@dataclass(frozen=True)
class ParseOptions(ValidationOptions):
    """Options controlling :func:`bower_json.reader.parse`.

    Attributes:
        normalize: Coerce known fields into their canonical shapes
        validate: Run the validation rules
        clone: Operate on a deep copy instead of the given manifest
    """

    normalize: bool = False
    validate: bool = True
    clone: bool = False


# camelCase option name -> dataclass field name
OPTION_ALIASES = {
    "enforceNameExists": "enforce_name_exists",
    "strictNames": "strict_names",
}

BOOLEAN_OPTIONS = frozenset(
    {"enforce_name_exists", "strict_names", "normalize", "validate", "clone"}
)


def options_from_mapping(
    mapping: Optional[Mapping[str, Any]],
    cls: type[ValidationOptions] = ParseOptions,
) -> ValidationOptions:
    """Build an options object from a mapping.

    Missing keys keep their defaults.

    Args:
        mapping: Option values keyed by camelCase or snake_case name
        cls: Options class to build, ParseOptions by default

    Returns:
        An instance of ``cls``

    Raises:
        ConfigError: If a key is unknown to ``cls`` or a flag is not a boolean

    Example:
        >>> options_from_mapping({"strictNames": False, "normalize": True})
        ParseOptions(enforce_name_exists=True, strict_names=False, normalize=True, validate=True, clone=False)
    """
    if mapping is None:
        return cls()
    if not isinstance(mapping, Mapping):
        raise ConfigError(f"Options must be a mapping, got {type(mapping).__name__}")

    known = {f.name for f in fields(cls)}
    values: dict[str, Any] = {}

    for key, value in mapping.items():
        name = OPTION_ALIASES.get(key, key)
        if name not in known:
            raise ConfigError(f"Unknown option: {key}")
        if name in BOOLEAN_OPTIONS and not isinstance(value, bool):
            raise ConfigError(f"Option {key} must be a boolean, got {type(value).__name__}")
        if name == "asset_classifier" and not callable(value):
            raise ConfigError(f"Option {key} must be callable")
        values[name] = value

    return cls(**values)


def resolve_options(
    options: Union[ValidationOptions, Mapping[str, Any], None],
    cls: type[ValidationOptions],
) -> ValidationOptions:
    """Return ``options`` as an instance of ``cls``.

    Instances of ``cls`` pass through; other ValidationOptions instances keep
    the validation fields they share with ``cls``; mappings go through
    :func:`options_from_mapping`, skipping ParseOptions keys that ``cls`` does
    not define so one mapping can serve both parse and validate.
    """
    if isinstance(options, cls):
        return options
    if isinstance(options, ValidationOptions):
        shared = {f.name for f in fields(ValidationOptions)}
        return cls(**{name: getattr(options, name) for name in shared})
    if isinstance(options, Mapping):
        known = {f.name for f in fields(cls)}
        parse_only = {f.name for f in fields(ParseOptions)} - known
        options = {
            key: value
            for key, value in options.items()
            if OPTION_ALIASES.get(key, key) not in parse_only
        }
    return options_from_mapping(options, cls)
