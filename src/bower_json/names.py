# SPDX-License-Identifier: MIT
"""Package name and dependency map validation.

Each check exists as a generator yielding every violation it finds
(``find_*_errors``) and as a strict wrapper raising the first one
(``validate_*``). Both modes share the same rule order.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from typing import Any

from .errors import ManifestValidationError

MAX_NAME_LENGTH = 50

# Characters allowed anywhere in a package name
INVALID_CHARACTER_PATTERN = re.compile(r"[^A-Za-z0-9.\-]")

# Empty, a single letter, or an optional letter followed by a letter and a
# letter/digit, then letters/digits optionally separated by a single "-" or
# ".", never ending on a separator. Same language as
# ^[A-Za-z]?([A-Za-z](([A-Za-z0-9]-?)*([A-Za-z0-9]\.?)*)*[A-Za-z0-9])?$
# without the nested quantifiers.
NAME_PATTERN = re.compile(r"^[A-Za-z]?(?:[A-Za-z][A-Za-z0-9](?:[-.]?[A-Za-z0-9])*)?$")

UPPERCASE_PATTERN = re.compile(r"[A-Z]")
LOWERCASE_PATTERN = re.compile(r"[a-z]")


def iter_name_errors(name: Any, strict_names: bool = True) -> Iterator[ManifestValidationError]:
    """Yield every rule violated by a package name, in rule order."""
    if not name:
        yield ManifestValidationError("No name property set")
        return
    if not isinstance(name, str):
        yield ManifestValidationError("Package name is not a string")
        return

    if len(name) >= MAX_NAME_LENGTH:
        yield ManifestValidationError(
            "The name is too long. 50 characters should be more than enough"
        )

    if INVALID_CHARACTER_PATTERN.search(name):
        yield ManifestValidationError("The name contains an invalid character")

    if not NAME_PATTERN.match(name):
        yield ManifestValidationError(f"The name is malformed: {name}")

    if not strict_names:
        return

    if UPPERCASE_PATTERN.search(name):
        yield ManifestValidationError("The name contains upper case letters")

    if not ("a" <= name[0] <= "z"):
        yield ManifestValidationError(
            "The name has to start with a lower case character from a to z"
        )

    if not ("a" <= name[-1] <= "z"):
        yield ManifestValidationError(
            "The name has to end with a lower case character from a to z"
        )

    if not LOWERCASE_PATTERN.search(name):
        yield ManifestValidationError(
            "The name has to contain at least one lower case character from a to z"
        )


def find_name_errors(name: Any, strict_names: bool = True) -> list[ManifestValidationError]:
    """Return all rule violations for a package name."""
    return list(iter_name_errors(name, strict_names))


def validate_name(name: Any, strict_names: bool = True) -> str:
    """Validate a package name and return it unchanged.

    Args:
        name: The candidate package name
        strict_names: Also require an all-lowercase name starting and ending
            with a letter from a to z

    Returns:
        The name, untouched

    Raises:
        ManifestValidationError: For the first rule the name violates

    Example:
        >>> validate_name("jquery-ui")
        'jquery-ui'
        >>> validate_name("jQuery", strict_names=False)
        'jQuery'
    """
    for error in iter_name_errors(name, strict_names):
        raise error
    return name


def iter_dependency_errors(
    dependencies: Any, strict_names: bool = True
) -> Iterator[ManifestValidationError]:
    """Yield violations for every entry of a dependency map.

    Anything that is not a mapping is ignored. Keys are checked as package
    names; values are resource locators and may not traverse directories.
    """
    if not isinstance(dependencies, Mapping):
        return

    for name, resource in dependencies.items():
        yield from iter_name_errors(name, strict_names)

        if isinstance(resource, str) and ".." in resource:
            yield ManifestValidationError(
                "Directory traversing in dependency paths is not allowed"
            )


def find_dependency_errors(dependencies: Any, strict_names: bool = True) -> list[ManifestValidationError]:
    """Return all violations found in a dependency map."""
    return list(iter_dependency_errors(dependencies, strict_names))


def validate_dependencies(dependencies: Any, strict_names: bool = True) -> None:
    """Raise the first violation found in a dependency map, if any.

    Raises:
        ManifestValidationError: For the first invalid key or resource
    """
    for error in iter_dependency_errors(dependencies, strict_names):
        raise error
