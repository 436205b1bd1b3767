# SPDX-License-Identifier: MIT
"""Coerce manifest fields into their canonical shapes."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any


def normalize(manifest: Any) -> Any:
    """Normalize a manifest in place and return it.

    A scalar ``main`` becomes a single-element list. Values that are not JSON
    objects are returned untouched. Applying the function again leaves the
    manifest unchanged.

    Example:
        >>> normalize({"name": "pkg", "main": "index.js"})
        {'name': 'pkg', 'main': ['index.js']}
    """
    if not isinstance(manifest, MutableMapping):
        return manifest

    if isinstance(manifest.get("main"), str):
        manifest["main"] = [manifest["main"]]

    return manifest
