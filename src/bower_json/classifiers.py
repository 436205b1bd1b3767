# SPDX-License-Identifier: MIT
"""Default content classifiers.

Both classifiers are plain callables so callers can substitute their own:
the asset classifier through :class:`bower_json.config.ValidationOptions`
and the component classifier through the ``component_classifier`` keyword
of :func:`bower_json.locator.find` and :func:`bower_json.reader.read`.
"""

from __future__ import annotations

import json
import mimetypes
import os
from pathlib import Path
from typing import Callable, Union

AssetClassifier = Callable[[str], bool]
ComponentClassifier = Callable[[Path], bool]

# mimetypes does not know every web font extension on every platform
FONT_EXTENSIONS = frozenset({".woff", ".woff2", ".ttf", ".otf", ".eot"})

ASSET_MIME_PREFIXES = ("image/", "audio/", "video/", "font/")

# Keys only the component(1) package manager ever wrote into component.json
COMPONENT_KEYS = frozenset(
    {
        "repo",
        "scripts",
        "styles",
        "templates",
        "local",
        "remotes",
        "paths",
        "development",
    }
)


def is_asset(filename: str) -> bool:
    """Return True if the file is a font, image, audio, or video file.

    Example:
        >>> is_asset("dist/logo.png")
        True
        >>> is_asset("dist/app.js")
        False
    """
    ext = os.path.splitext(filename)[1].lower()
    if ext in FONT_EXTENSIONS:
        return True
    mime_type, _ = mimetypes.guess_type(filename, strict=False)
    if mime_type is None:
        return False
    return mime_type.startswith(ASSET_MIME_PREFIXES)


def is_component(path: Union[str, Path]) -> bool:
    """Return True if a component.json was written for component(1).

    Unreadable files and files that are not a JSON object are not considered
    component(1) manifests.
    """
    try:
        contents = Path(path).read_text(encoding="utf-8")
        data = json.loads(contents)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return False

    if not isinstance(data, dict):
        return False
    return not COMPONENT_KEYS.isdisjoint(data)
