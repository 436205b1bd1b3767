# SPDX-License-Identifier: MIT
"""Locate the manifest file inside a package directory."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Union

from .classifiers import ComponentClassifier, is_component
from .errors import ManifestNotFoundError

logger = logging.getLogger(__name__)

# Candidate manifest filenames, highest priority first
DEFAULT_CANDIDATES: tuple[str, ...] = ("bower.json", "component.json", ".bower.json")

# Shared with the component(1) package manager, so it needs a content check
LEGACY_FILENAME = "component.json"


async def find(
    directory: Union[str, Path],
    candidates: Sequence[str] = DEFAULT_CANDIDATES,
    *,
    component_classifier: ComponentClassifier = is_component,
) -> Path:
    """Return the absolute path of the manifest inside ``directory``.

    Candidates are tried in order and the first existing one wins, except that
    a ``component.json`` written for component(1) is skipped.

    Args:
        directory: Package directory to search
        candidates: Filenames to try, highest priority first
        component_classifier: Predicate telling whether a component.json is a
            component(1) manifest

    Returns:
        Absolute path of the accepted manifest file

    Raises:
        ManifestNotFoundError: If no candidate is acceptable
    """
    folder = Path(directory)

    for filename in candidates:
        path = (folder / filename).resolve()
        exists = await asyncio.to_thread(path.exists)
        if not exists:
            logger.debug("Manifest candidate %s not found", path)
            continue

        if filename != LEGACY_FILENAME:
            logger.debug("Using manifest %s", path)
            return path

        if await asyncio.to_thread(component_classifier, path):
            logger.debug("Skipping %s: component(1) manifest", path)
            continue

        logger.debug("Using manifest %s", path)
        return path

    raise ManifestNotFoundError(f"None of {', '.join(candidates)} were found in {directory}")
