# SPDX-License-Identifier: MIT
"""Error types raised while locating, loading, and validating manifests.

Every error carries a stable machine-readable ``code`` and, once it has passed
through :func:`bower_json.reader.read`, the absolute path of the manifest it
concerns in ``file``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

ENOENT = "ENOENT"
EMALFORMED = "EMALFORMED"
EINVALID = "EINVALID"


class ManifestError(Exception):
    """Base exception for manifest-related errors.

    Attributes:
        message: Human-readable description of the failure
        code: One of ``ENOENT``, ``EMALFORMED`` or ``EINVALID``
        file: Absolute path of the offending manifest, when known
    """

    code: str = EINVALID

    def __init__(self, message: str, code: Optional[str] = None, file: Optional[Path] = None):
        self.message = message
        if code is not None:
            self.code = code
        self.file = file
        super().__init__(message)

    def __str__(self) -> str:
        if self.file is not None:
            return f"{self.message} ({self.file})"
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code!r})"


class ManifestNotFoundError(ManifestError):
    """Raised when no acceptable manifest file exists."""

    code = ENOENT


class MalformedManifestError(ManifestError):
    """Raised when a manifest file does not contain valid JSON."""

    code = EMALFORMED


class ManifestValidationError(ManifestError):
    """Raised when manifest content violates a naming or structural rule."""

    code = EINVALID
