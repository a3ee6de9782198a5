"""Exception hierarchy for the bundling pipeline.

Every error carries a stable ``code`` so services can translate it into a
:class:`~bsnbundle.services.result.ServiceError` without string matching.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class BundleError(Exception):
    """Base class for fatal pipeline errors.

    ``warnings`` holds non-fatal issues noticed before the failure, so they
    are still reported when the run aborts.
    """

    code = "BUNDLE_ERROR"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        warnings: Sequence[str] = (),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.warnings = list(warnings)
        if code is not None:
            self.code = code


class ConfigurationError(BundleError):
    """Invalid options or an unusable module layout. Raised before content I/O."""

    code = "CONFIG_ERROR"


class ModuleReadError(BundleError):
    """A module or auxiliary source file could not be read."""

    code = "READ_FAILED"

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
