"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult.
The CLI and the programmatic :func:`bsnbundle.build_bundle` both consume it.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field

from bsnbundle.errors import BundleError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"build"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation,
            kept on failed results too.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        exc: BundleError,
        *,
        warnings: Sequence[str] = (),
        **detail: Any,
    ) -> ServiceResult:
        """Build a failed result from a pipeline error.

        *warnings* gathered by earlier stages come first, then any the
        error itself carries.
        """
        return cls(
            ok=False,
            op=op,
            warnings=[*warnings, *exc.warnings],
            error=ServiceError(code=exc.code, message=exc.message, detail=detail),
        )
