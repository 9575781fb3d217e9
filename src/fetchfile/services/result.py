"""ServiceResult and ServiceError — the envelope every CLI service returns.

The library API raises :mod:`fetchfile.errors` exceptions; the service
layer catches them at the boundary and reports them here so the CLI can
render one shape for humans (Rich) and machines (``--json``).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from fetchfile.errors import FetchFileError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: FetchFileError, **detail: Any) -> ServiceError:
        """Build an error payload from a fetchfile exception."""
        if exc.path is not None:
            detail.setdefault("path", str(exc.path))
        return cls(code=exc.code, message=exc.message, detail=detail)


class ServiceResult(BaseModel):
    """Universal return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"fetch"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
