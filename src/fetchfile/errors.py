"""Exception hierarchy for fetchfile.

Propagation policy:

- ``ReadError`` and ``DecodeError`` are absorbed by
  :meth:`Fetchable.fetch_or_default` and become the "defaulted" outcome.
- ``EncodeError`` and ``WriteError`` are surfaced to the caller of
  :meth:`Fetchable.save`. Nothing is retried.

Each error carries a stable ``code`` that the service layer copies into
:class:`~fetchfile.services.result.ServiceError`.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar


class FetchFileError(Exception):
    """Base class for all fetchfile errors."""

    code: ClassVar[str] = "FETCHFILE_ERROR"

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path


class ReadError(FetchFileError):
    """The config path is missing or unreadable."""

    code: ClassVar[str] = "READ_ERROR"


class DecodeError(FetchFileError):
    """Bytes are malformed, truncated or do not match the target model."""

    code: ClassVar[str] = "DECODE_ERROR"


class EncodeError(FetchFileError):
    """The value cannot be represented by the active codec."""

    code: ClassVar[str] = "ENCODE_ERROR"


class WriteError(FetchFileError):
    """The config path is not writable."""

    code: ClassVar[str] = "WRITE_ERROR"
