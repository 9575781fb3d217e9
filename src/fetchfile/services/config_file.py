"""ConfigFileService — fetch, initialize and diagnose one config type.

Each method wraps the library contract for a single Fetchable type and
reports the outcome as a :class:`ServiceResult`. Library exceptions are
caught here and never escape to the CLI.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from fetchfile.codecs import CODECS
from fetchfile.errors import DecodeError, FetchFileError, ReadError
from fetchfile.fetchable import Fetchable
from fetchfile.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def _target_name(model_cls: type[Fetchable]) -> str:
    return f"{model_cls.__module__}:{model_cls.__qualname__}"


class ConfigFileService:
    """Operations on config files of one Fetchable type.

    Usage::

        svc = ConfigFileService(Config, atomic=True)
        result = svc.fetch(Path("config.bin"), save_default=True)
    """

    def __init__(self, model_cls: type[Fetchable], *, atomic: bool | None = None) -> None:
        self._model_cls = model_cls
        self._codec = model_cls.active_codec()
        self._atomic = atomic

    def _base_data(self, path: Path) -> dict[str, Any]:
        return {
            "target": _target_name(self._model_cls),
            "path": str(path),
            "codec": self._codec.name,
        }

    def _failure(self, op: str, exc: FetchFileError, **detail: Any) -> ServiceResult:
        logger.debug("%s failed: %s", op, exc.message)
        return ServiceResult(ok=False, op=op, error=ServiceError.from_exception(exc, **detail))

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def fetch(self, path: Path, *, save_default: bool = False) -> ServiceResult:
        """Fetch-or-default, optionally persisting a substituted default."""
        value, is_default = self._model_cls.fetch_or_default(path)

        saved = False
        if is_default and save_default:
            try:
                value.save(path, atomic=self._atomic)
            except FetchFileError as exc:
                return self._failure("fetch", exc)
            saved = True

        data = self._base_data(path)
        data.update(
            {
                "is_default": is_default,
                "saved": saved,
                "value": value.model_dump(mode="json"),
            }
        )
        return ServiceResult(ok=True, op="fetch", data=data)

    def init(self, path: Path, *, force: bool = False) -> ServiceResult:
        """Write the type's default to *path*."""
        existed = path.exists()
        if existed and not force:
            return ServiceResult(
                ok=False,
                op="init",
                error=ServiceError(
                    code="ALREADY_EXISTS",
                    message=f"{path} already exists (use --force to overwrite)",
                    detail={"path": str(path)},
                ),
            )

        value = self._model_cls.default()
        try:
            value.save(path, atomic=self._atomic)
        except FetchFileError as exc:
            return self._failure("init", exc)

        data = self._base_data(path)
        data.update(
            {
                "overwritten": existed,
                "size": path.stat().st_size,
                "value": value.model_dump(mode="json"),
            }
        )
        return ServiceResult(ok=True, op="init", data=data)

    def check(self, path: Path) -> ServiceResult:
        """Report whether *path* is absent, corrupt or valid.

        Unlike :meth:`fetch`, corruption is an error here: the point of
        the check is to surface what ``fetch_or_default`` silently absorbs.
        """
        data = self._base_data(path)
        try:
            value = self._model_cls.load(path)
        except ReadError as exc:
            data.update({"state": "absent", "reason": exc.message})
            return ServiceResult(ok=True, op="check", data=data)
        except DecodeError as exc:
            return self._failure("check", exc, state="corrupt", codec=self._codec.name)

        data.update(
            {
                "state": "valid",
                "matches_default": value == self._model_cls.default(),
                "value": value.model_dump(mode="json"),
            }
        )
        return ServiceResult(ok=True, op="check", data=data)


def list_codecs() -> ServiceResult:
    """Describe every registered codec."""
    items = [
        {"name": codec.name, "suffix": codec.suffix, "description": codec.description}
        for codec in CODECS.values()
    ]
    return ServiceResult(ok=True, op="codecs", data={"count": len(items), "items": items})
