"""Fetchable — load-or-default persistence for pydantic config models.

A config type opts in by subclassing :class:`Fetchable`, giving every
field a default, and selecting its codec once on the class::

    class Config(Fetchable):
        codec = BinaryCodec()

        setting1: int = 0
        setting2: int = 5

    config, is_default = Config.fetch_or_default("config.bin")
    if is_default:
        config.save("config.bin")

INVARIANT: One type, one codec. The bytes on disk carry no format tag,
so the codec is a class variable and never a per-call argument.

INVARIANT: A missing or corrupt file never blocks startup.
``fetch_or_default`` collapses {absent, corrupt, valid} into
{defaulted, defaulted, loaded}; only ``save`` surfaces errors.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import ClassVar, NamedTuple, Self

from pydantic import BaseModel

from fetchfile.codecs import Codec
from fetchfile.errors import DecodeError, EncodeError, ReadError
from fetchfile.infrastructure.filesystem import read_file, write_file

logger = logging.getLogger(__name__)

# Record attributes attached to every load/save log line.
LOG_FIELDS = ("config_path", "codec", "outcome")


def _log_fields(path: Path, codec: Codec, outcome: str) -> dict[str, str]:
    return {"config_path": str(path), "codec": codec.name, "outcome": outcome}


class FetchResult[M](NamedTuple):
    """Outcome of :meth:`Fetchable.fetch_or_default`.

    Attributes:
        value: The loaded config, or a fresh default.
        is_default: True when the file was absent, unreadable or corrupt
            and the default was substituted.
    """

    value: M
    is_default: bool


class Fetchable(BaseModel):
    """Base class for config models persisted with a single codec.

    Class variables:
        codec: The codec used for every read and write of this type.
        atomic_save: Default for ``save(atomic=...)``. When True, writes
            go to a temp file that is renamed over the target.
    """

    codec: ClassVar[Codec]
    atomic_save: ClassVar[bool] = False

    @classmethod
    def default(cls) -> Self:
        """Return a fresh default value. Override for non-trivial defaults."""
        return cls()

    @classmethod
    def active_codec(cls) -> Codec:
        """Return the codec selected for this type.

        Raises:
            TypeError: The class (or its bases) never set ``codec``.
        """
        codec = getattr(cls, "codec", None)
        if not isinstance(codec, Codec):
            msg = f"{cls.__name__} does not select a codec; set `codec = ...` on the class"
            raise TypeError(msg)
        return codec

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> Self:
        """Read and decode *path* without falling back to the default.

        Raises:
            ReadError: The path is missing or unreadable.
            DecodeError: The contents do not decode to this type.
        """
        codec = cls.active_codec()
        path = Path(path)
        raw = read_file(path)
        try:
            return codec.decode(raw, cls)
        except DecodeError as exc:
            exc.path = path
            raise

    @classmethod
    def fetch_or_default(cls, path: str | os.PathLike[str]) -> FetchResult[Self]:
        """Load the config at *path*, or substitute :meth:`default`.

        Returns:
            ``(value, is_default)``. ``is_default`` tells the caller whether
            a fresh default should be persisted with :meth:`save`.
        """
        codec = cls.active_codec()
        path = Path(path)
        try:
            value = cls.load(path)
        except ReadError as exc:
            logger.debug(
                "No readable config at %s, using defaults: %s",
                path,
                exc.message,
                extra=_log_fields(path, codec, "absent"),
            )
            return FetchResult(cls.default(), True)
        except DecodeError as exc:
            logger.info(
                "Config at %s is not valid, using defaults: %s",
                path,
                exc.message,
                extra=_log_fields(path, codec, "corrupt"),
            )
            return FetchResult(cls.default(), True)

        logger.debug(
            "Loaded %s from %s", cls.__name__, path, extra=_log_fields(path, codec, "loaded")
        )
        return FetchResult(value, False)

    def save(self, path: str | os.PathLike[str], *, atomic: bool | None = None) -> None:
        """Encode this value and overwrite *path* with it.

        The parent directory must already exist. With *atomic* (defaulting
        to the class's ``atomic_save``) the write is temp-file-then-rename.

        Raises:
            EncodeError: The value cannot be represented by the codec.
            WriteError: The path is not writable.
        """
        codec = self.active_codec()
        path = Path(path)
        try:
            data = codec.encode(self)
        except EncodeError as exc:
            exc.path = path
            raise

        write_file(path, data, atomic=self.atomic_save if atomic is None else atomic)
        logger.debug(
            "Saved %s to %s (%d bytes)",
            type(self).__name__,
            path,
            len(data),
            extra=_log_fields(path, codec, "saved"),
        )
