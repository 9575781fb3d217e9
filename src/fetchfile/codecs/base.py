"""Codec ABC — the encode/decode contract shared by every on-disk format.

A codec is stateless: one instance can serve any number of model types.
Codecs never touch the filesystem and never fall back to defaults; that
policy belongs to :class:`~fetchfile.fetchable.Fetchable`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ValidationError

from fetchfile.errors import DecodeError


class Codec(ABC):
    """Abstract base class for a paired encoder/decoder.

    ``decode(encode(v), type(v)) == v`` must hold for every value the
    codec accepts.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry key (e.g. 'yaml', 'binary')."""
        ...

    @property
    @abstractmethod
    def suffix(self) -> str:
        """Conventional file suffix, including the dot."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """One-line human description of the on-disk shape."""
        ...

    @abstractmethod
    def encode(self, value: BaseModel) -> bytes:
        """Serialize *value*.

        Raises:
            EncodeError: The value cannot be represented in this format.
        """
        ...

    @abstractmethod
    def decode[M: BaseModel](self, data: bytes, model_cls: type[M]) -> M:
        """Deserialize *data* into an instance of *model_cls*.

        Raises:
            DecodeError: The bytes are malformed or do not fit the model.
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def validate_payload[M: BaseModel](model_cls: type[M], payload: Any, codec_name: str) -> M:
    """Validate a decoded Python payload against *model_cls*.

    Keys may be field names or aliases: the binary codec always produces
    names, and hand-edited text files may use either.
    """
    try:
        return model_cls.model_validate(payload, by_alias=True, by_name=True)
    except ValidationError as exc:
        msg = (
            f"{codec_name} payload does not match {model_cls.__name__} "
            f"({exc.error_count()} validation error(s))"
        )
        raise DecodeError(msg) from exc
