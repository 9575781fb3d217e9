"""JSON text codec, delegating to pydantic's serializer and validator.

JSON has no spelling for ``inf`` or ``nan``; pydantic would quietly write
them as ``null``, so such values are refused at encode time instead.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from fetchfile.codecs.base import Codec
from fetchfile.errors import DecodeError, EncodeError


def _non_finite_location(obj: Any, loc: str = "") -> str | None:
    """Return the dotted location of the first inf/nan float in *obj*."""
    if isinstance(obj, float):
        return None if math.isfinite(obj) else (loc or "<root>")
    if isinstance(obj, dict):
        items: Any = obj.items()
    elif isinstance(obj, (list, tuple, set, frozenset)):
        items = enumerate(obj)
    else:
        return None
    for key, item in items:
        found = _non_finite_location(item, f"{loc}.{key}" if loc else str(key))
        if found is not None:
            return found
    return None


class JsonCodec(Codec):
    """Pretty-printed JSON object, one key per field (aliases honored)."""

    @property
    def name(self) -> str:
        return "json"

    @property
    def suffix(self) -> str:
        return ".json"

    @property
    def description(self) -> str:
        return "JSON text"

    def encode(self, value: BaseModel) -> bytes:
        try:
            location = _non_finite_location(value.model_dump(by_alias=True))
            if location is not None:
                msg = (
                    f"Cannot encode {type(value).__name__} as JSON: "
                    f"non-finite float at {location}"
                )
                raise EncodeError(msg)
            return value.model_dump_json(indent=2, by_alias=True).encode("utf-8")
        except PydanticSerializationError as exc:
            msg = f"Cannot serialize {type(value).__name__} as JSON: {exc}"
            raise EncodeError(msg) from exc

    def decode[M: BaseModel](self, data: bytes, model_cls: type[M]) -> M:
        # Empty or non-UTF-8 input is reported by pydantic as invalid JSON.
        try:
            return model_cls.model_validate_json(data, by_alias=True, by_name=True)
        except ValidationError as exc:
            msg = (
                f"json payload does not match {model_cls.__name__} "
                f"({exc.error_count()} validation error(s))"
            )
            raise DecodeError(msg) from exc
