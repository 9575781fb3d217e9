"""Compact binary codec — positional, little-endian, no embedded schema.

The layout is driven entirely by the model's field annotations, so the
bytes carry no field names, type tags or version marker:

- ``bool``: 1 byte (0 or 1)
- ``int``: signed 64-bit; values outside that range cannot be encoded
- ``float``: IEEE-754 double
- ``str`` / ``bytes``: u64 length + payload (UTF-8 for ``str``)
- ``X | None``: u8 tag (0 = None, 1 = present) + payload
- ``list`` / ``set`` / ``frozenset`` / ``tuple[X, ...]``: u64 count + items
- ``tuple[A, B]``: items only
- ``dict[K, V]``: u64 count + key/value pairs
- ``Enum`` / ``Literal``: u32 variant index
- ``date`` / ``datetime`` / ``time`` / ``Path`` / ``UUID`` / ``Decimal``:
  their string form
- nested models: their fields in declaration order

Sequences of items that encode to zero bytes (``None``, field-less
models) are limited to ``MAX_ZERO_WIDTH_ITEMS`` entries.

Decoding rebuilds a plain payload and hands it to pydantic for
validation, which also converts the string forms back to rich types.
"""

from __future__ import annotations

import collections.abc
import struct
import types
from datetime import date, time
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import Annotated, Any, Literal, Union, get_args, get_origin
from uuid import UUID

from pydantic import BaseModel

from fetchfile.codecs.base import Codec, validate_payload
from fetchfile.errors import DecodeError, EncodeError

_U8 = struct.Struct("<B")
_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")
_I64 = struct.Struct("<q")
_F64 = struct.Struct("<d")

_NONE_TYPE = type(None)
_UNION_ORIGINS = (Union, types.UnionType)
_SEQUENCE_ORIGINS = (
    list,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
)
_MAPPING_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)
_STRING_FORM_TYPES = (date, time, PurePath, UUID, Decimal)

# Items that encode to zero bytes (None, field-less models) cannot be
# bounded by the remaining input, so their count is capped instead.
MAX_ZERO_WIDTH_ITEMS = 1 << 16


# ---------------------------------------------------------------------------
# Annotation helpers
# ---------------------------------------------------------------------------


def _strip_annotated(tp: Any) -> Any:
    while get_origin(tp) is Annotated:
        tp = get_args(tp)[0]
    return tp


def _optional_inner(tp: Any) -> Any | None:
    """Return ``X`` for ``X | None``; None for any other annotation."""
    if get_origin(tp) not in _UNION_ORIGINS:
        return None
    args = get_args(tp)
    non_none = [arg for arg in args if arg is not _NONE_TYPE]
    if len(args) == 2 and len(non_none) == 1:
        return non_none[0]
    return None


def _is_model(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, BaseModel)


def _min_width(tp: Any) -> int:
    """Lower bound on the encoded size of one *tp* value (0 or 1)."""
    tp = _strip_annotated(tp)
    if tp is _NONE_TYPE:
        return 0
    if _is_model(tp) and not tp.model_fields:
        return 0
    return 1


def _string_form(value: Any) -> str:
    if isinstance(value, (date, time)):
        return value.isoformat()
    return str(value)


def _unsupported(tp: Any) -> TypeError:
    return TypeError(f"unsupported field type {tp!r}")


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def _write_str(out: bytearray, text: str) -> None:
    raw = text.encode("utf-8")
    out += _U64.pack(len(raw))
    out += raw


def _write_count(out: bytearray, n: int, item_tp: Any) -> None:
    if n > MAX_ZERO_WIDTH_ITEMS and not _min_width(item_tp):
        raise ValueError(f"{n} zero-width items exceed the limit of {MAX_ZERO_WIDTH_ITEMS}")
    out += _U64.pack(n)


def _encode(value: Any, tp: Any, out: bytearray) -> None:
    tp = _strip_annotated(tp)
    origin = get_origin(tp)
    args = get_args(tp)

    if tp is _NONE_TYPE:
        if value is not None:
            raise ValueError(f"expected None, got {value!r}")
        return

    if origin in _UNION_ORIGINS:
        inner = _optional_inner(tp)
        if inner is None:
            raise _unsupported(tp)
        if value is None:
            out += _U8.pack(0)
        else:
            out += _U8.pack(1)
            _encode(value, inner, out)
        return

    if origin is Literal:
        if value not in args:
            raise ValueError(f"{value!r} is not one of {args!r}")
        out += _U32.pack(args.index(value))
        return

    if origin in _SEQUENCE_ORIGINS:
        if len(args) != 1:
            raise _unsupported(tp)
        items = list(value)
        if isinstance(value, (set, frozenset)):
            try:
                items = sorted(items)
            except TypeError:
                pass  # unorderable members keep iteration order
        _write_count(out, len(items), args[0])
        for item in items:
            _encode(item, args[0], out)
        return

    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            _write_count(out, len(value), args[0])
            for item in value:
                _encode(item, args[0], out)
            return
        if len(value) != len(args):
            raise ValueError(f"expected {len(args)}-tuple, got {len(value)} items")
        for item, item_tp in zip(value, args, strict=True):
            _encode(item, item_tp, out)
        return

    if origin in _MAPPING_ORIGINS:
        if len(args) != 2:
            raise _unsupported(tp)
        out += _U64.pack(len(value))
        for key, item in value.items():
            _encode(key, args[0], out)
            _encode(item, args[1], out)
        return

    if not isinstance(tp, type) or origin is not None:
        raise _unsupported(tp)

    if issubclass(tp, BaseModel):
        for name, field in tp.model_fields.items():
            _encode(getattr(value, name), field.annotation, out)
    elif issubclass(tp, Enum):
        out += _U32.pack(list(tp).index(tp(value)))
    elif tp is bool:
        out += _U8.pack(1 if value else 0)
    elif tp is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        out += _I64.pack(value)
    elif tp is float:
        out += _F64.pack(value)
    elif tp is str:
        _write_str(out, value)
    elif tp in (bytes, bytearray):
        out += _U64.pack(len(value))
        out += value
    elif issubclass(tp, _STRING_FORM_TYPES):
        _write_str(out, _string_form(value))
    else:
        raise _unsupported(tp)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


class _Reader:
    """Cursor over the encoded bytes; raises ValueError on truncation."""

    def __init__(self, data: bytes) -> None:
        self._view = memoryview(data)
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._view) - self._pos

    def take(self, n: int) -> bytes:
        if n > self.remaining:
            raise ValueError(
                f"truncated input: needed {n} bytes at offset {self._pos}, "
                f"{self.remaining} left"
            )
        chunk = self._view[self._pos : self._pos + n].tobytes()
        self._pos += n
        return chunk

    def unpack(self, fmt: struct.Struct) -> Any:
        return fmt.unpack(self.take(fmt.size))[0]

    def count(self, item_width: int) -> int:
        n: int = self.unpack(_U64)
        if item_width and n * item_width > self.remaining:
            raise ValueError(f"length prefix {n} exceeds remaining input")
        if not item_width and n > MAX_ZERO_WIDTH_ITEMS:
            raise ValueError(f"length prefix {n} exceeds {MAX_ZERO_WIDTH_ITEMS} zero-width items")
        return n

    def text(self) -> str:
        return self.take(self.count(1)).decode("utf-8")


def _variant(reader: _Reader, choices: tuple[Any, ...] | list[Any]) -> Any:
    index: int = reader.unpack(_U32)
    if index >= len(choices):
        raise ValueError(f"variant index {index} out of range")
    return choices[index]


def _decode(reader: _Reader, tp: Any) -> Any:
    tp = _strip_annotated(tp)
    origin = get_origin(tp)
    args = get_args(tp)

    if tp is _NONE_TYPE:
        return None

    if origin in _UNION_ORIGINS:
        inner = _optional_inner(tp)
        if inner is None:
            raise _unsupported(tp)
        tag = reader.unpack(_U8)
        if tag == 0:
            return None
        if tag != 1:
            raise ValueError(f"invalid option tag {tag}")
        return _decode(reader, inner)

    if origin is Literal:
        return _variant(reader, args)

    if origin in _SEQUENCE_ORIGINS:
        if len(args) != 1:
            raise _unsupported(tp)
        n = reader.count(_min_width(args[0]))
        return [_decode(reader, args[0]) for _ in range(n)]

    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            n = reader.count(_min_width(args[0]))
            return [_decode(reader, args[0]) for _ in range(n)]
        return [_decode(reader, item_tp) for item_tp in args]

    if origin in _MAPPING_ORIGINS:
        if len(args) != 2:
            raise _unsupported(tp)
        n = reader.count(_min_width(args[0]) + _min_width(args[1]))
        result: dict[Any, Any] = {}
        for _ in range(n):
            key = _decode(reader, args[0])
            result[key] = _decode(reader, args[1])
        return result

    if not isinstance(tp, type) or origin is not None:
        raise _unsupported(tp)

    if issubclass(tp, BaseModel):
        return {name: _decode(reader, field.annotation) for name, field in tp.model_fields.items()}
    if issubclass(tp, Enum):
        return _variant(reader, list(tp))
    if tp is bool:
        flag = reader.unpack(_U8)
        if flag not in (0, 1):
            raise ValueError(f"invalid bool byte {flag}")
        return flag == 1
    if tp is int:
        return reader.unpack(_I64)
    if tp is float:
        return reader.unpack(_F64)
    if tp is str or issubclass(tp, _STRING_FORM_TYPES):
        return reader.text()
    if tp in (bytes, bytearray):
        return reader.take(reader.count(1))
    raise _unsupported(tp)


# ---------------------------------------------------------------------------
# Codec
# ---------------------------------------------------------------------------


class BinaryCodec(Codec):
    """Positional binary encoding; the model class is the only schema."""

    @property
    def name(self) -> str:
        return "binary"

    @property
    def suffix(self) -> str:
        return ".bin"

    @property
    def description(self) -> str:
        return "Compact positional binary (little-endian, no schema or tag)"

    def encode(self, value: BaseModel) -> bytes:
        out = bytearray()
        try:
            _encode(value, type(value), out)
        except (struct.error, TypeError, ValueError, RecursionError) as exc:
            msg = f"Cannot encode {type(value).__name__} as binary: {exc}"
            raise EncodeError(msg) from exc
        return bytes(out)

    def decode[M: BaseModel](self, data: bytes, model_cls: type[M]) -> M:
        reader = _Reader(data)
        try:
            payload = _decode(reader, model_cls)
        except (struct.error, TypeError, ValueError, RecursionError) as exc:
            msg = f"Malformed binary {model_cls.__name__}: {exc}"
            raise DecodeError(msg) from exc

        if reader.remaining:
            msg = f"Malformed binary {model_cls.__name__}: {reader.remaining} trailing bytes"
            raise DecodeError(msg)
        return validate_payload(model_cls, payload, self.name)
