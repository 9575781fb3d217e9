"""Codec registry — the three interchangeable on-disk encodings.

A config type picks exactly one codec when its class is defined; the
bytes on disk carry no format tag, so the same codec must be used to
read a file as was used to write it.
"""

from __future__ import annotations

from fetchfile.codecs.base import Codec
from fetchfile.codecs.binary_codec import BinaryCodec
from fetchfile.codecs.json_codec import JsonCodec
from fetchfile.codecs.yaml_codec import YamlCodec

CODECS: dict[str, Codec] = {}


def get_codec(name: str) -> Codec:
    """Look up a registered codec by name ('yaml', 'json', 'binary')."""
    codec = CODECS.get(name)
    if codec is None:
        msg = f"Unknown codec: {name!r} (available: {', '.join(sorted(CODECS))})"
        raise ValueError(msg)
    return codec


def _register_codecs() -> None:
    """Populate :data:`CODECS` with the built-in codecs."""
    for codec in (YamlCodec(), JsonCodec(), BinaryCodec()):
        CODECS[codec.name] = codec


_register_codecs()

__all__ = ["CODECS", "BinaryCodec", "Codec", "JsonCodec", "YamlCodec", "get_codec"]
