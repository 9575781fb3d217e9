"""Ready-made config types, one per codec.

``Config`` is the canonical two-setting example (defaults ``0`` and ``5``)
persisted in binary. ``YamlConfig`` and ``JsonConfig`` carry the same
fields in the text encodings. All three are valid CLI targets, e.g.
``fetchfile fetch fetchfile.examples:Config config.bin``.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from fetchfile.codecs import BinaryCodec, Codec, JsonCodec, YamlCodec
from fetchfile.fetchable import Fetchable


class Config(Fetchable):
    """Two numeric settings stored in the compact binary form."""

    codec: ClassVar[Codec] = BinaryCodec()

    setting1: int = Field(default=0, ge=0)
    setting2: int = Field(default=5, ge=0)


class YamlConfig(Fetchable):
    """Same settings as :class:`Config`, stored as YAML."""

    codec: ClassVar[Codec] = YamlCodec()

    setting1: int = Field(default=0, ge=0)
    setting2: int = Field(default=5, ge=0)


class JsonConfig(Fetchable):
    """Same settings as :class:`Config`, stored as JSON."""

    codec: ClassVar[Codec] = JsonCodec()

    setting1: int = Field(default=0, ge=0)
    setting2: int = Field(default=5, ge=0)
