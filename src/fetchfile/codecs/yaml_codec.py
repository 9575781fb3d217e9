"""Structured human-readable text codec (YAML via ruamel.yaml).

Fields are written as block-style YAML in declaration order. An empty
document decodes as an empty mapping, so an empty file loads only when
every field of the model has a default. Aliased fields are written
under their alias. Nesting deep enough to exhaust the parser's
recursion is reported as malformed input.
"""

from __future__ import annotations

from io import StringIO
from typing import Any

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from fetchfile.codecs.base import Codec, validate_payload
from fetchfile.errors import DecodeError, EncodeError


def _new_yaml() -> YAML:
    """Create a fresh round-trip YAML emitter.

    ruamel.yaml's YAML object is stateful and a failed dump can leave it
    broken, so every call gets its own instance.
    """
    y = YAML()
    y.default_flow_style = False
    return y


class YamlCodec(Codec):
    """Block-style YAML of the model's JSON-compatible dump."""

    @property
    def name(self) -> str:
        return "yaml"

    @property
    def suffix(self) -> str:
        return ".yaml"

    @property
    def description(self) -> str:
        return "Structured human-readable text (YAML)"

    def encode(self, value: BaseModel) -> bytes:
        try:
            payload = value.model_dump(mode="json", by_alias=True)
        except PydanticSerializationError as exc:
            msg = f"Cannot serialize {type(value).__name__}: {exc}"
            raise EncodeError(msg) from exc

        buf = StringIO()
        try:
            _new_yaml().dump(payload, buf)
        except (YAMLError, RecursionError) as exc:
            msg = f"Cannot represent {type(value).__name__} as YAML: {exc}"
            raise EncodeError(msg) from exc
        return buf.getvalue().encode("utf-8")

    def decode[M: BaseModel](self, data: bytes, model_cls: type[M]) -> M:
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            msg = f"YAML config is not valid UTF-8: {exc}"
            raise DecodeError(msg) from exc

        try:
            payload: Any = YAML(typ="safe").load(text)
        except (YAMLError, RecursionError) as exc:
            msg = f"Invalid YAML: {exc}"
            raise DecodeError(msg) from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            msg = f"Expected a YAML mapping, got {type(payload).__name__}"
            raise DecodeError(msg)
        return validate_payload(model_cls, payload, self.name)
