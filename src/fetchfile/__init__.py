"""fetchfile — load-or-default persistence for config models."""

from fetchfile.codecs import CODECS, BinaryCodec, Codec, JsonCodec, YamlCodec, get_codec
from fetchfile.errors import DecodeError, EncodeError, FetchFileError, ReadError, WriteError
from fetchfile.fetchable import Fetchable, FetchResult

__version__ = "0.3.0"

__all__ = [
    "CODECS",
    "BinaryCodec",
    "Codec",
    "DecodeError",
    "EncodeError",
    "FetchFileError",
    "FetchResult",
    "Fetchable",
    "JsonCodec",
    "ReadError",
    "WriteError",
    "YamlCodec",
    "__version__",
    "get_codec",
]
