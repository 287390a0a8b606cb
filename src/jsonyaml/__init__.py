"""jsonyaml: YAML <-> JSON conversion and typed marshaling with strict decoding."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("jsonyaml")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from jsonyaml.api import (
    json_to_yaml,
    marshal,
    unmarshal,
    unmarshal_strict,
    yaml_to_json,
)
from jsonyaml.codes import StreamState, UnknownFieldPolicy
from jsonyaml.contracts import DecodeOptions
from jsonyaml.errors import (
    BindError,
    ConversionError,
    DuplicateKeyError,
    EndOfStream,
    ParseError,
    UnknownFieldError,
    YAMLCodecError,
)
from jsonyaml.stream import Decoder, Encoder

__all__ = [
    "__version__",
    "marshal",
    "unmarshal",
    "unmarshal_strict",
    "yaml_to_json",
    "json_to_yaml",
    "Decoder",
    "Encoder",
    "DecodeOptions",
    "UnknownFieldPolicy",
    "StreamState",
    "YAMLCodecError",
    "ParseError",
    "DuplicateKeyError",
    "UnknownFieldError",
    "ConversionError",
    "BindError",
    "EndOfStream",
]
