"""Generic node tree produced by the block-format parser.

A document is a tree of three variants:
- Scalar: raw text plus the kind the resolver hinted for it
- Sequence: ordered child nodes
- Mapping: ordered (key, value) node pairs; keys may be any scalar kind

Nodes are frozen. The parser builds a fresh tree per document and the
converter only reads it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union


class ScalarKind(str, Enum):
    """Primitive kind hinted by the resolver for a scalar."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    NULL = "null"
    TIMESTAMP = "timestamp"
    BINARY = "binary"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Scalar:
    text: str
    kind: ScalarKind = ScalarKind.STRING
    tag: Optional[str] = field(default=None, compare=False)
    line: Optional[int] = field(default=None, compare=False)


@dataclass(frozen=True)
class Sequence:
    items: Tuple["GenericNode", ...] = ()
    line: Optional[int] = field(default=None, compare=False)


@dataclass(frozen=True)
class Mapping:
    pairs: Tuple[Tuple["GenericNode", "GenericNode"], ...] = ()
    line: Optional[int] = field(default=None, compare=False)


GenericNode = Union[Scalar, Sequence, Mapping]
