"""Conversion between GenericNode trees and strict value trees.

A strict value is the JSON data model expressed with Python built-ins:
None, bool, int (signed 64-bit), float (finite), str, list, and dict with
str keys in insertion order. The Python type of a strict value is its
variant tag; every function here dispatches over that closed set.

Key rules (block format -> strict tree):
- Scalars are typed from the resolver's hint, never re-guessed from text
- Integers outside int64 become floats (1000...0 with 37 digits -> 1e+36)
- Mapping keys are canonicalized to the text the JSON renderer would print
- A canonical key seen twice in one mapping is a DuplicateKeyError
"""

import math
from typing import Any, Dict, List, Optional, Union

from jsonyaml.errors import ConversionError, DuplicateKeyError
from jsonyaml.kernel.nodes import GenericNode, Mapping, Scalar, ScalarKind, Sequence

StrictValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _child(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def normalize_int(value: int) -> Union[int, float]:
    """Keep int64-range integers exact; widen larger ones to float.

    Raises OverflowError when the value does not fit a float either.
    """
    if INT64_MIN <= value <= INT64_MAX:
        return value
    return float(value)


def format_float(value: float) -> str:
    """Shortest text that round-trips, as the JSON renderer prints it."""
    return repr(value)


def _parse_int(text: str) -> int:
    sign = 1
    body = text
    if body[:1] in ("-", "+"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    if body.startswith("0o"):
        return sign * int(body[2:], 8)
    if body.startswith("0x"):
        return sign * int(body[2:], 16)
    return sign * int(body, 10)


def _parse_float(text: str) -> float:
    lowered = text.lower()
    if lowered.endswith(".inf"):
        return -math.inf if lowered.startswith("-") else math.inf
    if lowered == ".nan":
        return math.nan
    return float(text)


def scalar_to_strict(node: Scalar, path: str = "") -> StrictValue:
    """Resolve one scalar to a strict value using its kind hint."""
    kind = node.kind
    if kind is ScalarKind.STRING or kind is ScalarKind.TIMESTAMP:
        return node.text
    if kind is ScalarKind.NULL:
        return None
    if kind is ScalarKind.BOOL:
        lowered = node.text.lower()
        if lowered in ("true", "false"):
            return lowered == "true"
        return node.text
    if kind is ScalarKind.INT:
        try:
            return normalize_int(_parse_int(node.text))
        except (ValueError, OverflowError):
            return node.text
    if kind is ScalarKind.FLOAT:
        try:
            value = _parse_float(node.text)
        except ValueError:
            return node.text
        if math.isfinite(value):
            return value
        if "inf" in node.text.lower() or "nan" in node.text.lower():
            raise ConversionError(f"non-finite number {node.text!r} is not representable", path)
        # Literal overflowed to infinity; keep the text.
        return node.text
    if kind is ScalarKind.BINARY:
        raise ConversionError("binary scalars are not supported", path)
    raise ConversionError(f"unsupported scalar tag {node.tag!r}", path)


def canonical_key(value: StrictValue, path: str = "") -> str:
    """Render a converted mapping key as the string the JSON tree will hold."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, str):
        return value
    raise ConversionError(f"mapping key of type {type(value).__name__} is not supported", path)


def to_strict(node: GenericNode, path: str = "") -> StrictValue:
    """Convert a GenericNode tree to a strict value tree."""
    if isinstance(node, Scalar):
        return scalar_to_strict(node, path)
    if isinstance(node, Sequence):
        return [to_strict(item, f"{path}[{i}]") for i, item in enumerate(node.items)]
    if isinstance(node, Mapping):
        result: Dict[str, Any] = {}
        seen = set()
        for key_node, value_node in node.pairs:
            if not isinstance(key_node, Scalar):
                raise ConversionError("complex mapping keys are not supported", path)
            key = canonical_key(scalar_to_strict(key_node, path), path)
            if key in seen:
                raise DuplicateKeyError(key, line=key_node.line)
            seen.add(key)
            result[key] = to_strict(value_node, _child(path, key))
        return result
    raise ConversionError(f"unsupported node type {type(node).__name__}", path)


def to_generic(value: Any, path: str = "") -> GenericNode:
    """Convert a strict value tree back to a GenericNode tree.

    Quoting is left to the emitter; nodes only record the value's kind.
    """
    if value is None:
        return Scalar("null", ScalarKind.NULL)
    if isinstance(value, bool):
        return Scalar("true" if value else "false", ScalarKind.BOOL)
    if isinstance(value, int):
        try:
            number = normalize_int(value)
        except OverflowError as e:
            raise ConversionError(f"integer {value} is out of range", path) from e
        if isinstance(number, float):
            return Scalar(format_float(number), ScalarKind.FLOAT)
        return Scalar(str(number), ScalarKind.INT)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ConversionError(f"non-finite number {value!r} is not representable", path)
        return Scalar(format_float(value), ScalarKind.FLOAT)
    if isinstance(value, str):
        return Scalar(value, ScalarKind.STRING)
    if isinstance(value, (list, tuple)):
        return Sequence(tuple(to_generic(item, f"{path}[{i}]") for i, item in enumerate(value)))
    if isinstance(value, dict):
        pairs = []
        for key, item in value.items():
            if not isinstance(key, str):
                raise ConversionError(
                    f"object keys must be strings, got {type(key).__name__}", path
                )
            pairs.append((Scalar(key, ScalarKind.STRING), to_generic(item, _child(path, key))))
        return Mapping(tuple(pairs))
    raise ConversionError(f"unsupported value type {type(value).__name__}", path)


def stringify_scalar(value: StrictValue) -> Optional[str]:
    """Canonical text of a bool or number, or None for any other value."""
    if isinstance(value, (bool, int, float)):
        return canonical_key(value)
    return None
