"""Centralized JSON text handling.

One renderer and one loader are used everywhere JSON text crosses the
library boundary, so both directions share the same rules:
- UTF-8, no ASCII escaping
- Compact separators (",", ":")
- Key order preserved as given (never sorted)
- NaN and Infinity rejected
- Duplicate object keys rejected on load
- Integers outside int64 widened to float on load
"""

import json
import math
from typing import Any, Dict, List, Tuple, Union

from jsonyaml.errors import ConversionError, DuplicateKeyError, ParseError
from jsonyaml.kernel.convert import normalize_int


def canonical_dumps(obj: Any) -> str:
    """
    Render a strict value tree as compact JSON text.

    Args:
        obj: Strict value (None, bool, int, float, str, list, dict)

    Returns:
        JSON string

    Raises:
        ConversionError: If the tree holds non-finite floats or non-JSON types
    """
    try:
        return json.dumps(
            obj,
            separators=(",", ":"),
            ensure_ascii=False,  # UTF-8 encoding
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise ConversionError(f"cannot render JSON: {e}") from e


def _object_without_duplicates(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise DuplicateKeyError(key)
        result[key] = value
    return result


def _reject_constant(name: str) -> Any:
    raise ConversionError(f"non-finite number {name} is not representable")


def _parse_int(text: str) -> Union[int, float]:
    try:
        return normalize_int(int(text))
    except (OverflowError, ValueError) as e:
        raise ConversionError(f"integer {text} is out of range") from e


def _parse_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ConversionError(f"number {text} is out of range")
    return value


def canonical_loads(data: Union[str, bytes]) -> Any:
    """Parse JSON text into a strict value tree."""
    try:
        if isinstance(data, bytes):
            data = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"json: {e}") from e
    try:
        return json.loads(
            data,
            object_pairs_hook=_object_without_duplicates,
            parse_constant=_reject_constant,
            parse_int=_parse_int,
            parse_float=_parse_float,
        )
    except json.JSONDecodeError as e:
        raise ParseError(f"json: {e.msg} (line {e.lineno}, column {e.colno})", line=e.lineno) from e
