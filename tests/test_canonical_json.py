"""Tests for the shared JSON renderer/loader."""

import pytest

from jsonyaml._internal.canonical_json import canonical_dumps, canonical_loads
from jsonyaml.errors import ConversionError, DuplicateKeyError, ParseError


def test_dumps_is_compact_and_keeps_order():
    assert canonical_dumps({"b": 1, "a": [True, None, "x"]}) == '{"b":1,"a":[true,null,"x"]}'


def test_dumps_does_not_escape_unicode():
    assert canonical_dumps({"k": "ü"}) == '{"k":"ü"}'


def test_dumps_rejects_nan():
    with pytest.raises(ConversionError, match="cannot render JSON"):
        canonical_dumps({"a": float("nan")})


def test_loads_preserves_order():
    assert list(canonical_loads('{"z":1,"a":2}')) == ["z", "a"]


def test_loads_rejects_duplicate_keys():
    with pytest.raises(DuplicateKeyError, match='key "a" already defined'):
        canonical_loads('{"a":1,"a":2}')


def test_loads_rejects_nested_duplicate_keys():
    with pytest.raises(DuplicateKeyError, match='key "x" already defined'):
        canonical_loads('{"a":{"x":1,"x":2}}')


@pytest.mark.parametrize("text", ['{"a":NaN}', '{"a":Infinity}', '{"a":-Infinity}'])
def test_loads_rejects_non_finite_constants(text):
    with pytest.raises(ConversionError, match="non-finite"):
        canonical_loads(text)


def test_loads_rejects_float_overflow():
    with pytest.raises(ConversionError, match="out of range"):
        canonical_loads('{"a":1e400}')


def test_loads_widens_large_integers():
    value = canonical_loads('{"a":1000000000000000000000000000000000000,"b":9223372036854775807}')
    assert value == {"a": 1e36, "b": 9223372036854775807}
    assert isinstance(value["a"], float)
    assert isinstance(value["b"], int)


def test_loads_bytes():
    assert canonical_loads(b'{"a":"\xc3\xbc"}') == {"a": "ü"}


def test_loads_malformed():
    with pytest.raises(ParseError, match="line 1") as excinfo:
        canonical_loads('{"a":')
    assert excinfo.value.line == 1
