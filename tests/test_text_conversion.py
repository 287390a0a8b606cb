"""YAML <-> JSON text conversion, checked in both directions.

Each case converts the input, compares with the expected output, then
converts the output back. The reverse result must equal the input, or the
explicit `reverse` text where the round trip normalizes it.
"""

import pytest

from jsonyaml import json_to_yaml, yaml_to_json


YAML_TO_JSON_CASES = [
    # (yaml input, json output, reverse yaml or None when equal to input)
    ("t: a\n", '{"t":"a"}', None),
    ("t: \n", '{"t":null}', "t: null\n"),
    ("t: null\n", '{"t":null}', None),
    ("true: yes\n", '{"true":"yes"}', '"true": "yes"\n'),
    ("false: yes\n", '{"false":"yes"}', '"false": "yes"\n'),
    ("1: a\n", '{"1":"a"}', '"1": a\n'),
    ("1000000000000000000000000000000000000: a\n", '{"1e+36":"a"}', '"1e+36": a\n'),
    ("1e+36: a\n", '{"1e+36":"a"}', '"1e+36": a\n'),
    ('"1e+36": a\n', '{"1e+36":"a"}', None),
    ('"1.2": a\n', '{"1.2":"a"}', None),
    ("- t: a\n", '[{"t":"a"}]', None),
    (
        "- t: a\n- t:\n    b: 1\n    c: 2\n",
        '[{"t":"a"},{"t":{"b":1,"c":2}}]',
        None,
    ),
    (
        "[{t: a}, {t: {b: 1, c: 2}}]",
        '[{"t":"a"},{"t":{"b":1,"c":2}}]',
        "- t: a\n- t:\n    b: 1\n    c: 2\n",
    ),
    ("- t: \n", '[{"t":null}]', "- t: null\n"),
    ("- t: null\n", '[{"t":null}]', None),
]

JSON_TO_YAML_CASES = [
    ('{"t":"a"}', "t: a\n", None),
    ('{"t":null}', "t: null\n", None),
]


@pytest.mark.parametrize("source,expected,reverse", YAML_TO_JSON_CASES)
def test_yaml_to_json_and_back(source, expected, reverse):
    output = yaml_to_json(source)
    assert output == expected

    back = json_to_yaml(output)
    assert back == (reverse if reverse is not None else source)


@pytest.mark.parametrize("source,expected,reverse", JSON_TO_YAML_CASES)
def test_json_to_yaml_and_back(source, expected, reverse):
    output = json_to_yaml(source)
    assert output == expected

    back = yaml_to_json(output)
    assert back == (reverse if reverse is not None else source)


def test_bytes_input_is_accepted():
    assert yaml_to_json(b"t: a\n") == '{"t":"a"}'
    assert json_to_yaml(b'{"t":"a"}') == "t: a\n"


def test_key_order_is_preserved():
    """Keys keep source order in both directions, never sorted."""
    assert yaml_to_json("z: 1\na: 2\nm: 3\n") == '{"z":1,"a":2,"m":3}'
    assert json_to_yaml('{"z":1,"a":2,"m":3}') == "z: 1\na: 2\nm: 3\n"


def test_large_number_value_normalizes_to_exponent_form():
    assert yaml_to_json("a: 1000000000000000000000000000000000000\n") == '{"a":1e+36}'
    assert json_to_yaml('{"a":1e+36}') == "a: 1e+36\n"
    assert json_to_yaml('{"a":1000000000000000000000000000000000000}') == "a: 1e+36\n"


class TestAmbiguousStringsAreQuoted:
    """Strings that read as another type must survive a round trip as strings."""

    @pytest.mark.parametrize(
        "value",
        ["yes", "no", "on", "off", "true", "False", "null", "~", "", "1", "-3", "1.2", "1e+36", "0o17", "012"],
    )
    def test_round_trip_keeps_string(self, value):
        source = '{"a":"%s"}' % value
        assert yaml_to_json(json_to_yaml(source)) == source

    def test_plain_string_stays_plain(self):
        assert json_to_yaml('{"a":"hello world"}') == "a: hello world\n"

    def test_empty_string_is_double_quoted(self):
        assert json_to_yaml('{"a":""}') == 'a: ""\n'

    def test_multiline_string_round_trips(self):
        source = '{"a":"first\\nsecond"}'
        assert yaml_to_json(json_to_yaml(source)) == source

    def test_unicode_is_written_unescaped(self):
        assert json_to_yaml('{"a":"café"}') == "a: café\n"
        assert yaml_to_json("a: café\n") == '{"a":"café"}'


def _reencode(text):
    return json_to_yaml(yaml_to_json(text))


@pytest.mark.parametrize(
    "text",
    [
        "t: a\n",
        "true: yes\n1: 2\n",
        "list:\n- 1\n- two\n- null\nnested:\n  x: [1, {y: z}]\n",
        "a: 2001-12-14\nb: 0x1F\nc: '007'\n",
    ],
)
def test_reencoding_is_idempotent(text):
    once = _reencode(text)
    assert _reencode(once) == once


def test_empty_document_converts_to_null():
    assert yaml_to_json("") == "null"
