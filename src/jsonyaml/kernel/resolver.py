"""Implicit scalar typing for the block format.

Reading uses the YAML 1.2 core schema: only true/false literals are
booleans, so `yes`, `on` and friends stay strings. Writing uses a wider
table (see jsonyaml.kernel.emit) so that any string an older YAML 1.1
reader would misread still gets quoted.
"""

import re

from yaml.resolver import BaseResolver, Resolver

from jsonyaml.kernel.nodes import ScalarKind


STR_TAG = "tag:yaml.org,2002:str"
INT_TAG = "tag:yaml.org,2002:int"
FLOAT_TAG = "tag:yaml.org,2002:float"
BOOL_TAG = "tag:yaml.org,2002:bool"
NULL_TAG = "tag:yaml.org,2002:null"
TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"
BINARY_TAG = "tag:yaml.org,2002:binary"

TAG_KINDS = {
    STR_TAG: ScalarKind.STRING,
    INT_TAG: ScalarKind.INT,
    FLOAT_TAG: ScalarKind.FLOAT,
    BOOL_TAG: ScalarKind.BOOL,
    NULL_TAG: ScalarKind.NULL,
    TIMESTAMP_TAG: ScalarKind.TIMESTAMP,
    BINARY_TAG: ScalarKind.BINARY,
}

KIND_TAGS = {kind: tag for tag, kind in TAG_KINDS.items()}

# (tag, pattern, first characters) in resolution order.
CORE_SCHEMA = [
    (NULL_TAG, re.compile(r"^(?:~|null|Null|NULL|)$"), ["~", "n", "N", ""]),
    (BOOL_TAG, re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"), list("tTfF")),
    (INT_TAG, re.compile(r"^(?:[-+]?[0-9]+|0o[0-7]+|0x[0-9a-fA-F]+)$"), list("-+0123456789")),
    (
        FLOAT_TAG,
        re.compile(
            r"^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?"
            r"|[-+]?\.(?:inf|Inf|INF)"
            r"|\.(?:nan|NaN|NAN))$"
        ),
        list("-+.0123456789"),
    ),
]


def _timestamp_resolvers():
    """Reuse PyYAML's timestamp pattern, grouped by first character."""
    first_chars = []
    pattern = None
    for first, resolvers in Resolver.yaml_implicit_resolvers.items():
        for tag, regexp in resolvers:
            if tag == TIMESTAMP_TAG:
                first_chars.append(first)
                pattern = regexp
    return pattern, first_chars


class BlockResolver(BaseResolver):
    """YAML 1.2 core schema plus timestamps."""


for _tag, _regexp, _first in CORE_SCHEMA:
    BlockResolver.add_implicit_resolver(_tag, _regexp, _first)

_timestamp_pattern, _timestamp_first = _timestamp_resolvers()
if _timestamp_pattern is not None:
    BlockResolver.add_implicit_resolver(TIMESTAMP_TAG, _timestamp_pattern, _timestamp_first)


def kind_for_tag(tag: str) -> ScalarKind:
    """Map a resolved or explicit tag to a scalar kind."""
    return TAG_KINDS.get(tag, ScalarKind.UNKNOWN)
