"""Block-format emitter: GenericNode trees out as YAML text via PyYAML.

Strings are written plain only when no YAML reader, 1.1 or 1.2, would
type them as anything else. Everything ambiguous (`yes`, `true`, `~`,
`1`, `1.2`, `1e+36`, the empty string) is double-quoted, so parsing the
output again yields the same strict tree.
"""

import yaml
from yaml.nodes import MappingNode, ScalarNode, SequenceNode

from jsonyaml.kernel.nodes import GenericNode, Mapping, Scalar, ScalarKind, Sequence
from jsonyaml.kernel.resolver import CORE_SCHEMA, KIND_TAGS, STR_TAG

SEQ_TAG = "tag:yaml.org,2002:seq"
MAP_TAG = "tag:yaml.org,2002:map"

_NO_WRAP = float("inf")


class BlockDumper(yaml.SafeDumper):
    """SafeDumper that resolves both schemas and prefers double quotes."""

    def choose_scalar_style(self):
        style = super().choose_scalar_style()
        if style == "'":
            return '"'
        return style


for _tag, _regexp, _first in CORE_SCHEMA:
    BlockDumper.add_implicit_resolver(_tag, _regexp, _first)


def _to_yaml_node(node: GenericNode) -> yaml.Node:
    if isinstance(node, Scalar):
        tag = KIND_TAGS.get(node.kind, STR_TAG)
        style = None
        if node.kind is ScalarKind.STRING and "\n" in node.text:
            style = "|"
        return ScalarNode(tag, node.text, style=style)
    if isinstance(node, Sequence):
        return SequenceNode(SEQ_TAG, [_to_yaml_node(item) for item in node.items], flow_style=False)
    if isinstance(node, Mapping):
        pairs = [(_to_yaml_node(k), _to_yaml_node(v)) for k, v in node.pairs]
        return MappingNode(MAP_TAG, pairs, flow_style=False)
    raise TypeError(f"unsupported node type {type(node).__name__}")


def render_yaml(node: GenericNode, indent: int = 2) -> str:
    """Serialize one document, without document markers."""
    return yaml.serialize(
        _to_yaml_node(node),
        Dumper=BlockDumper,
        indent=indent,
        width=_NO_WRAP,
        allow_unicode=True,
    )
