"""Block-format parsing: PyYAML composer in, GenericNode trees out.

PyYAML does the tokenizing and composing. This module only wires the
composer to the YAML 1.2 resolver and copies the resulting node graph into
frozen GenericNode variants with 1-based line numbers. Alias expansion is
budgeted: a document built mostly from re-expanded aliases is refused.
"""

from typing import IO, Optional, Set, Union

import yaml
from yaml.composer import Composer
from yaml.parser import Parser
from yaml.reader import Reader
from yaml.scanner import Scanner

from jsonyaml.errors import ConversionError, ParseError
from jsonyaml.kernel.nodes import GenericNode, Mapping, Scalar, ScalarKind, Sequence
from jsonyaml.kernel.resolver import NULL_TAG, BlockResolver, kind_for_tag

Source = Union[str, bytes, IO[str], IO[bytes]]


class _BlockComposer(Reader, Scanner, Parser, Composer, BlockResolver):
    """Composer-only loader: no constructors, nodes are adapted instead."""

    def __init__(self, stream: Source):
        Reader.__init__(self, stream)
        Scanner.__init__(self)
        Parser.__init__(self)
        Composer.__init__(self)
        BlockResolver.__init__(self)


def _parse_error(exc: yaml.YAMLError) -> ParseError:
    mark = getattr(exc, "problem_mark", None)
    line = mark.line + 1 if mark is not None else None
    return ParseError(f"yaml: {exc}", line=line)


# Alias expansion limits: past these sizes an alias-heavy document is refused.
_ALIAS_MIN_USES = 100
_ALIAS_MIN_NODES = 1000
_ALIAS_RATIO_LOW = 400_000
_ALIAS_RATIO_HIGH = 4_000_000


def _allowed_alias_ratio(nodes: int) -> float:
    """Share of built nodes that may come from alias expansion."""
    if nodes <= _ALIAS_RATIO_LOW:
        return 0.99
    if nodes >= _ALIAS_RATIO_HIGH:
        return 0.10
    span = (nodes - _ALIAS_RATIO_LOW) / (_ALIAS_RATIO_HIGH - _ALIAS_RATIO_LOW)
    return 0.99 - 0.89 * span


class _Expansion:
    """Tracks how much of one document is built by re-expanding aliases."""

    def __init__(self):
        self.active: Set[int] = set()
        self.seen: Set[int] = set()
        self.nodes = 0
        self.aliases = 0
        self.aliased_nodes = 0
        self.alias_depth = 0

    def visit(self, node: yaml.Node, path: str) -> bool:
        """Count one built node; return True when it is an alias use."""
        repeat = id(node) in self.seen
        self.seen.add(id(node))
        self.nodes += 1
        if repeat:
            self.aliases += 1
        if repeat or self.alias_depth:
            self.aliased_nodes += 1
        if (
            self.aliases > _ALIAS_MIN_USES
            and self.nodes > _ALIAS_MIN_NODES
            and self.aliased_nodes / self.nodes > _allowed_alias_ratio(self.nodes)
        ):
            raise ConversionError("document contains excessive aliasing", path)
        return repeat


def _adapt(node: yaml.Node, expansion: _Expansion, path: str = "") -> GenericNode:
    """Copy a PyYAML node graph into GenericNode variants."""
    line = node.start_mark.line + 1 if node.start_mark is not None else None
    is_alias = expansion.visit(node, path)

    if isinstance(node, yaml.ScalarNode):
        return Scalar(node.value, kind_for_tag(node.tag), tag=node.tag, line=line)

    # Aliases share node objects; only a node that contains itself is a problem.
    active = expansion.active
    if id(node) in active:
        raise ConversionError("recursive alias cannot be represented", path)
    active.add(id(node))
    if is_alias:
        expansion.alias_depth += 1
    try:
        if isinstance(node, yaml.SequenceNode):
            items = tuple(
                _adapt(item, expansion, f"{path}[{i}]") for i, item in enumerate(node.value)
            )
            return Sequence(items, line=line)
        pairs = []
        for key_node, value_node in node.value:
            key_text = key_node.value if isinstance(key_node, yaml.ScalarNode) else "?"
            child_path = f"{path}.{key_text}" if path else key_text
            pairs.append(
                (_adapt(key_node, expansion, child_path), _adapt(value_node, expansion, child_path))
            )
        return Mapping(tuple(pairs), line=line)
    finally:
        active.discard(id(node))
        if is_alias:
            expansion.alias_depth -= 1


def _is_empty_document(node: yaml.Node) -> bool:
    return (
        isinstance(node, yaml.ScalarNode)
        and node.tag == NULL_TAG
        and node.value == ""
        and node.style is None
    )


def parse_block(data: Source) -> GenericNode:
    """Parse exactly one block-format document.

    An empty input yields a null scalar. More than one document is a ParseError.
    """
    try:
        composer = _BlockComposer(data)
        try:
            node = composer.get_single_node()
        finally:
            composer.dispose()
    except yaml.YAMLError as e:
        raise _parse_error(e) from e
    if node is None:
        return Scalar("", ScalarKind.NULL)
    return _adapt(node, _Expansion())


class DocumentReader:
    """Pulls documents one at a time from a block-format stream."""

    def __init__(self, source: Source):
        try:
            self._composer = _BlockComposer(source)
        except yaml.YAMLError as e:
            raise _parse_error(e) from e
        self._done = False

    def next_document(self) -> Optional[GenericNode]:
        """Return the next document, or None once the stream is exhausted."""
        while not self._done:
            try:
                if not self._composer.check_node():
                    self._done = True
                    self._composer.dispose()
                    break
                node = self._composer.get_node()
            except yaml.YAMLError as e:
                raise _parse_error(e) from e
            if _is_empty_document(node):
                continue
            return _adapt(node, _Expansion())
        return None
