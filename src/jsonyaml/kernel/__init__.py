"""Conversion kernel: parse, convert, check fields, emit."""

from jsonyaml.kernel.binder import align_to_target, bind_strict
from jsonyaml.kernel.convert import StrictValue, canonical_key, to_generic, to_strict
from jsonyaml.kernel.emit import render_yaml
from jsonyaml.kernel.fields import FieldKind, FieldSpec, field_spec
from jsonyaml.kernel.nodes import GenericNode, Mapping, Scalar, ScalarKind, Sequence
from jsonyaml.kernel.parser import DocumentReader, parse_block

__all__ = [
    "GenericNode",
    "Scalar",
    "Sequence",
    "Mapping",
    "ScalarKind",
    "StrictValue",
    "parse_block",
    "DocumentReader",
    "to_strict",
    "to_generic",
    "canonical_key",
    "render_yaml",
    "FieldKind",
    "FieldSpec",
    "field_spec",
    "align_to_target",
    "bind_strict",
]
