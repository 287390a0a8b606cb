"""Public API for jsonyaml.

Typed values go to YAML through their JSON form, and YAML comes back
through the same strict tree, so whatever survives a JSON round trip
survives a YAML one:

    value --dump_python(mode="json")--> strict tree --to_generic--> YAML text
    YAML text --parse_block--> GenericNode --to_strict--> strict tree
        --align_to_target--> --validate_python--> value

Duplicate keys are rejected on every decode path. Unknown fields are
rejected only when DecodeOptions asks for it.
"""

import functools
from typing import Any, Optional, Union

from pydantic import PydanticUserError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from jsonyaml._internal.canonical_json import canonical_dumps, canonical_loads
from jsonyaml.contracts import STRICT, DecodeOptions
from jsonyaml.errors import BindError, ConversionError
from jsonyaml.kernel.binder import align_to_target
from jsonyaml.kernel.convert import StrictValue, to_generic, to_strict
from jsonyaml.kernel.emit import render_yaml
from jsonyaml.kernel.fields import field_spec
from jsonyaml.kernel.parser import Source, parse_block

Text = Union[str, bytes]


@functools.lru_cache(maxsize=None)
def _cached_adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def _type_adapter(tp: Any) -> TypeAdapter:
    """TypeAdapters are costly to build; reuse them per type."""
    try:
        return _cached_adapter(tp)
    except TypeError:
        return TypeAdapter(tp)


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


def value_to_tree(value: Any) -> StrictValue:
    """Dump a typed value to its strict tree (aliases applied)."""
    try:
        return _type_adapter(type(value)).dump_python(value, mode="json", by_alias=True)
    except (PydanticSerializationError, PydanticUserError) as e:
        raise ConversionError(f"cannot serialize {type(value).__name__}: {e}") from e


def tree_to_value(tree: StrictValue, target: Any = Any, options: Optional[DecodeOptions] = None) -> Any:
    """Bind a strict tree to `target`, enforcing the unknown-field policy."""
    options = options or DecodeOptions()
    spec = field_spec(target)
    aligned = align_to_target(tree, spec, reject_unknown=options.rejects_unknown_fields)
    try:
        adapter = _type_adapter(target)
    except PydanticUserError as e:
        raise BindError(_type_name(target), [], str(e)) from e
    try:
        return adapter.validate_python(aligned)
    except ValidationError as e:
        raise BindError(_type_name(target), e.errors(include_url=False), str(e)) from e


def marshal(value: Any) -> str:
    """Serialize a typed value to YAML text."""
    return render_yaml(to_generic(value_to_tree(value)))


def unmarshal(data: Source, target: Any = Any, options: Optional[DecodeOptions] = None) -> Any:
    """Parse one YAML document and bind it to `target`.

    Raises:
        ParseError: malformed YAML
        DuplicateKeyError: a mapping repeats a key
        ConversionError: a scalar has no strict-tree form
        UnknownFieldError: strict mode and a key matches no field
        BindError: the binder rejected the converted tree
    """
    return tree_to_value(to_strict(parse_block(data)), target, options)


def unmarshal_strict(data: Source, target: Any = Any) -> Any:
    """unmarshal() that rejects unknown fields."""
    return unmarshal(data, target, STRICT)


def yaml_to_json(data: Source) -> str:
    """Convert one YAML document to compact JSON text."""
    return canonical_dumps(to_strict(parse_block(data)))


def json_to_yaml(data: Text) -> str:
    """Convert JSON text to YAML text."""
    return render_yaml(to_generic(canonical_loads(data)))
