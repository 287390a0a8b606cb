"""Align a strict value tree with a target type before binding.

One walk over the tree and the target's FieldSpec does two things:
- Booleans and numbers that land on str-typed fields become their
  canonical text (`a: 1` binds "1" to a str field, `a: true` binds "true")
- In strict mode, a key with no matching field raises UnknownFieldError

Values whose shape does not match the field spec (a list where a struct is
expected, and so on) are passed through untouched; the binder reports
those with its own errors.
"""

from typing import Any, Dict

from jsonyaml.errors import UnknownFieldError
from jsonyaml.kernel.convert import StrictValue, stringify_scalar
from jsonyaml.kernel.fields import FieldKind, FieldSpec


def _child(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def align_to_target(
    value: StrictValue,
    spec: FieldSpec,
    reject_unknown: bool = False,
    path: str = "",
) -> StrictValue:
    """Return a copy of `value` shaped for binding to the type behind `spec`."""
    if spec.kind is FieldKind.STRING:
        text = stringify_scalar(value)
        return text if text is not None else value

    if spec.kind is FieldKind.STRUCT and isinstance(value, dict):
        aligned: Dict[str, Any] = {}
        for key, item in value.items():
            child = spec.child(key)
            if child is None:
                if reject_unknown and not spec.open:
                    raise UnknownFieldError(key, spec.type_name, path)
                aligned[key] = item
                continue
            aligned[key] = align_to_target(item, child, reject_unknown, _child(path, key))
        return aligned

    if spec.kind is FieldKind.LIST and isinstance(value, list):
        element = spec.element_spec()
        return [
            align_to_target(item, element, reject_unknown, f"{path}[{i}]")
            for i, item in enumerate(value)
        ]

    if spec.kind is FieldKind.MAP and isinstance(value, dict):
        element = spec.element_spec()
        return {
            key: align_to_target(item, element, reject_unknown, _child(path, key))
            for key, item in value.items()
        }

    return value


def bind_strict(value: StrictValue, spec: FieldSpec) -> None:
    """Raise UnknownFieldError if any object key has no field in `spec`."""
    align_to_target(value, spec, reject_unknown=True)
