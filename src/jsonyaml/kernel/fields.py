"""Field-name tables for typed targets.

A FieldSpec describes, for one target type, which input keys it accepts
and what type sits under each key. Specs are built from pydantic models,
pydantic dataclasses, stdlib dataclasses and TypedDicts, using the same
name resolution the binder applies: an alias replaces the field name
unless the model also validates by name.

Nested specs resolve lazily through field_spec(), so self-referencing
models work and every type is inspected at most once per process.
"""

import dataclasses
import functools
import logging
import types
import typing
from collections import abc
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import AliasChoices, AliasPath, BaseModel

logger = logging.getLogger(__name__)

_UNION_TYPES = tuple(t for t in (Union, getattr(types, "UnionType", None)) if t is not None)
_LIST_ORIGINS = (list, set, frozenset, abc.Sequence, abc.MutableSequence, abc.Set, abc.MutableSet, abc.Iterable)
_MAP_ORIGINS = (dict, abc.Mapping, abc.MutableMapping)


class FieldKind(str, Enum):
    """Shape of a target type, as far as key checking is concerned."""

    STRUCT = "struct"
    LIST = "list"
    MAP = "map"
    STRING = "string"
    SCALAR = "scalar"
    ANY = "any"


@dataclass(frozen=True)
class FieldSpec:
    kind: FieldKind
    type_name: str = ""
    fields: Dict[str, Any] = field(default_factory=dict)  # accepted key -> annotation
    element: Any = Any  # list element / map value annotation
    open: bool = False  # struct keeps unknown keys (extra="allow")

    def child(self, key: str) -> Optional["FieldSpec"]:
        """Spec for the value under `key`, or None if the struct has no such field."""
        if key not in self.fields:
            return None
        return field_spec(self.fields[key])

    def element_spec(self) -> "FieldSpec":
        return field_spec(self.element)


ANY_SPEC = FieldSpec(FieldKind.ANY, "Any")


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


def _unwrap(tp: Any) -> Any:
    """Strip Annotated and Optional wrappers."""
    while True:
        origin = typing.get_origin(tp)
        if origin is typing.Annotated:
            tp = typing.get_args(tp)[0]
            continue
        if origin in _UNION_TYPES:
            members = [a for a in typing.get_args(tp) if a is not type(None)]
            if len(members) == 1:
                tp = members[0]
                continue
        return tp


def _alias_names(name: str, alias: Any) -> List[str]:
    if isinstance(alias, str):
        return [alias]
    if isinstance(alias, AliasChoices):
        names = []
        for choice in alias.choices:
            names.extend(_alias_names(name, choice))
        return names
    if isinstance(alias, AliasPath):
        first = alias.path[0] if alias.path else None
        return [first] if isinstance(first, str) else []
    return [name]


def _pydantic_fields(model_fields: Dict[str, Any], config: Dict[str, Any]) -> Dict[str, Any]:
    by_name = bool(config.get("populate_by_name") or config.get("validate_by_name"))
    accepted: Dict[str, Any] = {}
    for name, info in model_fields.items():
        alias = info.validation_alias if info.validation_alias is not None else info.alias
        if alias is None:
            accepted[name] = info.annotation
            continue
        for key in _alias_names(name, alias):
            # Values reached through an AliasPath are not the field's own shape.
            accepted[key] = Any if isinstance(alias, AliasPath) else info.annotation
        if by_name:
            accepted.setdefault(name, info.annotation)
    return accepted


def _struct_spec(tp: type) -> Optional[FieldSpec]:
    if isinstance(tp, type) and issubclass(tp, BaseModel):
        config = tp.model_config
        return FieldSpec(
            FieldKind.STRUCT,
            tp.__name__,
            fields=_pydantic_fields(tp.model_fields, config),
            open=config.get("extra") == "allow",
        )
    pydantic_fields = getattr(tp, "__pydantic_fields__", None)
    if isinstance(tp, type) and dataclasses.is_dataclass(tp) and pydantic_fields is not None:
        config = getattr(tp, "__pydantic_config__", None) or {}
        return FieldSpec(
            FieldKind.STRUCT,
            tp.__name__,
            fields=_pydantic_fields(pydantic_fields, config),
            open=config.get("extra") == "allow",
        )
    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        hints = typing.get_type_hints(tp)
        accepted = {f.name: hints.get(f.name, Any) for f in dataclasses.fields(tp)}
        return FieldSpec(FieldKind.STRUCT, tp.__name__, fields=accepted)
    if isinstance(tp, type) and typing.is_typeddict(tp):
        return FieldSpec(FieldKind.STRUCT, tp.__name__, fields=dict(typing.get_type_hints(tp)))
    return None


def _build(tp: Any) -> FieldSpec:
    tp = _unwrap(tp)
    if tp is Any or tp is object or isinstance(tp, typing.TypeVar):
        return ANY_SPEC
    if tp is str:
        return FieldSpec(FieldKind.STRING, "str")

    struct = _struct_spec(tp)
    if struct is not None:
        logger.debug("built field spec for %s (%d fields)", struct.type_name, len(struct.fields))
        return struct

    origin = typing.get_origin(tp)
    args = typing.get_args(tp)
    if origin in _UNION_TYPES:
        # More than one non-None member: the binder picks, not us.
        return ANY_SPEC
    if origin is tuple:
        element = args[0] if len(args) == 2 and args[1] is Ellipsis else Any
        return FieldSpec(FieldKind.LIST, _type_name(tp), element=element)
    if origin in _LIST_ORIGINS:
        return FieldSpec(FieldKind.LIST, _type_name(tp), element=args[0] if args else Any)
    if origin in _MAP_ORIGINS:
        return FieldSpec(FieldKind.MAP, _type_name(tp), element=args[1] if len(args) == 2 else Any)
    if tp in (list, tuple, set, frozenset):
        return FieldSpec(FieldKind.LIST, tp.__name__)
    if tp is dict:
        return FieldSpec(FieldKind.MAP, "dict")
    return FieldSpec(FieldKind.SCALAR, _type_name(tp))


@functools.lru_cache(maxsize=None)
def _cached(tp: Any) -> FieldSpec:
    return _build(tp)


def field_spec(tp: Any) -> FieldSpec:
    """Return the (cached) FieldSpec for a target type."""
    try:
        return _cached(tp)
    except TypeError:
        # Unhashable annotation (e.g. Annotated with unhashable metadata).
        return _build(tp)
