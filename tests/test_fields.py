"""Tests for FieldSpec construction and the strict field walk."""

from dataclasses import dataclass
from typing import Annotated, Any, Dict, List, Optional, Tuple, TypedDict, Union

import pytest
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, alias_generators

from jsonyaml.errors import UnknownFieldError
from jsonyaml.kernel.binder import align_to_target, bind_strict
from jsonyaml.kernel.fields import FieldKind, field_spec


class Leaf(BaseModel):
    value: str


class Tree(BaseModel):
    name: str
    children: List["Tree"] = []


class Camel(BaseModel):
    first_name: str
    last_name: str

    model_config = ConfigDict(alias_generator=alias_generators.to_camel)


class Choices(BaseModel):
    value: int = Field(validation_alias=AliasChoices("value", "val"))


class Movie(TypedDict):
    title: str
    year: int


@dataclass
class Box:
    leaves: List[Leaf]
    label: Optional[str] = None


class TestFieldSpec:
    def test_model(self):
        spec = field_spec(Leaf)
        assert spec.kind is FieldKind.STRUCT
        assert spec.type_name == "Leaf"
        assert set(spec.fields) == {"value"}
        assert spec.child("value").kind is FieldKind.STRING
        assert spec.child("missing") is None

    def test_cached_by_type(self):
        assert field_spec(Leaf) is field_spec(Leaf)
        assert field_spec(List[Leaf]) is field_spec(List[Leaf])

    def test_self_reference(self):
        spec = field_spec(Tree)
        children = spec.child("children")
        assert children.kind is FieldKind.LIST
        assert children.element_spec() is spec

    def test_alias_generator(self):
        assert set(field_spec(Camel).fields) == {"firstName", "lastName"}

    def test_alias_choices(self):
        assert set(field_spec(Choices).fields) == {"value", "val"}

    def test_typed_dict(self):
        spec = field_spec(Movie)
        assert spec.kind is FieldKind.STRUCT
        assert set(spec.fields) == {"title", "year"}

    def test_dataclass(self):
        spec = field_spec(Box)
        assert set(spec.fields) == {"leaves", "label"}
        assert spec.child("label").kind is FieldKind.STRING
        assert spec.child("leaves").element_spec() is field_spec(Leaf)

    @pytest.mark.parametrize(
        "tp,kind",
        [
            (str, FieldKind.STRING),
            (Optional[str], FieldKind.STRING),
            (Annotated[str, "meta"], FieldKind.STRING),
            (int, FieldKind.SCALAR),
            (Any, FieldKind.ANY),
            (Union[Leaf, int], FieldKind.ANY),
            (List[int], FieldKind.LIST),
            (Tuple[int, ...], FieldKind.LIST),
            (Dict[str, Leaf], FieldKind.MAP),
            (dict, FieldKind.MAP),
            (list, FieldKind.LIST),
        ],
    )
    def test_kinds(self, tp, kind):
        assert field_spec(tp).kind is kind


class TestAlignToTarget:
    def test_scalars_on_string_fields_become_text(self):
        tree = {"children": [{"name": 1}, {"name": True, "children": []}], "name": 2.5}
        assert align_to_target(tree, field_spec(Tree)) == {
            "children": [{"name": "1"}, {"name": "true", "children": []}],
            "name": "2.5",
        }

    def test_null_is_not_stringified(self):
        assert align_to_target({"label": None}, field_spec(Box)) == {"label": None}

    def test_non_string_fields_untouched(self):
        assert align_to_target({"year": 1999}, field_spec(Movie)) == {"year": 1999}

    def test_mismatched_shapes_pass_through(self):
        assert align_to_target({"leaves": "nope"}, field_spec(Box)) == {"leaves": "nope"}

    def test_unknown_keys_kept_when_lenient(self):
        assert align_to_target({"value": "x", "other": 1}, field_spec(Leaf)) == {"value": "x", "other": 1}

    def test_input_is_not_mutated(self):
        tree = {"value": 1}
        align_to_target(tree, field_spec(Leaf))
        assert tree == {"value": 1}


class TestBindStrict:
    def test_accepts_known_fields(self):
        bind_strict({"leaves": [{"value": "a"}], "label": "l"}, field_spec(Box))

    def test_rejects_nested_unknown(self):
        with pytest.raises(UnknownFieldError) as excinfo:
            bind_strict({"leaves": [{"value": "a", "colour": "green"}]}, field_spec(Box))
        assert excinfo.value.key == "colour"
        assert excinfo.value.type_name == "Leaf"
        assert excinfo.value.path == "leaves[0]"

    def test_any_accepts_everything(self):
        bind_strict({"anything": {"goes": 1}}, field_spec(Any))

    def test_generated_aliases_required(self):
        bind_strict({"firstName": "a", "lastName": "b"}, field_spec(Camel))
        with pytest.raises(UnknownFieldError, match='unknown field "first_name" in Camel'):
            bind_strict({"first_name": "a"}, field_spec(Camel))
