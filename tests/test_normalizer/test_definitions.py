"""Tests for swagnorm.normalizer.definitions — base class extraction."""

from __future__ import annotations

from swagnorm.models import BaseClass, PrimitiveType
from swagnorm.normalizer.definitions import (
    extract_base_classes,
    sort_and_dedupe,
    template_argument,
)


def _by_name(base_classes: list[BaseClass], name: str) -> BaseClass:
    return next(base for base in base_classes if base.name == name)


class TestTemplateArgument:

    def test_plain(self) -> None:
        assert template_argument("User") == ""

    def test_single_level(self) -> None:
        assert template_argument("Result«User»") == "User"

    def test_list_unwrapped(self) -> None:
        assert template_argument("Page«List«User»»") == "User"

    def test_other_generic_not_unwrapped(self) -> None:
        assert template_argument("Result«Page«User»»") == "Page«User»"


class TestExtractBaseClasses:

    def test_plain_definition(self) -> None:
        classes = extract_base_classes(
            {
                "User": {
                    "description": "A user",
                    "required": ["name"],
                    "properties": {
                        "id": {"type": "integer"},
                        "name": {"type": "string", "description": "Display name"},
                    },
                }
            }
        )
        assert len(classes) == 1
        user = classes[0]
        assert user.name == "User"
        assert user.just_name == "User"
        assert user.description == "A user"
        assert [p.name for p in user.properties] == ["id", "name"]
        assert user.properties[0].required is False
        assert user.properties[0].data_type.primitive_type == PrimitiveType.NUMBER
        assert user.properties[1].required is True
        assert user.properties[1].description == "Display name"
        assert user.properties[1].location is None

    def test_property_required_flag_wins(self) -> None:
        classes = extract_base_classes(
            {
                "Pet": {
                    "required": ["name"],
                    "properties": {
                        "name": {"type": "string", "required": False},
                        "tag": {"type": "string", "required": True},
                    },
                }
            }
        )
        assert [p.required for p in classes[0].properties] == [False, True]

    def test_generic_declaration_and_self_reference(self) -> None:
        classes = extract_base_classes(
            {
                "Result«User»": {
                    "properties": {
                        "data": {"$ref": "#/definitions/User"},
                        "code": {"type": "integer"},
                    }
                }
            },
            "api",
        )
        result = classes[0]
        assert result.name == "Result<T0>"
        assert result.just_name == "Result"
        assert result.properties[0].data_type.reference == "T0"

    def test_list_argument_self_reference(self) -> None:
        classes = extract_base_classes(
            {
                "Page«List«User»»": {
                    "properties": {
                        "items": {"type": "array", "items": {"$ref": "#/definitions/User"}},
                    }
                }
            }
        )
        items = classes[0].properties[0]
        assert items.data_type.is_array is True
        assert items.data_type.reference == "T0"

    def test_reference_qualified_with_origin(self) -> None:
        classes = extract_base_classes(
            {"Pet": {"properties": {"category": {"$ref": "#/definitions/Category"}}}}, "api"
        )
        assert classes[0].properties[0].data_type.reference == "defs.api.Category"

    def test_empty_definitions(self) -> None:
        assert extract_base_classes({}) == []

    def test_definition_without_properties(self) -> None:
        classes = extract_base_classes({"Empty": {"type": "object"}})
        assert classes[0].properties == []


class TestSortAndDedupe:

    def test_sorted_by_just_name_descending(self) -> None:
        classes = sort_and_dedupe(
            [BaseClass(name="Alpha"), BaseClass(name="Gamma"), BaseClass(name="Beta")]
        )
        assert [c.name for c in classes] == ["Gamma", "Beta", "Alpha"]

    def test_longest_instantiation_survives(self) -> None:
        classes = sort_and_dedupe(
            [
                BaseClass(name="Result"),
                BaseClass(name="Result<T0,T1>"),
                BaseClass(name="Result<T0>"),
            ]
        )
        assert [c.name for c in classes] == ["Result<T0,T1>"]

    def test_equal_names_first_wins(self) -> None:
        classes = sort_and_dedupe(
            [
                BaseClass(name="Result<T0>", description="first"),
                BaseClass(name="Result<T0>", description="second"),
            ]
        )
        assert len(classes) == 1
        assert classes[0].description == "first"

    def test_instantiations_collapse(self) -> None:
        classes = extract_base_classes(
            {
                "Result«User»": {"properties": {}},
                "Result«List«User»»": {"properties": {}},
                "User": {"properties": {}},
            }
        )
        assert [c.name for c in classes] == ["User", "Result<T0>"]
        just_names = [c.just_name for c in classes]
        assert len(just_names) == len(set(just_names))
