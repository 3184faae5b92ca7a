"""Tests for swagnorm.normalizer.references — dangling body parameter pruning."""

from __future__ import annotations

from swagnorm.models import (
    BaseClass,
    DataType,
    Interface,
    Module,
    ParameterLocation,
    Property,
)
from swagnorm.normalizer.references import unqualified_reference, validate_references


def _param(name: str, reference: str, location: ParameterLocation) -> Property:
    return Property(name=name, data_type=DataType(reference=reference), location=location)


def _module(*params: Property) -> Module:
    return Module(
        name="user",
        interfaces=[Interface(name="save", method="post", path="/user", parameters=list(params))],
    )


BASES = [BaseClass(name="User"), BaseClass(name="Result<T0>")]


class TestValidateReferences:

    def test_known_body_reference_kept(self) -> None:
        modules = validate_references(
            [_module(_param("user", "defs.User", ParameterLocation.BODY))], BASES
        )
        assert [p.name for p in modules[0].interfaces[0].parameters] == ["user"]

    def test_unknown_body_reference_dropped(self) -> None:
        modules = validate_references(
            [
                _module(
                    _param("ghost", "defs.Ghost", ParameterLocation.BODY),
                    _param("force", "", ParameterLocation.QUERY),
                )
            ],
            BASES,
        )
        assert [p.name for p in modules[0].interfaces[0].parameters] == ["force"]

    def test_just_name_match(self) -> None:
        modules = validate_references(
            [_module(_param("result", "defs.Result", ParameterLocation.BODY))], BASES
        )
        assert len(modules[0].interfaces[0].parameters) == 1

    def test_full_name_match(self) -> None:
        modules = validate_references(
            [_module(_param("result", "Result<T0>", ParameterLocation.BODY))], BASES
        )
        assert len(modules[0].interfaces[0].parameters) == 1

    def test_non_body_reference_untouched(self) -> None:
        modules = validate_references(
            [_module(_param("filter", "Ghost", ParameterLocation.QUERY))], BASES
        )
        assert len(modules[0].interfaces[0].parameters) == 1

    def test_body_without_reference_kept(self) -> None:
        modules = validate_references(
            [_module(_param("raw", "", ParameterLocation.BODY))], BASES
        )
        assert len(modules[0].interfaces[0].parameters) == 1

    def test_origin_qualified_reference(self) -> None:
        modules = validate_references(
            [_module(_param("user", "defs.api.User", ParameterLocation.BODY))], BASES, "api"
        )
        assert len(modules[0].interfaces[0].parameters) == 1

    def test_inputs_not_modified(self) -> None:
        original = _module(_param("ghost", "defs.Ghost", ParameterLocation.BODY))
        validate_references([original], BASES)
        assert len(original.interfaces[0].parameters) == 1

    def test_no_base_classes_drops_all_body_references(self) -> None:
        modules = validate_references(
            [_module(_param("user", "defs.User", ParameterLocation.BODY))], []
        )
        assert modules[0].interfaces[0].parameters == []


class TestUnqualifiedReference:

    def test_strips_defs(self) -> None:
        assert unqualified_reference("defs.User") == "User"

    def test_strips_origin(self) -> None:
        assert unqualified_reference("defs.api.User", "api") == "User"

    def test_origin_only_after_defs(self) -> None:
        assert unqualified_reference("api.User", "api") == "api.User"

    def test_unqualified_unchanged(self) -> None:
        assert unqualified_reference("User") == "User"
