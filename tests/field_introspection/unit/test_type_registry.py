"""Static type registry tests."""

from __future__ import annotations

from collections.abc import Iterable

import pytest
from openapi_entity_schema.field_introspection.field_descriptors import FieldDescriptor
from openapi_entity_schema.field_introspection.type_registry import TypeKind, TypeRegistry


class _Invoice:
    @classmethod
    def describe_fields(cls) -> Iterable[FieldDescriptor]:
        return [
            FieldDescriptor(name="number", type_expression="string", required=True),
            FieldDescriptor(name="total", type_expression="float"),
        ]


def test_registry_reports_kinds_of_registered_types() -> None:
    registry = TypeRegistry()
    registry.register_object("Pet", [FieldDescriptor(name="id", type_expression="int")])
    registry.register_date_time("Timestamp")
    registry.register_interface("Identifiable")

    assert registry.type_names == ("Pet", "Timestamp", "Identifiable")
    assert registry.kind_of("Pet") is TypeKind.OBJECT
    assert registry.is_known_type("Pet")
    assert registry.is_known_type("Timestamp")
    assert registry.is_date_time_like("Timestamp")
    assert not registry.is_date_time_like("Pet")
    assert registry.is_interface_like("Identifiable")
    assert not registry.is_known_type("Identifiable")


def test_registry_returns_fields_in_registration_order() -> None:
    registry = TypeRegistry()
    registry.register_object(
        "Pet",
        [FieldDescriptor(name="name"), FieldDescriptor(name="id"), FieldDescriptor(name="age")],
    )

    assert [field.name for field in registry.list_public_fields("Pet")] == ["name", "id", "age"]


def test_unknown_types_have_no_fields_and_no_kind() -> None:
    registry = TypeRegistry()

    assert registry.list_public_fields("Missing") == ()
    assert registry.kind_of("Missing") is None
    assert not registry.is_known_type("Missing")
    assert not registry.is_interface_like("Missing")


def test_register_describable_uses_describe_fields() -> None:
    registry = TypeRegistry()
    registry.register_describable(_Invoice)

    fields = registry.list_public_fields("_Invoice")
    assert [field.name for field in fields] == ["number", "total"]
    assert fields[0].required is True


def test_register_describable_accepts_explicit_name() -> None:
    registry = TypeRegistry()
    registry.register_describable(_Invoice, name="Invoice")

    assert registry.is_known_type("Invoice")


def test_register_describable_rejects_classes_without_describe_fields() -> None:
    registry = TypeRegistry()

    with pytest.raises(TypeError, match="describe_fields"):
        registry.register_describable(int)


def test_duplicate_registration_is_rejected() -> None:
    registry = TypeRegistry()
    registry.register_object("Pet")

    with pytest.raises(ValueError, match="already registered: Pet"):
        registry.register_interface("Pet")
