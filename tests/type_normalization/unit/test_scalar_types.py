"""Scalar type normalization tests."""

from __future__ import annotations

import pytest
from openapi_entity_schema.type_normalization.scalar_types import (
    UnsupportedTypeError,
    normalize_type,
    scalar_to_schema_type,
)


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("integer", "int"),
        ("INTEGER", "int"),
        ("double", "float"),
        ("numeric", "float"),
        ("boolean", "bool"),
        ("true", "bool"),
        ("False", "bool"),
        ("int", "int"),
        ("string", "string"),
    ],
)
def test_normalize_type_maps_aliases_to_canonical_family(token: str, expected: str) -> None:
    assert normalize_type(token) == expected


def test_normalize_type_preserves_unknown_tokens_and_their_case() -> None:
    assert normalize_type("Pet") == "Pet"
    assert normalize_type("null") == "null"
    assert normalize_type("Mixed") == "Mixed"


@pytest.mark.parametrize(
    "token", ["integer", "Double", "numeric", "boolean", "true", "Pet", "mixed", "String", ""]
)
def test_normalize_type_is_idempotent(token: str) -> None:
    assert normalize_type(normalize_type(token)) == normalize_type(token)


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("int", "integer"),
        ("integer", "integer"),
        ("float", "number"),
        ("double", "number"),
        ("numeric", "number"),
        ("bool", "boolean"),
        ("boolean", "boolean"),
        ("false", "boolean"),
        ("string", "string"),
        ("STRING", "string"),
        ("Int", "integer"),
    ],
)
def test_scalar_to_schema_type_maps_supported_scalars(token: str, expected: str) -> None:
    assert scalar_to_schema_type(token) == expected


@pytest.mark.parametrize("token", ["widget", "null", "mixed", "object", "str", ""])
def test_scalar_to_schema_type_rejects_unsupported_tokens(token: str) -> None:
    with pytest.raises(UnsupportedTypeError) as exc_info:
        scalar_to_schema_type(token)

    assert exc_info.value.type_name == token
    assert f"'{token}'" in str(exc_info.value)
