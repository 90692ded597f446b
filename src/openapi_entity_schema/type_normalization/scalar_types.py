"""Scalar type alias normalization and schema type mapping."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

_TYPE_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "integer": "int",
        "double": "float",
        "numeric": "float",
        "boolean": "bool",
        "false": "bool",
        "true": "bool",
    }
)

# mixed and null are handled by the resolver before reaching this table
_SCHEMA_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "int": "integer",
        "float": "number",
        "bool": "boolean",
        "string": "string",
    }
)


class UnsupportedTypeError(Exception):
    """Raised when a type token cannot be mapped to a schema scalar type."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Unsupported or unconvertible variable type '{type_name}'")
        self.type_name = type_name


def normalize_type(token: str) -> str:
    """Map a scalar alias onto its canonical family name.

    The lookup is case-insensitive; tokens without an alias are returned
    unchanged, including their original casing.
    """
    return _TYPE_ALIASES.get(token.lower(), token)


def scalar_to_schema_type(token: str) -> str:
    """Return the schema ``type`` value for a scalar type token.

    Raises:
      UnsupportedTypeError: If the normalized token is not int, float, bool or string.
    """
    normalized = normalize_type(token)
    schema_type = _SCHEMA_TYPES.get(normalized.lower())
    if schema_type is None:
        raise UnsupportedTypeError(normalized)
    return schema_type
