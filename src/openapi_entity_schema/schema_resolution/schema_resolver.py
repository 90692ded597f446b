"""Type expression to schema fragment resolution service."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from openapi_entity_schema.field_introspection.field_descriptors import FieldIntrospector
from openapi_entity_schema.type_normalization.scalar_types import (
    normalize_type,
    scalar_to_schema_type,
)

SchemaFragment = dict[str, Any]

_LOGGER = logging.getLogger(__name__)
_LOGGER.addHandler(logging.NullHandler())

_COMPOUND_SEPARATOR = re.compile(r"[&|]")
_ARRAY_SUFFIX = "[]"
_NULL_TYPE = "null"
_DEFAULT_FIELD_TYPE = "string"


class SchemaResolver:
    """Resolve type expressions into OpenAPI-style schema fragments.

    Class-like names are expanded through the injected field introspector.
    Types already being expanded higher up the current resolution path are
    emitted as a generic object, so self-referencing and mutually referencing
    types terminate.
    """

    def __init__(self, introspector: FieldIntrospector) -> None:
        self._introspector = introspector

    def resolve(self, type_expression: str, description: str | None = None) -> SchemaFragment:
        """Return the schema fragment describing ``type_expression``.

        Raises:
          UnsupportedTypeError: If a leaf token is neither a known type nor a scalar.
        """
        return self._resolve(type_expression, description, path=frozenset())

    def _resolve(
        self, type_expression: str, description: str | None, path: frozenset[str]
    ) -> SchemaFragment:
        # schemas have no grouping, parentheses are dropped
        expression = "".join(type_expression.split()).replace("(", "").replace(")", "")
        expression = expression.replace("?", f"{_NULL_TYPE}|")
        description_data = _description_data(description)

        uses_union = "|" in expression
        uses_intersection = "&" in expression
        if uses_union or uses_intersection:
            return self._resolve_compound(
                expression,
                description_data,
                uses_union=uses_union,
                uses_intersection=uses_intersection,
                path=path,
            )

        if expression.endswith(_ARRAY_SUFFIX):
            item_expression = expression[: -len(_ARRAY_SUFFIX)]
            return {
                "type": "array",
                "items": self._resolve(item_expression, None, path),
                **description_data,
            }

        if self._introspector.is_known_type(expression):
            return self._resolve_class(expression, description_data, path)

        lowered = expression.lower()
        if lowered == "mixed":
            # anything, including absence of a value
            return {"nullable": True, **description_data}

        if lowered == "object" or self._introspector.is_interface_like(expression):
            return {"type": "object", **description_data}

        return {"type": scalar_to_schema_type(expression), **description_data}

    def _resolve_compound(
        self,
        expression: str,
        description_data: Mapping[str, str],
        *,
        uses_union: bool,
        uses_intersection: bool,
        path: frozenset[str],
    ) -> SchemaFragment:
        tokens = [normalize_type(token) for token in _COMPOUND_SEPARATOR.split(expression) if token]
        sub_types = list(dict.fromkeys(tokens))

        metadata: SchemaFragment = dict(description_data)
        if _NULL_TYPE in sub_types:
            sub_types.remove(_NULL_TYPE)
            metadata["nullable"] = True

        if len(sub_types) == 1:
            return {**metadata, **self._resolve(sub_types[0], None, path)}
        # a bare null has nothing left to combine; operator-only input keeps its empty combinator
        if not sub_types and metadata.get("nullable"):
            return metadata

        _LOGGER.debug("Resolving compound type %r into %d sub-types", expression, len(sub_types))
        resolved = [self._resolve(sub_type, None, path) for sub_type in sub_types]
        metadata[_combinator_key(uses_union, uses_intersection)] = resolved
        return metadata

    def _resolve_class(
        self, type_name: str, description_data: Mapping[str, str], path: frozenset[str]
    ) -> SchemaFragment:
        # dates are exchanged as strings at the API boundary
        if self._introspector.is_date_time_like(type_name):
            return {"type": "string", "format": "date-time", **description_data}

        if type_name in path:
            _LOGGER.debug("Type %s references itself, emitting a generic object", type_name)
            return {"type": "object", **description_data}

        nested_path = path | {type_name}
        properties: dict[str, SchemaFragment] = {}
        required: list[str] = []
        for field in self._introspector.list_public_fields(type_name):
            properties[field.name] = self._resolve(
                field.type_expression or _DEFAULT_FIELD_TYPE, field.description, nested_path
            )
            if field.required:
                required.append(field.name)

        return {
            "type": "object",
            "properties": properties,
            "required": required,
            **description_data,
        }


def resolve_type_expression(
    type_expression: str,
    introspector: FieldIntrospector,
    description: str | None = None,
) -> SchemaFragment:
    """Resolve one type expression with a throwaway resolver."""
    return SchemaResolver(introspector).resolve(type_expression, description)


def _description_data(description: str | None) -> dict[str, str]:
    return {"description": description} if description is not None else {}


def _combinator_key(uses_union: bool, uses_intersection: bool) -> str:
    if uses_union and uses_intersection:
        return "anyOf"
    if uses_union:
        return "oneOf"
    return "allOf"
