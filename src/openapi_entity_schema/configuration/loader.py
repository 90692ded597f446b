"""Type registry loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from openapi_entity_schema.field_introspection.field_descriptors import (
    FieldDescriptor,
    coerce_required_flag,
)
from openapi_entity_schema.field_introspection.type_registry import TypeKind, TypeRegistry

_LOGGER = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when the type registry file is invalid."""


def load_type_registry(registry_path: Path | str) -> TypeRegistry:
    """Load and validate a YAML type registry file."""
    path = Path(registry_path)
    if not path.exists():
        raise ConfigurationError(f"Type registry file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse type registry file: {exc}") from exc

    registry = parse_type_registry(parsed)
    _LOGGER.debug("Loaded %d types from %s", len(registry.type_names), path)
    return registry


def parse_type_registry(parsed: Any) -> TypeRegistry:
    """Build a registry from an already parsed YAML/JSON document."""
    registry = TypeRegistry()
    if parsed is None:
        return registry

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Type registry root must be a mapping.")

    types_section = parsed.get("types")
    if types_section is None:
        return registry
    if not isinstance(types_section, Mapping):
        raise ConfigurationError("Configuration section 'types' must be a mapping.")

    seen_names: set[str] = set()
    for type_name, definition in types_section.items():
        if not isinstance(type_name, str) or not type_name.strip():
            raise ConfigurationError("Type names must be non-empty strings.")
        name = type_name.strip()
        if name in seen_names:
            raise ConfigurationError(f"Duplicate type '{name}' in types.")
        seen_names.add(name)
        _register_type(registry, name, definition)
    return registry


def _register_type(registry: TypeRegistry, type_name: str, definition: Any) -> None:
    label = f"types.{type_name}"
    if definition is None:
        definition = {}
    section = _require_mapping(definition, label)
    kind = _parse_kind(section.get("kind", TypeKind.OBJECT.value), f"{label}.kind")

    if kind is TypeKind.DATE_TIME:
        registry.register_date_time(type_name)
    elif kind is TypeKind.INTERFACE:
        registry.register_interface(type_name)
    else:
        registry.register_object(type_name, _parse_fields(section.get("fields"), label))


def _parse_kind(value: Any, field_name: str) -> TypeKind:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    try:
        return TypeKind(value.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(kind.value for kind in TypeKind)
        raise ConfigurationError(f"{field_name} must be one of: {allowed}.") from exc


def _parse_fields(value: Any, label: str) -> tuple[FieldDescriptor, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError(f"{label}.fields must be a list.")

    descriptors: list[FieldDescriptor] = []
    seen_names: set[str] = set()
    for index, entry in enumerate(value):
        entry_label = f"{label}.fields[{index}]"
        section = _require_mapping(entry, entry_label)
        name = _require_non_empty_string(section.get("name"), f"{entry_label}.name")
        if name in seen_names:
            raise ConfigurationError(f"Duplicate field '{name}' in {label}.")
        seen_names.add(name)
        descriptors.append(
            FieldDescriptor(
                name=name,
                type_expression=_optional_string(section.get("type"), f"{entry_label}.type"),
                description=_optional_string(
                    section.get("description"), f"{entry_label}.description"
                ),
                required=coerce_required_flag(section.get("required")),
            )
        )
    return tuple(descriptors)


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
