"""Field introspection contracts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

_TRUTHY_FLAGS = frozenset({"true", "1", "yes", "on"})


class IntrospectionUnavailableError(Exception):
    """Raised when the runtime cannot supply field metadata for a type."""


@dataclass(frozen=True)
class FieldDescriptor:
    """Public field of a describable type."""

    name: str
    type_expression: str | None = None
    description: str | None = None
    required: bool = False


class FieldIntrospector(Protocol):
    """Read-only source of type and field metadata used during resolution."""

    def list_public_fields(self, type_name: str) -> Sequence[FieldDescriptor]:
        """Return the public fields of ``type_name`` in declaration order."""

    def is_known_type(self, type_name: str) -> bool:
        """Return whether ``type_name`` names a class-like type."""

    def is_date_time_like(self, type_name: str) -> bool:
        """Return whether ``type_name`` is serialized as a date-time string."""

    def is_interface_like(self, type_name: str) -> bool:
        """Return whether ``type_name`` names an interface without a field shape."""


def coerce_required_flag(value: object) -> bool:
    """Interpret a free-form required marker as a boolean.

    Booleans pass through. Strings ``true``, ``1``, ``yes`` and ``on`` are true
    regardless of case and surrounding whitespace; every other value is false.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY_FLAGS
    if isinstance(value, int):
        return value == 1
    return False
