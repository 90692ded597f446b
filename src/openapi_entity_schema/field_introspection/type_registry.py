"""Statically registered field-descriptor table."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from .field_descriptors import FieldDescriptor


class TypeKind(str, Enum):
    """Shape category of a registered type."""

    OBJECT = "object"
    DATE_TIME = "datetime"
    INTERFACE = "interface"


@dataclass(frozen=True)
class _RegisteredType:
    kind: TypeKind
    fields: tuple[FieldDescriptor, ...]


class TypeRegistry:
    """Field introspector backed by explicitly registered types."""

    def __init__(self) -> None:
        self._types: dict[str, _RegisteredType] = {}

    @property
    def type_names(self) -> tuple[str, ...]:
        return tuple(self._types)

    def register_object(self, name: str, fields: Iterable[FieldDescriptor] = ()) -> None:
        """Register an object type with its public fields in declaration order."""
        self._register(name, _RegisteredType(kind=TypeKind.OBJECT, fields=tuple(fields)))

    def register_date_time(self, name: str) -> None:
        self._register(name, _RegisteredType(kind=TypeKind.DATE_TIME, fields=()))

    def register_interface(self, name: str) -> None:
        self._register(name, _RegisteredType(kind=TypeKind.INTERFACE, fields=()))

    def register_describable(self, cls: type, name: str | None = None) -> None:
        """Register a class that lists its own fields through ``describe_fields()``.

        Raises:
          TypeError: If the class does not provide a callable ``describe_fields``.
        """
        describe_fields = getattr(cls, "describe_fields", None)
        if not callable(describe_fields):
            raise TypeError(f"{cls.__name__} does not define describe_fields().")
        self.register_object(name or cls.__name__, describe_fields())

    def kind_of(self, type_name: str) -> TypeKind | None:
        registered = self._types.get(type_name)
        return registered.kind if registered is not None else None

    def list_public_fields(self, type_name: str) -> Sequence[FieldDescriptor]:
        registered = self._types.get(type_name)
        if registered is None:
            return ()
        return registered.fields

    def is_known_type(self, type_name: str) -> bool:
        return self.kind_of(type_name) in (TypeKind.OBJECT, TypeKind.DATE_TIME)

    def is_date_time_like(self, type_name: str) -> bool:
        return self.kind_of(type_name) is TypeKind.DATE_TIME

    def is_interface_like(self, type_name: str) -> bool:
        return self.kind_of(type_name) is TypeKind.INTERFACE

    def _register(self, name: str, registered: _RegisteredType) -> None:
        if not name:
            raise ValueError("Registered type name must not be empty.")
        if name in self._types:
            raise ValueError(f"Type already registered: {name}")
        self._types[name] = registered
