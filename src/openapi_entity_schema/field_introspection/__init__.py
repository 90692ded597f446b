"""Field introspection exports."""

from .dataclass_introspector import DataclassIntrospector, annotation_to_type_expression
from .field_descriptors import (
    FieldDescriptor,
    FieldIntrospector,
    IntrospectionUnavailableError,
    coerce_required_flag,
)
from .type_registry import TypeKind, TypeRegistry

__all__ = [
    "DataclassIntrospector",
    "FieldDescriptor",
    "FieldIntrospector",
    "IntrospectionUnavailableError",
    "TypeKind",
    "TypeRegistry",
    "annotation_to_type_expression",
    "coerce_required_flag",
]
