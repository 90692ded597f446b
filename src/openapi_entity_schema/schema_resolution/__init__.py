"""Schema resolution exports."""

from .schema_resolver import SchemaFragment, SchemaResolver, resolve_type_expression

__all__ = [
    "SchemaFragment",
    "SchemaResolver",
    "resolve_type_expression",
]
