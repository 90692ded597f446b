"""Type normalization exports."""

from .scalar_types import UnsupportedTypeError, normalize_type, scalar_to_schema_type

__all__ = [
    "UnsupportedTypeError",
    "normalize_type",
    "scalar_to_schema_type",
]
