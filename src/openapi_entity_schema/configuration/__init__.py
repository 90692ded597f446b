"""Type registry configuration exports."""

from .loader import ConfigurationError, load_type_registry, parse_type_registry
from .registry_scaffold_builder import (
    DEFAULT_REGISTRY_FILENAME,
    build_placeholder_registry,
    write_placeholder_registry,
)

__all__ = [
    "ConfigurationError",
    "load_type_registry",
    "parse_type_registry",
    "DEFAULT_REGISTRY_FILENAME",
    "build_placeholder_registry",
    "write_placeholder_registry",
]
