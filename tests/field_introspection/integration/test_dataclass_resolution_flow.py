"""Resolution flow tests over Python dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from openapi_entity_schema.field_introspection import DataclassIntrospector
from openapi_entity_schema.schema_resolution import SchemaResolver


@dataclass
class Category:
    """Catalogue category.

    Attributes:
        title: Display title.
        parent: Enclosing category.
    """

    title: str = field(metadata={"required": True})
    parent: Category | None = None


@dataclass
class Product:
    sku: str = field(metadata={"description": "Stock keeping unit", "required": "true"})
    price: float = field(default=0.0, metadata={"required": "1"})
    categories: list[Category] = field(default_factory=list)
    released_at: datetime | None = None
    attributes: object = None


def test_dataclass_product_resolves_through_nested_types() -> None:
    resolver = SchemaResolver(DataclassIntrospector([Category, Product]))

    assert resolver.resolve("Product[]") == {
        "type": "array",
        "items": {
            "type": "object",
            "properties": {
                "sku": {"type": "string", "description": "Stock keeping unit"},
                "price": {"type": "number"},
                "categories": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "title": {"type": "string", "description": "Display title."},
                            "parent": {
                                "description": "Enclosing category.",
                                "nullable": True,
                                "type": "object",
                            },
                        },
                        "required": ["title"],
                    },
                },
                "released_at": {"nullable": True, "type": "string", "format": "date-time"},
                "attributes": {"type": "object"},
            },
            "required": ["sku", "price"],
        },
    }
