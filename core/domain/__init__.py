"""
Domain layer: aggregates and the repository ports they are persisted through.

Usage:
    from core.domain import Attribute, AttributeType, Option, CategoryAttribute
"""

from .attribute import Attribute, AttributeType, Option
from .category_attribute import CategoryAttribute
from .repositories import (
    AttributeListQuery,
    AttributeRepository,
    CategoryAttributeListQuery,
    CategoryAttributeRepository,
    PageResult,
)

__all__ = [
    "Attribute",
    "AttributeType",
    "Option",
    "CategoryAttribute",
    "AttributeRepository",
    "CategoryAttributeRepository",
    "AttributeListQuery",
    "CategoryAttributeListQuery",
    "PageResult",
]
