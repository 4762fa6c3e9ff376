"""
Command and query handlers.

Handlers orchestrate validation and persistence for one use case each and
depend only on the repository ports, so they can be wired to SQLAlchemy
repositories or to test doubles.
"""

from core.services.attribute_service import (
    CreateAttributeCommand,
    CreateAttributeHandler,
    GetAttributeByIdHandler,
    GetAttributeListHandler,
    GetAttributeListQuery,
    UpdateAttributeCommand,
    UpdateAttributeHandler,
)
from core.services.category_attribute_service import (
    AssignAttributeToCategoryCommand,
    AssignAttributeToCategoryHandler,
    GetCategoryAttributeListHandler,
    GetCategoryAttributeListQuery,
    UnassignAttributeFromCategoryCommand,
    UnassignAttributeFromCategoryHandler,
    UpdateCategoryAttributeCommand,
    UpdateCategoryAttributeHandler,
)

__all__ = [
    "CreateAttributeCommand",
    "CreateAttributeHandler",
    "UpdateAttributeCommand",
    "UpdateAttributeHandler",
    "GetAttributeByIdHandler",
    "GetAttributeListQuery",
    "GetAttributeListHandler",
    "AssignAttributeToCategoryCommand",
    "AssignAttributeToCategoryHandler",
    "UpdateCategoryAttributeCommand",
    "UpdateCategoryAttributeHandler",
    "UnassignAttributeFromCategoryCommand",
    "UnassignAttributeFromCategoryHandler",
    "GetCategoryAttributeListQuery",
    "GetCategoryAttributeListHandler",
]
