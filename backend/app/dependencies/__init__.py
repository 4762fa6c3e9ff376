"""
FastAPI dependency injection module.

Provides centralized dependencies for:
- Database sessions
- Repositories
- Command and query handlers
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from core.repositories import AttributeRepository, CategoryAttributeRepository
from core.services import (
    AssignAttributeToCategoryHandler,
    CreateAttributeHandler,
    GetAttributeByIdHandler,
    GetAttributeListHandler,
    GetCategoryAttributeListHandler,
    UnassignAttributeFromCategoryHandler,
    UpdateAttributeHandler,
    UpdateCategoryAttributeHandler,
)

from ..database import get_db

# =============================================================================
# Repository Dependencies
# =============================================================================


def get_attribute_repository(db: Session = Depends(get_db)) -> AttributeRepository:
    """Get AttributeRepository instance."""
    return AttributeRepository(db)


def get_category_attribute_repository(
    db: Session = Depends(get_db),
) -> CategoryAttributeRepository:
    """Get CategoryAttributeRepository instance."""
    return CategoryAttributeRepository(db)


# =============================================================================
# Handler Dependencies
# =============================================================================


def get_create_attribute_handler(
    repo: AttributeRepository = Depends(get_attribute_repository),
) -> CreateAttributeHandler:
    return CreateAttributeHandler(repo)


def get_update_attribute_handler(
    repo: AttributeRepository = Depends(get_attribute_repository),
) -> UpdateAttributeHandler:
    return UpdateAttributeHandler(repo)


def get_attribute_by_id_handler(
    repo: AttributeRepository = Depends(get_attribute_repository),
) -> GetAttributeByIdHandler:
    return GetAttributeByIdHandler(repo)


def get_attribute_list_handler(
    repo: AttributeRepository = Depends(get_attribute_repository),
) -> GetAttributeListHandler:
    return GetAttributeListHandler(repo)


def get_assign_attribute_handler(
    repo: CategoryAttributeRepository = Depends(get_category_attribute_repository),
    attributes: AttributeRepository = Depends(get_attribute_repository),
) -> AssignAttributeToCategoryHandler:
    """Assignment needs both repositories to check the attribute exists."""
    return AssignAttributeToCategoryHandler(repo, attributes)


def get_update_category_attribute_handler(
    repo: CategoryAttributeRepository = Depends(get_category_attribute_repository),
) -> UpdateCategoryAttributeHandler:
    return UpdateCategoryAttributeHandler(repo)


def get_unassign_attribute_handler(
    repo: CategoryAttributeRepository = Depends(get_category_attribute_repository),
) -> UnassignAttributeFromCategoryHandler:
    return UnassignAttributeFromCategoryHandler(repo)


def get_category_attribute_list_handler(
    repo: CategoryAttributeRepository = Depends(get_category_attribute_repository),
) -> GetCategoryAttributeListHandler:
    return GetCategoryAttributeListHandler(repo)


__all__ = [
    # Repository dependencies
    "get_attribute_repository",
    "get_category_attribute_repository",
    # Handler dependencies
    "get_create_attribute_handler",
    "get_update_attribute_handler",
    "get_attribute_by_id_handler",
    "get_attribute_list_handler",
    "get_assign_attribute_handler",
    "get_update_category_attribute_handler",
    "get_unassign_attribute_handler",
    "get_category_attribute_list_handler",
]
