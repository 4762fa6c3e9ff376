"""
CategoryAttribute command and query handlers.

An assignment is only ever addressed through its category: a request that
names the wrong category gets NotFoundError, the same answer as for an
assignment that does not exist, so IDs do not leak across categories.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.domain import (
    AttributeRepository,
    CategoryAttribute,
    CategoryAttributeListQuery,
    CategoryAttributeRepository,
    PageResult,
)
from core.domain.clock import new_id, utcnow
from core.domain.repositories import DEFAULT_SORT, SORT_ASC
from core.errors import NotFoundError, OptimisticLockError
from core.logging import get_logger

logger = get_logger("service.category_attribute")


@dataclass
class AssignAttributeToCategoryCommand:
    category_id: str
    attribute_id: str
    id: Optional[str] = None
    required: bool = False
    sort_order: int = 0
    filterable: Optional[bool] = None
    searchable: Optional[bool] = None
    enabled: bool = True


@dataclass
class UpdateCategoryAttributeCommand:
    id: str
    category_id: str
    version: int
    required: bool = False
    sort_order: int = 0
    filterable: Optional[bool] = None
    searchable: Optional[bool] = None
    enabled: bool = True


@dataclass
class UnassignAttributeFromCategoryCommand:
    id: str
    category_id: str


@dataclass
class GetCategoryAttributeListQuery:
    category_id: str
    page: int = 1
    size: int = 20
    enabled: Optional[bool] = None
    filterable: Optional[bool] = None
    sort: Optional[str] = None
    order: Optional[str] = None


def _load_in_category(
    repository: CategoryAttributeRepository, assignment_id: str, category_id: str
) -> CategoryAttribute:
    category_attribute = repository.find_by_id(assignment_id)
    if category_attribute.category_id != category_id:
        raise NotFoundError("CategoryAttribute", assignment_id)
    return category_attribute


class AssignAttributeToCategoryHandler:
    def __init__(
        self,
        repository: CategoryAttributeRepository,
        attributes: AttributeRepository,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.repository = repository
        self.attributes = attributes
        self.id_factory = id_factory
        self.clock = clock

    def handle(self, cmd: AssignAttributeToCategoryCommand) -> CategoryAttribute:
        """
        Assign an attribute to a category.

        Raises:
            NotFoundError: the attribute does not exist (nothing is written)
            ValidationError: the assignment data is invalid
            AlreadyAssignedError: the pair is already assigned
        """
        # Advisory check only: the attribute is not locked for the lifetime
        # of the assignment.
        if not self.attributes.exists(cmd.attribute_id):
            raise NotFoundError("Attribute", cmd.attribute_id)

        category_attribute = CategoryAttribute.create(
            category_id=cmd.category_id,
            attribute_id=cmd.attribute_id,
            required=cmd.required,
            sort_order=cmd.sort_order,
            filterable=cmd.filterable,
            searchable=cmd.searchable,
            enabled=cmd.enabled,
            id=cmd.id or self.id_factory(),
            now=self.clock(),
        )
        self.repository.insert(category_attribute)

        logger.info(
            "category_attribute_assigned",
            category_attribute_id=category_attribute.id,
            category_id=category_attribute.category_id,
            attribute_id=category_attribute.attribute_id,
        )
        return category_attribute


class UpdateCategoryAttributeHandler:
    def __init__(
        self,
        repository: CategoryAttributeRepository,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.repository = repository
        self.clock = clock

    def handle(self, cmd: UpdateCategoryAttributeCommand) -> CategoryAttribute:
        category_attribute = _load_in_category(self.repository, cmd.id, cmd.category_id)

        if category_attribute.version != cmd.version:
            logger.warning(
                "category_attribute_version_conflict",
                category_attribute_id=cmd.id,
                expected_version=cmd.version,
                stored_version=category_attribute.version,
            )
            raise OptimisticLockError("CategoryAttribute", cmd.id, cmd.version)

        category_attribute.update(
            required=cmd.required,
            sort_order=cmd.sort_order,
            filterable=cmd.filterable,
            searchable=cmd.searchable,
            enabled=cmd.enabled,
            now=self.clock(),
        )

        try:
            updated = self.repository.update(category_attribute)
        except OptimisticLockError:
            logger.warning(
                "category_attribute_concurrent_update",
                category_attribute_id=cmd.id,
                expected_version=cmd.version,
            )
            raise

        logger.info(
            "category_attribute_updated",
            category_attribute_id=updated.id,
            version=updated.version,
        )
        return updated


class UnassignAttributeFromCategoryHandler:
    def __init__(self, repository: CategoryAttributeRepository):
        self.repository = repository

    def handle(self, cmd: UnassignAttributeFromCategoryCommand) -> None:
        _load_in_category(self.repository, cmd.id, cmd.category_id)
        self.repository.delete(cmd.id)

        logger.info(
            "category_attribute_unassigned",
            category_attribute_id=cmd.id,
            category_id=cmd.category_id,
        )


class GetCategoryAttributeListHandler:
    def __init__(self, repository: CategoryAttributeRepository):
        self.repository = repository

    def handle(self, query: GetCategoryAttributeListQuery) -> PageResult[CategoryAttribute]:
        return self.repository.find_list(
            CategoryAttributeListQuery(
                category_id=query.category_id,
                page=query.page,
                size=query.size,
                enabled=query.enabled,
                filterable=query.filterable,
                sort=query.sort or DEFAULT_SORT,
                order=query.order or SORT_ASC,
            )
        )
