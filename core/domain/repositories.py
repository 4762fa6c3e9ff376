"""
Repository interfaces (ports).

These define how the handlers talk to persistence. The SQLAlchemy
implementations live in core.repositories.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

from .attribute import Attribute, AttributeType
from .category_attribute import CategoryAttribute

T = TypeVar("T")

SORT_ASC = "asc"
SORT_DESC = "desc"
DEFAULT_SORT = "sortOrder"


@dataclass
class PageResult(Generic[T]):
    """One page of a list query plus the total number of matches."""
    items: List[T] = field(default_factory=list)
    page: int = 1
    size: int = 0
    total: int = 0


@dataclass
class AttributeListQuery:
    page: int = 1
    size: int = 20
    enabled: Optional[bool] = None
    type: Optional[AttributeType] = None
    sort: str = DEFAULT_SORT
    order: str = SORT_ASC


@dataclass
class CategoryAttributeListQuery:
    category_id: str
    page: int = 1
    size: int = 20
    enabled: Optional[bool] = None
    filterable: Optional[bool] = None
    sort: str = DEFAULT_SORT
    order: str = SORT_ASC


class AttributeRepository(ABC):
    """Repository interface for the Attribute aggregate."""

    @abstractmethod
    def insert(self, attribute: Attribute) -> None:
        """Store a new attribute. Raises SlugAlreadyExistsError on a key collision."""

    @abstractmethod
    def find_by_id(self, attribute_id: str) -> Attribute:
        """Load an attribute. Raises NotFoundError."""

    @abstractmethod
    def exists(self, attribute_id: str) -> bool:
        """Check whether an attribute with this ID is stored."""

    @abstractmethod
    def find_list(self, query: AttributeListQuery) -> PageResult[Attribute]:
        """Filtered, sorted, paginated listing."""

    @abstractmethod
    def update(self, attribute: Attribute) -> Attribute:
        """
        Write the attribute if the stored version still equals attribute.version.

        Returns the stored attribute with its version incremented. Raises
        OptimisticLockError when the version moved and NotFoundError when the
        row is gone.
        """


class CategoryAttributeRepository(ABC):
    """Repository interface for the CategoryAttribute aggregate."""

    @abstractmethod
    def insert(self, category_attribute: CategoryAttribute) -> None:
        """Store a new assignment. Raises AlreadyAssignedError on a key collision."""

    @abstractmethod
    def find_by_id(self, category_attribute_id: str) -> CategoryAttribute:
        """Load an assignment. Raises NotFoundError."""

    @abstractmethod
    def find_by_category_and_attribute(
        self, category_id: str, attribute_id: str
    ) -> CategoryAttribute:
        """Load an assignment by its natural key. Raises NotFoundError."""

    @abstractmethod
    def find_list(self, query: CategoryAttributeListQuery) -> PageResult[CategoryAttribute]:
        """Filtered, sorted, paginated listing within one category."""

    @abstractmethod
    def update(self, category_attribute: CategoryAttribute) -> CategoryAttribute:
        """Versioned write, same contract as AttributeRepository.update."""

    @abstractmethod
    def delete(self, category_attribute_id: str) -> None:
        """Remove an assignment. Raises NotFoundError when nothing was deleted."""
