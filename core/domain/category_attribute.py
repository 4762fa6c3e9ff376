"""
CategoryAttribute aggregate.

Assigns one attribute to one category with per-assignment overrides. The
attribute is referenced by ID only; its existence is checked when the
assignment is made and not enforced afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from core.errors import ValidationError

from .clock import new_id, utcnow

if TYPE_CHECKING:
    from .attribute import Attribute


@dataclass(eq=True)
class CategoryAttribute:
    """
    Aggregate root for category/attribute assignments.

    ``filterable`` and ``searchable`` are overrides: ``None`` means the
    referenced attribute's default applies. Resolution is left to readers
    that hold the attribute (see ``effective_filterable``).
    """

    id: str
    version: int
    category_id: str
    attribute_id: str
    required: bool
    sort_order: int
    filterable: Optional[bool]
    searchable: Optional[bool]
    enabled: bool
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        category_id: str,
        attribute_id: str,
        required: bool = False,
        sort_order: int = 0,
        filterable: Optional[bool] = None,
        searchable: Optional[bool] = None,
        enabled: bool = True,
        id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> "CategoryAttribute":
        """Validate input and build a fresh assignment with version 1."""
        if not category_id:
            raise ValidationError("categoryId is required", "categoryId")
        if not attribute_id:
            raise ValidationError("attributeId is required", "attributeId")
        _validate_sort_order(sort_order)

        now = now or utcnow()
        return cls(
            id=id or new_id(),
            version=1,
            category_id=category_id,
            attribute_id=attribute_id,
            required=required,
            sort_order=sort_order,
            filterable=filterable,
            searchable=searchable,
            enabled=enabled,
            created_at=now,
            modified_at=now,
        )

    @classmethod
    def reconstruct(
        cls,
        id: str,
        version: int,
        category_id: str,
        attribute_id: str,
        required: bool,
        sort_order: int,
        filterable: Optional[bool],
        searchable: Optional[bool],
        enabled: bool,
        created_at: datetime,
        modified_at: datetime,
    ) -> "CategoryAttribute":
        """Rebuild an assignment from persisted state."""
        return cls(
            id=id,
            version=version,
            category_id=category_id,
            attribute_id=attribute_id,
            required=required,
            sort_order=sort_order,
            filterable=filterable,
            searchable=searchable,
            enabled=enabled,
            created_at=created_at,
            modified_at=modified_at,
        )

    def update(
        self,
        required: bool,
        sort_order: int,
        filterable: Optional[bool],
        searchable: Optional[bool],
        enabled: bool,
        now: Optional[datetime] = None,
    ) -> None:
        """Replace the mutable fields. Category and attribute never change."""
        _validate_sort_order(sort_order)

        self.required = required
        self.sort_order = sort_order
        self.filterable = filterable
        self.searchable = searchable
        self.enabled = enabled
        self.modified_at = now or utcnow()

    def effective_filterable(self, attribute: "Attribute") -> bool:
        return attribute.default_filterable if self.filterable is None else self.filterable

    def effective_searchable(self, attribute: "Attribute") -> bool:
        return attribute.default_searchable if self.searchable is None else self.searchable


def _validate_sort_order(sort_order: int) -> None:
    if sort_order < 0:
        raise ValidationError("sortOrder cannot be negative", "sortOrder")


__all__ = ["CategoryAttribute"]
