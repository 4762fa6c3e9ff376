"""
CategoryAttribute repository backed by SQLAlchemy.
"""

from core.domain import CategoryAttribute, CategoryAttributeListQuery, PageResult
from core.domain import repositories as ports
from core.errors import AlreadyAssignedError, NotFoundError
from core.models import CategoryAttributeEntity

from .base import BaseRepository
from .mappers import category_attribute_to_domain, category_attribute_to_entity


class CategoryAttributeRepository(
    BaseRepository[CategoryAttributeEntity], ports.CategoryAttributeRepository
):
    """Repository for category/attribute assignments."""

    model = CategoryAttributeEntity
    entity_name = "CategoryAttribute"
    sort_columns = {
        "sortOrder": CategoryAttributeEntity.sort_order,
        "createdAt": CategoryAttributeEntity.created_at,
        "modifiedAt": CategoryAttributeEntity.modified_at,
    }

    def insert(self, category_attribute: CategoryAttribute) -> None:
        self.add_entity(
            category_attribute_to_entity(category_attribute),
            on_conflict=lambda: AlreadyAssignedError(
                category_attribute.category_id, category_attribute.attribute_id
            ),
        )

    def find_by_id(self, category_attribute_id: str) -> CategoryAttribute:
        return category_attribute_to_domain(self.get_entity(category_attribute_id))

    def find_by_category_and_attribute(
        self, category_id: str, attribute_id: str
    ) -> CategoryAttribute:
        with self._translate_errors("get category attribute by natural key"):
            entity = (
                self.session.query(CategoryAttributeEntity)
                .filter(
                    CategoryAttributeEntity.category_id == category_id,
                    CategoryAttributeEntity.attribute_id == attribute_id,
                )
                .first()
            )
        if entity is None:
            raise NotFoundError(self.entity_name, f"{category_id}/{attribute_id}")
        return category_attribute_to_domain(entity)

    def find_list(self, query: CategoryAttributeListQuery) -> PageResult[CategoryAttribute]:
        conditions = [CategoryAttributeEntity.category_id == query.category_id]
        if query.enabled is not None:
            conditions.append(CategoryAttributeEntity.enabled == query.enabled)
        # Exact match on the stored override: inherited (NULL) rows never match.
        if query.filterable is not None:
            conditions.append(CategoryAttributeEntity.filterable == query.filterable)

        entities, total = self.find_page(
            conditions, query.sort, query.order, query.page, query.size
        )
        return PageResult(
            items=[category_attribute_to_domain(e) for e in entities],
            page=query.page,
            size=query.size,
            total=total,
        )

    def update(self, category_attribute: CategoryAttribute) -> CategoryAttribute:
        values = {
            "required": category_attribute.required,
            "sort_order": category_attribute.sort_order,
            "filterable": category_attribute.filterable,
            "searchable": category_attribute.searchable,
            "enabled": category_attribute.enabled,
            "modified_at": category_attribute.modified_at,
        }
        self.compare_and_swap(
            category_attribute.id,
            category_attribute.version,
            values,
            on_conflict=lambda: AlreadyAssignedError(
                category_attribute.category_id, category_attribute.attribute_id
            ),
        )
        return self.find_by_id(category_attribute.id)

    def delete(self, category_attribute_id: str) -> None:
        self.delete_entity(category_attribute_id)
