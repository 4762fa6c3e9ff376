"""
Attribute repository backed by SQLAlchemy.
"""

from core.domain import Attribute, AttributeListQuery, PageResult
from core.domain import repositories as ports
from core.errors import SlugAlreadyExistsError
from core.models import AttributeEntity

from .base import BaseRepository
from .mappers import attribute_to_domain, attribute_to_entity, option_to_document


class AttributeRepository(BaseRepository[AttributeEntity], ports.AttributeRepository):
    """
    Repository for Attribute aggregates.

    Any unique-key violation on write is reported as SlugAlreadyExistsError:
    slug is the only natural key, and a client-supplied ID that collides
    with a stored one is treated the same way.
    """

    model = AttributeEntity
    entity_name = "Attribute"
    sort_columns = {
        "sortOrder": AttributeEntity.sort_order,
        "name": AttributeEntity.name,
        "slug": AttributeEntity.slug,
        "createdAt": AttributeEntity.created_at,
        "modifiedAt": AttributeEntity.modified_at,
    }

    def insert(self, attribute: Attribute) -> None:
        self.add_entity(
            attribute_to_entity(attribute),
            on_conflict=lambda: SlugAlreadyExistsError(attribute.slug),
        )

    def find_by_id(self, attribute_id: str) -> Attribute:
        return attribute_to_domain(self.get_entity(attribute_id))

    def find_list(self, query: AttributeListQuery) -> PageResult[Attribute]:
        conditions = []
        if query.enabled is not None:
            conditions.append(AttributeEntity.enabled == query.enabled)
        if query.type is not None:
            conditions.append(AttributeEntity.type == query.type.value)

        entities, total = self.find_page(
            conditions, query.sort, query.order, query.page, query.size
        )
        return PageResult(
            items=[attribute_to_domain(e) for e in entities],
            page=query.page,
            size=query.size,
            total=total,
        )

    def update(self, attribute: Attribute) -> Attribute:
        values = {
            "name": attribute.name,
            "slug": attribute.slug,
            "type": attribute.type.value,
            "unit": attribute.unit,
            "default_filterable": attribute.default_filterable,
            "default_searchable": attribute.default_searchable,
            "sort_order": attribute.sort_order,
            "enabled": attribute.enabled,
            "options": [option_to_document(o) for o in attribute.options],
            "modified_at": attribute.modified_at,
        }
        self.compare_and_swap(
            attribute.id,
            attribute.version,
            values,
            on_conflict=lambda: SlugAlreadyExistsError(attribute.slug),
        )
        return self.find_by_id(attribute.id)
