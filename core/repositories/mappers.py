"""
Conversions between aggregates and their SQLAlchemy entities.

``to_domain`` goes through ``reconstruct`` so stored rows are trusted and
never re-validated.
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional

from core.domain import Attribute, CategoryAttribute, Option
from core.models import AttributeEntity, CategoryAttributeEntity


def _as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; everything stored is UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def option_to_document(option: Option) -> Dict:
    return {
        "value": option.value,
        "slug": option.slug,
        "color_code": option.color_code,
        "sort_order": option.sort_order,
        "enabled": option.enabled,
    }


def option_from_document(document: Dict) -> Option:
    return Option(
        value=document["value"],
        slug=document["slug"],
        color_code=document.get("color_code"),
        sort_order=document.get("sort_order", 0),
        enabled=document.get("enabled", True),
    )


def attribute_to_entity(attribute: Attribute) -> AttributeEntity:
    return AttributeEntity(
        id=attribute.id,
        version=attribute.version,
        name=attribute.name,
        slug=attribute.slug,
        type=attribute.type.value,
        unit=attribute.unit,
        default_filterable=attribute.default_filterable,
        default_searchable=attribute.default_searchable,
        sort_order=attribute.sort_order,
        enabled=attribute.enabled,
        options=[option_to_document(o) for o in attribute.options],
        created_at=attribute.created_at,
        modified_at=attribute.modified_at,
    )


def attribute_to_domain(entity: AttributeEntity) -> Attribute:
    documents: Optional[List[Dict]] = entity.options
    return Attribute.reconstruct(
        id=entity.id,
        version=entity.version,
        name=entity.name,
        slug=entity.slug,
        type=entity.type,
        unit=entity.unit,
        default_filterable=entity.default_filterable,
        default_searchable=entity.default_searchable,
        sort_order=entity.sort_order,
        enabled=entity.enabled,
        options=[option_from_document(d) for d in documents or []],
        created_at=_as_utc(entity.created_at),
        modified_at=_as_utc(entity.modified_at),
    )


def category_attribute_to_entity(category_attribute: CategoryAttribute) -> CategoryAttributeEntity:
    return CategoryAttributeEntity(
        id=category_attribute.id,
        version=category_attribute.version,
        category_id=category_attribute.category_id,
        attribute_id=category_attribute.attribute_id,
        required=category_attribute.required,
        sort_order=category_attribute.sort_order,
        filterable=category_attribute.filterable,
        searchable=category_attribute.searchable,
        enabled=category_attribute.enabled,
        created_at=category_attribute.created_at,
        modified_at=category_attribute.modified_at,
    )


def category_attribute_to_domain(entity: CategoryAttributeEntity) -> CategoryAttribute:
    return CategoryAttribute.reconstruct(
        id=entity.id,
        version=entity.version,
        category_id=entity.category_id,
        attribute_id=entity.attribute_id,
        required=entity.required,
        sort_order=entity.sort_order,
        filterable=entity.filterable,
        searchable=entity.searchable,
        enabled=entity.enabled,
        created_at=_as_utc(entity.created_at),
        modified_at=_as_utc(entity.modified_at),
    )
