"""
Pydantic schemas for request and response validation.

Bodies are camelCase on the wire. Request models only check shapes; the
business rules (lengths, slug format, non-negative sort orders) belong to
the aggregates so their first-failure message reaches the client.
"""

from datetime import datetime
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.domain import Attribute, CategoryAttribute, Option, PageResult

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Query parameter enums
# =============================================================================


class SortOrder(str, Enum):
    asc = "asc"
    desc = "desc"


class AttributeSortField(str, Enum):
    sortOrder = "sortOrder"
    name = "name"
    slug = "slug"
    createdAt = "createdAt"
    modifiedAt = "modifiedAt"


class CategoryAttributeSortField(str, Enum):
    sortOrder = "sortOrder"
    createdAt = "createdAt"
    modifiedAt = "modifiedAt"


# =============================================================================
# Attributes
# =============================================================================


class OptionSchema(CamelModel):
    value: str = ""
    slug: str = ""
    color_code: Optional[str] = None
    sort_order: int = 0
    enabled: bool = True

    def to_domain(self) -> Option:
        return Option(
            value=self.value,
            slug=self.slug,
            color_code=self.color_code,
            sort_order=self.sort_order,
            enabled=self.enabled,
        )

    @classmethod
    def from_domain(cls, option: Option) -> "OptionSchema":
        return cls(
            value=option.value,
            slug=option.slug,
            color_code=option.color_code,
            sort_order=option.sort_order,
            enabled=option.enabled,
        )


class AttributeFields(CamelModel):
    name: str = ""
    slug: str = ""
    type: str = ""
    unit: Optional[str] = None
    default_filterable: bool = False
    default_searchable: bool = False
    sort_order: int = 0
    enabled: bool = True
    options: List[OptionSchema] = Field(default_factory=list)


class AttributeCreateRequest(AttributeFields):
    id: Optional[str] = None


class AttributeUpdateRequest(AttributeFields):
    id: str
    version: int


class AttributeResponse(CamelModel):
    id: str
    version: int
    name: str
    slug: str
    type: str
    unit: Optional[str] = None
    default_filterable: bool
    default_searchable: bool
    sort_order: int
    enabled: bool
    options: List[OptionSchema] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, attribute: Attribute) -> "AttributeResponse":
        return cls(
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
            options=[OptionSchema.from_domain(o) for o in attribute.options],
            created_at=attribute.created_at,
            modified_at=attribute.modified_at,
        )


# =============================================================================
# Category attributes
# =============================================================================


class CategoryAttributeFields(CamelModel):
    required: bool = False
    sort_order: int = 0
    filterable: Optional[bool] = None
    searchable: Optional[bool] = None
    enabled: bool = True


class CategoryAttributeAssignRequest(CategoryAttributeFields):
    id: Optional[str] = None
    attribute_id: str = ""


class CategoryAttributeUpdateRequest(CategoryAttributeFields):
    id: str
    version: int


class CategoryAttributeResponse(CamelModel):
    id: str
    version: int
    category_id: str
    attribute_id: str
    required: bool
    sort_order: int
    filterable: Optional[bool] = None
    searchable: Optional[bool] = None
    enabled: bool
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, category_attribute: CategoryAttribute) -> "CategoryAttributeResponse":
        return cls(
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


# =============================================================================
# Pagination
# =============================================================================


class PageResponse(CamelModel, Generic[T]):
    items: List[T]
    page: int
    size: int
    total: int


class AttributePageResponse(PageResponse[AttributeResponse]):
    @classmethod
    def from_page(cls, result: PageResult[Attribute]) -> "AttributePageResponse":
        return cls(
            items=[AttributeResponse.from_domain(a) for a in result.items],
            page=result.page,
            size=result.size,
            total=result.total,
        )


class CategoryAttributePageResponse(PageResponse[CategoryAttributeResponse]):
    @classmethod
    def from_page(
        cls, result: PageResult[CategoryAttribute]
    ) -> "CategoryAttributePageResponse":
        return cls(
            items=[CategoryAttributeResponse.from_domain(c) for c in result.items],
            page=result.page,
            size=result.size,
            total=result.total,
        )
