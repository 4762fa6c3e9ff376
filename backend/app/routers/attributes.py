"""
Attribute definition endpoints.

Routers only translate between HTTP and the handlers in core.services;
domain errors propagate to the handlers in error_handlers.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from core.domain import AttributeType
from core.services import (
    CreateAttributeCommand,
    CreateAttributeHandler,
    GetAttributeByIdHandler,
    GetAttributeListHandler,
    GetAttributeListQuery,
    UpdateAttributeCommand,
    UpdateAttributeHandler,
)

from ..config import get_settings
from ..dependencies import (
    get_attribute_by_id_handler,
    get_attribute_list_handler,
    get_create_attribute_handler,
    get_update_attribute_handler,
)
from ..schemas import (
    AttributeCreateRequest,
    AttributePageResponse,
    AttributeResponse,
    AttributeSortField,
    AttributeUpdateRequest,
    SortOrder,
)

settings = get_settings()

router = APIRouter(prefix="/attributes", tags=["attributes"])


@router.post("", response_model=AttributeResponse)
def create_attribute(
    request: AttributeCreateRequest,
    handler: CreateAttributeHandler = Depends(get_create_attribute_handler),
):
    """Create an attribute definition. The slug must be unique."""
    attribute = handler.handle(
        CreateAttributeCommand(
            id=request.id,
            name=request.name,
            slug=request.slug,
            type=request.type,
            unit=request.unit,
            default_filterable=request.default_filterable,
            default_searchable=request.default_searchable,
            sort_order=request.sort_order,
            enabled=request.enabled,
            options=[o.to_domain() for o in request.options],
        )
    )
    return AttributeResponse.from_domain(attribute)


@router.put("", response_model=AttributeResponse)
def update_attribute(
    request: AttributeUpdateRequest,
    handler: UpdateAttributeHandler = Depends(get_update_attribute_handler),
):
    """
    Replace an attribute's fields.

    The body carries the version the client last read; a stale version is
    rejected with 412 and nothing is written.
    """
    attribute = handler.handle(
        UpdateAttributeCommand(
            id=request.id,
            version=request.version,
            name=request.name,
            slug=request.slug,
            type=request.type,
            unit=request.unit,
            default_filterable=request.default_filterable,
            default_searchable=request.default_searchable,
            sort_order=request.sort_order,
            enabled=request.enabled,
            options=[o.to_domain() for o in request.options],
        )
    )
    return AttributeResponse.from_domain(attribute)


@router.get("", response_model=AttributePageResponse)
def list_attributes(
    page: int = Query(default=1, ge=1, le=settings.max_page),
    size: int = Query(default=settings.default_page_size, ge=1, le=settings.max_page_size),
    enabled: Optional[bool] = None,
    type: Optional[AttributeType] = None,
    sort: AttributeSortField = AttributeSortField.sortOrder,
    order: SortOrder = SortOrder.asc,
    handler: GetAttributeListHandler = Depends(get_attribute_list_handler),
):
    result = handler.handle(
        GetAttributeListQuery(
            page=page,
            size=size,
            enabled=enabled,
            type=type,
            sort=sort.value,
            order=order.value,
        )
    )
    return AttributePageResponse.from_page(result)


@router.get("/{attribute_id}", response_model=AttributeResponse)
def get_attribute(
    attribute_id: str,
    handler: GetAttributeByIdHandler = Depends(get_attribute_by_id_handler),
):
    return AttributeResponse.from_domain(handler.handle(attribute_id))
