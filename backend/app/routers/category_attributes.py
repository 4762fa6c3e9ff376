"""
Category attribute assignment endpoints.

Assignments are always addressed through their category; an assignment ID
used under another category answers 404.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status

from core.services import (
    AssignAttributeToCategoryCommand,
    AssignAttributeToCategoryHandler,
    GetCategoryAttributeListHandler,
    GetCategoryAttributeListQuery,
    UnassignAttributeFromCategoryCommand,
    UnassignAttributeFromCategoryHandler,
    UpdateCategoryAttributeCommand,
    UpdateCategoryAttributeHandler,
)

from ..config import get_settings
from ..dependencies import (
    get_assign_attribute_handler,
    get_category_attribute_list_handler,
    get_unassign_attribute_handler,
    get_update_category_attribute_handler,
)
from ..schemas import (
    CategoryAttributeAssignRequest,
    CategoryAttributePageResponse,
    CategoryAttributeResponse,
    CategoryAttributeSortField,
    CategoryAttributeUpdateRequest,
    SortOrder,
)

settings = get_settings()

router = APIRouter(prefix="/categories/{categoryId}/attributes", tags=["category-attributes"])


@router.post("", response_model=CategoryAttributeResponse)
def assign_attribute(
    request: CategoryAttributeAssignRequest,
    category_id: str = Path(alias="categoryId"),
    handler: AssignAttributeToCategoryHandler = Depends(get_assign_attribute_handler),
):
    """Assign an existing attribute to the category. Each pair can be assigned once."""
    category_attribute = handler.handle(
        AssignAttributeToCategoryCommand(
            id=request.id,
            category_id=category_id,
            attribute_id=request.attribute_id,
            required=request.required,
            sort_order=request.sort_order,
            filterable=request.filterable,
            searchable=request.searchable,
            enabled=request.enabled,
        )
    )
    return CategoryAttributeResponse.from_domain(category_attribute)


@router.put("", response_model=CategoryAttributeResponse)
def update_category_attribute(
    request: CategoryAttributeUpdateRequest,
    category_id: str = Path(alias="categoryId"),
    handler: UpdateCategoryAttributeHandler = Depends(get_update_category_attribute_handler),
):
    category_attribute = handler.handle(
        UpdateCategoryAttributeCommand(
            id=request.id,
            category_id=category_id,
            version=request.version,
            required=request.required,
            sort_order=request.sort_order,
            filterable=request.filterable,
            searchable=request.searchable,
            enabled=request.enabled,
        )
    )
    return CategoryAttributeResponse.from_domain(category_attribute)


@router.get("", response_model=CategoryAttributePageResponse)
def list_category_attributes(
    category_id: str = Path(alias="categoryId"),
    page: int = Query(default=1, ge=1, le=settings.max_page),
    size: int = Query(default=settings.default_page_size, ge=1, le=settings.max_page_size),
    enabled: Optional[bool] = None,
    filterable: Optional[bool] = None,
    sort: CategoryAttributeSortField = CategoryAttributeSortField.sortOrder,
    order: SortOrder = SortOrder.asc,
    handler: GetCategoryAttributeListHandler = Depends(get_category_attribute_list_handler),
):
    """List the category's assignments. ``filterable`` matches explicit overrides only."""
    result = handler.handle(
        GetCategoryAttributeListQuery(
            category_id=category_id,
            page=page,
            size=size,
            enabled=enabled,
            filterable=filterable,
            sort=sort.value,
            order=order.value,
        )
    )
    return CategoryAttributePageResponse.from_page(result)


@router.delete("/{assignmentId}", status_code=status.HTTP_204_NO_CONTENT)
def unassign_attribute(
    category_id: str = Path(alias="categoryId"),
    assignment_id: str = Path(alias="assignmentId"),
    handler: UnassignAttributeFromCategoryHandler = Depends(get_unassign_attribute_handler),
):
    handler.handle(
        UnassignAttributeFromCategoryCommand(id=assignment_id, category_id=category_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
