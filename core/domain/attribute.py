"""
Attribute aggregate.

An attribute is a reusable product characteristic (color, size, material)
that categories can later pick up through CategoryAttribute assignments.
Select-like attributes carry an ordered list of options.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Iterable, List, Optional

from core.errors import ValidationError

from .clock import new_id, utcnow

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

NAME_MAX_LENGTH = 100
SLUG_MAX_LENGTH = 50
OPTION_VALUE_MAX_LENGTH = 100


class AttributeType(str, Enum):
    """Kind of values an attribute accepts."""
    SELECT = "select"
    MULTISELECT = "multiselect"
    RANGE = "range"
    BOOLEAN = "boolean"
    TEXT = "text"


@dataclass(frozen=True)
class Option:
    """One selectable value of an attribute."""
    value: str
    slug: str
    color_code: Optional[str] = None
    sort_order: int = 0
    enabled: bool = True


@dataclass(eq=True)
class Attribute:
    """
    Aggregate root for attribute definitions.

    Build new instances with ``Attribute.create`` (validates, version 1) and
    load stored ones with ``Attribute.reconstruct`` (trusted, no validation).
    The only mutation path is ``update``, which is all-or-nothing.
    """

    id: str
    version: int
    name: str
    slug: str
    type: AttributeType
    unit: Optional[str]
    default_filterable: bool
    default_searchable: bool
    sort_order: int
    enabled: bool
    options: List[Option] = field(default_factory=list)
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        name: str,
        slug: str,
        type: AttributeType | str,
        unit: Optional[str] = None,
        default_filterable: bool = False,
        default_searchable: bool = False,
        sort_order: int = 0,
        enabled: bool = True,
        options: Optional[Iterable[Option]] = None,
        id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> "Attribute":
        """Validate input and build a fresh attribute. Generates an ID when none is given."""
        option_list = list(options or [])
        attr_type = _validate(name, slug, type, sort_order, option_list)

        now = now or utcnow()
        return cls(
            id=id or new_id(),
            version=1,
            name=name,
            slug=slug,
            type=attr_type,
            unit=unit,
            default_filterable=default_filterable,
            default_searchable=default_searchable,
            sort_order=sort_order,
            enabled=enabled,
            options=option_list,
            created_at=now,
            modified_at=now,
        )

    @classmethod
    def reconstruct(
        cls,
        id: str,
        version: int,
        name: str,
        slug: str,
        type: AttributeType | str,
        unit: Optional[str],
        default_filterable: bool,
        default_searchable: bool,
        sort_order: int,
        enabled: bool,
        options: Optional[Iterable[Option]],
        created_at: datetime,
        modified_at: datetime,
    ) -> "Attribute":
        """Rebuild an attribute from persisted state."""
        return cls(
            id=id,
            version=version,
            name=name,
            slug=slug,
            type=AttributeType(type),
            unit=unit,
            default_filterable=default_filterable,
            default_searchable=default_searchable,
            sort_order=sort_order,
            enabled=enabled,
            options=list(options or []),
            created_at=created_at,
            modified_at=modified_at,
        )

    def update(
        self,
        name: str,
        slug: str,
        type: AttributeType | str,
        unit: Optional[str],
        default_filterable: bool,
        default_searchable: bool,
        sort_order: int,
        enabled: bool,
        options: Optional[Iterable[Option]] = None,
        now: Optional[datetime] = None,
    ) -> None:
        """
        Replace every mutable field.

        Validation runs before any assignment, so a rejected update leaves
        the aggregate exactly as it was. The version is bumped by the
        repository on a successful write, not here.
        """
        option_list = list(options or [])
        attr_type = _validate(name, slug, type, sort_order, option_list)

        self.name = name
        self.slug = slug
        self.type = attr_type
        self.unit = unit
        self.default_filterable = default_filterable
        self.default_searchable = default_searchable
        self.sort_order = sort_order
        self.enabled = enabled
        self.options = option_list
        self.modified_at = now or utcnow()


def is_valid_slug(slug: str) -> bool:
    return SLUG_PATTERN.fullmatch(slug) is not None


def _validate(
    name: str,
    slug: str,
    attr_type: AttributeType | str,
    sort_order: int,
    options: List[Option],
) -> AttributeType:
    """Check business rules in order. The first failure wins."""
    if not name:
        raise ValidationError("name is required", "name")
    if len(name) > NAME_MAX_LENGTH:
        raise ValidationError(f"name is too long (max {NAME_MAX_LENGTH} characters)", "name")

    _validate_slug(slug, "slug")

    try:
        resolved_type = AttributeType(attr_type)
    except ValueError:
        raise ValidationError("invalid attribute type", "type") from None

    if sort_order < 0:
        raise ValidationError("sortOrder cannot be negative", "sortOrder")

    _validate_options(options)
    return resolved_type


def _validate_slug(slug: str, field_name: str) -> None:
    if not slug:
        raise ValidationError(f"{field_name} is required", field_name)
    if len(slug) > SLUG_MAX_LENGTH:
        raise ValidationError(
            f"{field_name} is too long (max {SLUG_MAX_LENGTH} characters)", field_name
        )
    if not is_valid_slug(slug):
        raise ValidationError(
            f"{field_name} must contain only lowercase letters, numbers, and hyphens",
            field_name,
        )


def _validate_options(options: List[Option]) -> None:
    seen_slugs = set()
    for index, option in enumerate(options):
        prefix = f"options[{index}]"
        if not option.value:
            raise ValidationError(f"{prefix}.value is required", f"{prefix}.value")
        if len(option.value) > OPTION_VALUE_MAX_LENGTH:
            raise ValidationError(
                f"{prefix}.value is too long (max {OPTION_VALUE_MAX_LENGTH} characters)",
                f"{prefix}.value",
            )
        _validate_slug(option.slug, f"{prefix}.slug")
        if option.slug in seen_slugs:
            raise ValidationError(
                f"duplicate option slug '{option.slug}'", f"{prefix}.slug"
            )
        seen_slugs.add(option.slug)
        if option.sort_order < 0:
            raise ValidationError(
                f"{prefix}.sortOrder cannot be negative", f"{prefix}.sortOrder"
            )


__all__ = [
    "Attribute",
    "AttributeType",
    "Option",
    "SLUG_PATTERN",
    "is_valid_slug",
]
