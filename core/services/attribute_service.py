"""
Attribute command and query handlers.

Each handler orchestrates one use case: build or load the aggregate, let it
validate, and persist through the repository port.

Usage:
    from core.repositories import AttributeRepository
    from core.services import CreateAttributeCommand, CreateAttributeHandler

    with db.session() as session:
        handler = CreateAttributeHandler(AttributeRepository(session))
        attribute = handler.handle(CreateAttributeCommand(name="Color", slug="color", type="select"))
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from core.domain import (
    Attribute,
    AttributeListQuery,
    AttributeRepository,
    AttributeType,
    Option,
    PageResult,
)
from core.domain.clock import new_id, utcnow
from core.domain.repositories import DEFAULT_SORT, SORT_ASC
from core.errors import OptimisticLockError
from core.logging import get_logger

logger = get_logger("service.attribute")


@dataclass
class CreateAttributeCommand:
    name: str
    slug: str
    type: str
    id: Optional[str] = None
    unit: Optional[str] = None
    default_filterable: bool = False
    default_searchable: bool = False
    sort_order: int = 0
    enabled: bool = True
    options: List[Option] = field(default_factory=list)


@dataclass
class UpdateAttributeCommand:
    id: str
    version: int
    name: str
    slug: str
    type: str
    unit: Optional[str] = None
    default_filterable: bool = False
    default_searchable: bool = False
    sort_order: int = 0
    enabled: bool = True
    options: List[Option] = field(default_factory=list)


@dataclass
class GetAttributeListQuery:
    page: int = 1
    size: int = 20
    enabled: Optional[bool] = None
    type: Optional[AttributeType] = None
    sort: Optional[str] = None
    order: Optional[str] = None


class CreateAttributeHandler:
    def __init__(
        self,
        repository: AttributeRepository,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.repository = repository
        self.id_factory = id_factory
        self.clock = clock

    def handle(self, cmd: CreateAttributeCommand) -> Attribute:
        """Create and store a new attribute. Raises ValidationError or SlugAlreadyExistsError."""
        attribute = Attribute.create(
            name=cmd.name,
            slug=cmd.slug,
            type=cmd.type,
            unit=cmd.unit,
            default_filterable=cmd.default_filterable,
            default_searchable=cmd.default_searchable,
            sort_order=cmd.sort_order,
            enabled=cmd.enabled,
            options=cmd.options,
            id=cmd.id or self.id_factory(),
            now=self.clock(),
        )
        self.repository.insert(attribute)

        logger.info("attribute_created", attribute_id=attribute.id, slug=attribute.slug)
        return attribute


class UpdateAttributeHandler:
    """
    Versioned attribute update.

    The version is checked against the loaded copy before any write, then
    again by the repository's conditional UPDATE, which catches a writer
    that committed between the read and the write.
    """

    def __init__(
        self,
        repository: AttributeRepository,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.repository = repository
        self.clock = clock

    def handle(self, cmd: UpdateAttributeCommand) -> Attribute:
        attribute = self.repository.find_by_id(cmd.id)

        if attribute.version != cmd.version:
            logger.warning(
                "attribute_version_conflict",
                attribute_id=cmd.id,
                expected_version=cmd.version,
                stored_version=attribute.version,
            )
            raise OptimisticLockError("Attribute", cmd.id, cmd.version)

        attribute.update(
            name=cmd.name,
            slug=cmd.slug,
            type=cmd.type,
            unit=cmd.unit,
            default_filterable=cmd.default_filterable,
            default_searchable=cmd.default_searchable,
            sort_order=cmd.sort_order,
            enabled=cmd.enabled,
            options=cmd.options,
            now=self.clock(),
        )

        try:
            updated = self.repository.update(attribute)
        except OptimisticLockError:
            logger.warning(
                "attribute_concurrent_update", attribute_id=cmd.id, expected_version=cmd.version
            )
            raise

        logger.info("attribute_updated", attribute_id=updated.id, version=updated.version)
        return updated


class GetAttributeByIdHandler:
    def __init__(self, repository: AttributeRepository):
        self.repository = repository

    def handle(self, attribute_id: str) -> Attribute:
        return self.repository.find_by_id(attribute_id)


class GetAttributeListHandler:
    def __init__(self, repository: AttributeRepository):
        self.repository = repository

    def handle(self, query: GetAttributeListQuery) -> PageResult[Attribute]:
        return self.repository.find_list(
            AttributeListQuery(
                page=query.page,
                size=query.size,
                enabled=query.enabled,
                type=query.type,
                sort=query.sort or DEFAULT_SORT,
                order=query.order or SORT_ASC,
            )
        )
