"""Base repository class with the persistence mechanics shared by both aggregates."""

from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, func, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from core.db import Base
from core.errors import (
    DomainError,
    NotFoundError,
    OptimisticLockError,
    RepositoryError,
    ValidationError,
)
from core.logging import db_logger

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """
    Base repository providing versioned CRUD over one entity model.

    Usage:
        class AttributeRepository(BaseRepository[AttributeEntity]):
            model = AttributeEntity
            entity_name = "Attribute"

        repo = AttributeRepository(session)
        entity = repo.get_entity("...")

    Repositories only flush. Committing is left to whoever owns the session
    (``core.db.get_db`` per HTTP request).
    """

    model: type[T]
    entity_name: str = "Entity"
    sort_columns: Mapping[str, Any] = {}

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def _translate_errors(
        self,
        operation: str,
        on_conflict: Callable[[], DomainError] | None = None,
    ) -> Iterator[None]:
        """
        Turn driver exceptions into domain errors.

        Integrity violations roll the session back and become ``on_conflict()``
        when given. Every other database failure, including values the driver
        cannot bind, becomes RepositoryError chained to the original exception.
        """
        try:
            yield
        except IntegrityError as exc:
            self.session.rollback()
            if on_conflict is None:
                db_logger.error("integrity_error", operation=operation, error=str(exc.orig))
                raise RepositoryError(operation) from exc
            raise on_conflict() from exc
        except (SQLAlchemyError, OverflowError) as exc:
            db_logger.error(
                "repository_error",
                operation=operation,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise RepositoryError(operation) from exc

    def get_entity(self, id: str) -> T:
        """Get a single record by ID or raise NotFoundError."""
        with self._translate_errors(f"get {self.entity_name.lower()}"):
            instance = self.session.get(self.model, id)
        if instance is None:
            raise NotFoundError(self.entity_name, id)
        return instance

    def exists(self, id: str) -> bool:
        """Check if a record exists."""
        with self._translate_errors(f"check {self.entity_name.lower()} existence"):
            result = self.session.query(
                self.session.query(self.model).filter(self.model.id == id).exists()  # type: ignore[attr-defined]
            ).scalar()
        return bool(result) if result is not None else False

    def add_entity(
        self, instance: T, on_conflict: Callable[[], DomainError] | None = None
    ) -> None:
        """Insert a new record."""
        with self._translate_errors(f"insert {self.entity_name.lower()}", on_conflict):
            self.session.add(instance)
            self.session.flush()

    def compare_and_swap(
        self,
        id: str,
        expected_version: int,
        values: dict[str, Any],
        on_conflict: Callable[[], DomainError] | None = None,
    ) -> int:
        """
        Write ``values`` only if the stored version still equals ``expected_version``.

        The check and the write are one UPDATE statement, so two writers that
        read the same version cannot both succeed. Returns the new version.
        """
        new_version = expected_version + 1
        stmt = (
            update(self.model)
            .where(
                self.model.id == id,  # type: ignore[attr-defined]
                self.model.version == expected_version,  # type: ignore[attr-defined]
            )
            .values(**values, version=new_version)
        )
        with self._translate_errors(f"update {self.entity_name.lower()}", on_conflict):
            result = self.session.execute(stmt)
            self.session.flush()

        if result.rowcount == 1:
            return new_version
        if self.exists(id):
            raise OptimisticLockError(self.entity_name, id, expected_version)
        raise NotFoundError(self.entity_name, id)

    def delete_entity(self, id: str) -> None:
        """Delete a record by ID or raise NotFoundError."""
        with self._translate_errors(f"delete {self.entity_name.lower()}"):
            result = self.session.execute(
                delete(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
            )
            self.session.flush()
        if result.rowcount == 0:
            raise NotFoundError(self.entity_name, id)

    def find_page(
        self,
        conditions: list,
        sort: str,
        order: str,
        page: int,
        size: int,
    ) -> tuple[list[T], int]:
        """
        Run a filtered, sorted, paginated query.

        ``page`` is 1-based. Rows with equal sort keys are ordered by id so
        consecutive pages never overlap.

        Returns:
            Tuple of (entities on the page, total matching count)
        """
        sort_column = self.sort_columns.get(sort)
        if sort_column is None:
            raise ValidationError(f"unsupported sort field '{sort}'", "sort")
        if order not in ("asc", "desc"):
            raise ValidationError(f"unsupported sort order '{order}'", "order")

        ordering = sort_column.desc() if order == "desc" else sort_column.asc()
        id_column = self.model.id  # type: ignore[attr-defined]

        with self._translate_errors(f"list {self.entity_name.lower()}"):
            total = (
                self.session.query(func.count(id_column)).filter(*conditions).scalar() or 0
            )
            items = (
                self.session.query(self.model)
                .filter(*conditions)
                .order_by(ordering, id_column.asc())
                .offset((page - 1) * size)
                .limit(size)
                .all()
            )
        return items, total
