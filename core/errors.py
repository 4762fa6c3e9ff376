"""
Domain errors.

Every error the core raises on purpose derives from DomainError and carries
a stable ``code`` that the HTTP layer maps to a status. Anything else that
escapes a handler is unexpected and becomes a 500.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base exception for all domain errors."""

    code = "DOMAIN_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.details = details or {}


class ValidationError(DomainError):
    """Raised when an aggregate rejects its input. Never worth retrying."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details={"field": field} if field else {})
        self.field = field


class NotFoundError(DomainError):
    """Raised when an entity, or an entity it references, does not exist."""

    code = "NOT_FOUND"

    def __init__(self, entity_type: str, entity_id: Any):
        super().__init__(
            f"{entity_type} with id '{entity_id}' not found",
            details={"entity_type": entity_type, "entity_id": str(entity_id)},
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class OptimisticLockError(DomainError):
    """Raised when the stored version no longer matches the caller's version."""

    code = "VERSION_CONFLICT"

    def __init__(self, entity_type: str, entity_id: Any, expected_version: int):
        super().__init__(
            f"{entity_type} '{entity_id}' was modified concurrently",
            details={
                "entity_type": entity_type,
                "entity_id": str(entity_id),
                "expected_version": expected_version,
            },
        )
        self.expected_version = expected_version


class UniquenessConflictError(DomainError):
    """Raised when a write collides with a unique key in the store."""

    code = "UNIQUENESS_CONFLICT"


class SlugAlreadyExistsError(UniquenessConflictError):
    """Raised when another attribute already uses the slug."""

    code = "SLUG_ALREADY_EXISTS"

    def __init__(self, slug: str):
        super().__init__(
            f"Attribute with slug '{slug}' already exists",
            details={"slug": slug},
        )
        self.slug = slug


class AlreadyAssignedError(UniquenessConflictError):
    """Raised when the attribute is already assigned to the category."""

    code = "ALREADY_ASSIGNED"

    def __init__(self, category_id: str, attribute_id: str):
        super().__init__(
            f"Attribute '{attribute_id}' is already assigned to category '{category_id}'",
            details={"category_id": category_id, "attribute_id": attribute_id},
        )


class RepositoryError(DomainError):
    """Unexpected persistence failure. Chained to the driver exception."""

    code = "REPOSITORY_ERROR"

    def __init__(self, operation: str):
        super().__init__(f"Failed to {operation}", details={"operation": operation})
        self.operation = operation


__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "OptimisticLockError",
    "UniquenessConflictError",
    "SlugAlreadyExistsError",
    "AlreadyAssignedError",
    "RepositoryError",
]
