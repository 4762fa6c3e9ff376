"""
Tests for the error taxonomy and its HTTP mapping.
"""

import pytest

from backend.app.error_handlers import status_for
from core.errors import (
    AlreadyAssignedError,
    DomainError,
    NotFoundError,
    OptimisticLockError,
    RepositoryError,
    SlugAlreadyExistsError,
    UniquenessConflictError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error,status_code",
    [
        (ValidationError("name is required", "name"), 400),
        (NotFoundError("Attribute", "a1"), 404),
        (OptimisticLockError("Attribute", "a1", 3), 412),
        (SlugAlreadyExistsError("color"), 409),
        (AlreadyAssignedError("shoes", "a1"), 409),
        (RepositoryError("insert attribute"), 500),
        (DomainError("something else"), 500),
    ],
)
def test_status_mapping(error, status_code):
    assert status_for(error) == status_code


def test_conflicts_share_a_base():
    assert isinstance(SlugAlreadyExistsError("color"), UniquenessConflictError)
    assert isinstance(AlreadyAssignedError("shoes", "a1"), UniquenessConflictError)


def test_error_details():
    error = OptimisticLockError("CategoryAttribute", "ca-1", 2)

    assert error.code == "VERSION_CONFLICT"
    assert error.details == {
        "entity_type": "CategoryAttribute",
        "entity_id": "ca-1",
        "expected_version": 2,
    }


def test_repository_error_message():
    assert RepositoryError("update attribute").message == "Failed to update attribute"
