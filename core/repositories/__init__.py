"""
Repository implementations for data access.

Repositories hide SQLAlchemy behind the ports in core.domain.repositories
and translate driver errors into core.errors.

Usage:
    from core.repositories import AttributeRepository
    from core.db import db

    with db.session() as session:
        repo = AttributeRepository(session)
        attribute = repo.find_by_id(attribute_id)
"""

from .attribute_repository import AttributeRepository
from .base import BaseRepository
from .category_attribute_repository import CategoryAttributeRepository

__all__ = [
    "BaseRepository",
    "AttributeRepository",
    "CategoryAttributeRepository",
]
