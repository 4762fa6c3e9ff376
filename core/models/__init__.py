"""
SQLAlchemy models for the Attribute Service.

Usage:
    from core.models import AttributeEntity, CategoryAttributeEntity
"""

from .attribute import AttributeEntity
from .base import Base
from .category_attribute import CategoryAttributeEntity

__all__ = [
    "Base",
    "AttributeEntity",
    "CategoryAttributeEntity",
]
