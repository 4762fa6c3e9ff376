"""
Attribute SQLAlchemy model.

Options are embedded as a JSON document; they have no identity of their own
and are always read and written together with the attribute.
"""

from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import JSON, Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class AttributeEntity(Base):
    """
    Stored attribute definition.

    The unique index on slug is what makes slugs globally unique; the
    aggregate only checks their shape.
    """
    __tablename__ = "attributes"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    slug: Mapped[str] = mapped_column(String(50), nullable=False, unique=True, index=True)
    type: Mapped[str] = mapped_column(String(16), nullable=False, index=True)
    unit: Mapped[Optional[str]] = mapped_column(String)
    default_filterable: Mapped[bool] = mapped_column(Boolean, default=False)
    default_searchable: Mapped[bool] = mapped_column(Boolean, default=False)
    sort_order: Mapped[int] = mapped_column(Integer, default=0, index=True)
    enabled: Mapped[bool] = mapped_column(Boolean, default=True)
    options: Mapped[Optional[List[Dict]]] = mapped_column(JSON)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    modified_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return f"<AttributeEntity id={self.id} slug={self.slug} version={self.version}>"
