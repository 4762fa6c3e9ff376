"""
CategoryAttribute SQLAlchemy model.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class CategoryAttributeEntity(Base):
    """
    Stored assignment of an attribute to a category.

    attribute_id is not a foreign key: the reference is checked when the
    assignment is created and not enforced afterwards.
    """
    __tablename__ = "category_attributes"
    __table_args__ = (
        UniqueConstraint(
            "category_id", "attribute_id", name="uq_category_attributes_category_attribute"
        ),
    )

    id: Mapped[str] = mapped_column(String, primary_key=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    category_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    attribute_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    required: Mapped[bool] = mapped_column(Boolean, default=False)
    sort_order: Mapped[int] = mapped_column(Integer, default=0)
    # NULL means "inherit the attribute default"
    filterable: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    searchable: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    enabled: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    modified_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return (
            f"<CategoryAttributeEntity id={self.id} category_id={self.category_id} "
            f"attribute_id={self.attribute_id} version={self.version}>"
        )
