"""initial schema

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa


revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "attributes",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("slug", sa.String(length=50), nullable=False),
        sa.Column("type", sa.String(length=16), nullable=False),
        sa.Column("unit", sa.String()),
        sa.Column("default_filterable", sa.Boolean(), server_default=sa.false()),
        sa.Column("default_searchable", sa.Boolean(), server_default=sa.false()),
        sa.Column("sort_order", sa.Integer(), server_default="0"),
        sa.Column("enabled", sa.Boolean(), server_default=sa.true()),
        sa.Column("options", sa.JSON()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("modified_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_attributes_slug", "attributes", ["slug"], unique=True)
    op.create_index("ix_attributes_type", "attributes", ["type"])
    op.create_index("ix_attributes_sort_order", "attributes", ["sort_order"])

    op.create_table(
        "category_attributes",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("category_id", sa.String(), nullable=False),
        sa.Column("attribute_id", sa.String(), nullable=False),
        sa.Column("required", sa.Boolean(), server_default=sa.false()),
        sa.Column("sort_order", sa.Integer(), server_default="0"),
        sa.Column("filterable", sa.Boolean(), nullable=True),
        sa.Column("searchable", sa.Boolean(), nullable=True),
        sa.Column("enabled", sa.Boolean(), server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("modified_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint(
            "category_id", "attribute_id", name="uq_category_attributes_category_attribute"
        ),
    )
    op.create_index(
        "ix_category_attributes_category_id", "category_attributes", ["category_id"]
    )
    op.create_index(
        "ix_category_attributes_attribute_id", "category_attributes", ["attribute_id"]
    )


def downgrade() -> None:
    op.drop_index("ix_category_attributes_attribute_id", table_name="category_attributes")
    op.drop_index("ix_category_attributes_category_id", table_name="category_attributes")
    op.drop_table("category_attributes")

    op.drop_index("ix_attributes_sort_order", table_name="attributes")
    op.drop_index("ix_attributes_type", table_name="attributes")
    op.drop_index("ix_attributes_slug", table_name="attributes")
    op.drop_table("attributes")
