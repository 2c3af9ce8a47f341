"""Create categories table

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

Creates `categories` (id, name, slug) with a unique index on slug.
Downgrade drops the table and every category in it.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(80), nullable=False, comment="Display name"),
        sa.Column("slug", sa.String(80), nullable=False, comment="Lowercase URL identifier"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_categories_slug", "categories", ["slug"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_categories_slug", table_name="categories")
    op.drop_table("categories")
