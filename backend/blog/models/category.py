"""
Blog API - Category SQLAlchemy Model
=====================================

What:  ORM model for the `categories` table.
Who:   Used by CategoryRepository for CRUD and by Alembic for migrations.

Table Design:
    - Integer primary key assigned by the database (autoincrement)
    - name: 3-40 characters enforced at the API boundary; column allows 80
    - slug: stored lowercase, unique across categories
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from blog.database import Base


class Category(Base):
    """
    A blog post category.

    Lifecycle:
        1. Created by POST /v1/categories
        2. name/slug replaced in place by PUT /v1/categories/{id}
        3. Removed by DELETE /v1/categories/{id} (hard delete)
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(
        String(80),
        nullable=False,
        comment="Display name",
    )

    # Unique index: duplicate slugs surface as IntegrityError on commit
    slug: Mapped[str] = mapped_column(
        String(80),
        nullable=False,
        unique=True,
        index=True,
        comment="Lowercase URL identifier",
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, slug='{self.slug}')>"
