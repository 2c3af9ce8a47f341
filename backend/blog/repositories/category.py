"""
Blog API - Category Repository
===============================

What:  Data-access primitives over the `categories` table.
How:   Wraps the request-scoped AsyncSession. Read methods run queries;
       add/update/remove only stage changes; save() commits them.
Who:   Constructed per call by CategoryService with the session FastAPI
       injected into the route.

Errors raised by the session (sqlalchemy.exc.SQLAlchemyError subclasses)
propagate unchanged; CategoryService decides which diagnostic code they map to.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.models.category import Category


class CategoryRepository:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list(self) -> List[Category]:
        result = await self.db.execute(select(Category).order_by(Category.id))
        return list(result.scalars().all())

    async def get_by_id(self, category_id: int) -> Optional[Category]:
        result = await self.db.execute(
            select(Category).where(Category.id == category_id)
        )
        return result.scalar_one_or_none()

    def add(self, category: Category) -> None:
        self.db.add(category)

    def update(self, category: Category) -> None:
        # Attribute changes on a persistent instance are tracked already;
        # add() is a no-op for it and re-attaches a detached one.
        self.db.add(category)

    async def remove(self, category: Category) -> None:
        await self.db.delete(category)

    async def save(self) -> None:
        """Commit staged changes. One call per mutating operation."""
        await self.db.commit()
