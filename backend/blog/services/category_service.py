"""
Blog API - Category Service (Business Logic)
=============================================

What:  The five category operations behind /v1/categories.
How:   Receives the request-scoped session explicitly, validates editor
       input before touching the store, talks to CategoryRepository and
       translates every failure into the application exception hierarchy.
Who:   Called by the routes in blog.routes.categories.

Failure mapping (each 500 site has its own code):

    operation   not found   store write (save)                      other
    ─────────   ─────────   ──────────────────────────────────────  ─────
    list        -           -                                       05X04
    get         404         -                                       05X05
    create      -           05XE9 Não foi possível incluir ...      05X10
    update      404         05XE8 Não foi possível alterar ...      05X11
    delete      404         05XE7 Não foi possível excluir ...      05X12

All operations are single-attempt; nothing is retried.
"""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blog.exceptions import (
    BlogError,
    InternalServerError,
    NotFoundError,
    StoreWriteError,
    ValidationError,
)
from blog.models.category import Category
from blog.repositories.category import CategoryRepository
from blog.schemas.category import CategoryView, EditorCategory
from blog.validation import extract_error_messages, validate_editor

logger = logging.getLogger(__name__)


class CategoryService:
    """
    Stateless service; a single module-level instance is shared.

    Error Handling Strategy:
        Application exceptions (BlogError subclasses) propagate as raised.
        SQLAlchemy errors from save() become StoreWriteError; any other
        exception becomes InternalServerError with the operation's code.
        The caught exception's type goes into `context` for the logs.
    """

    async def list_categories(self, db: AsyncSession) -> List[CategoryView]:
        try:
            categories = await CategoryRepository(db).list()
            return [CategoryView.model_validate(category) for category in categories]
        except Exception as e:
            logger.error("Error listing categories: %s", str(e), exc_info=True)
            raise InternalServerError(
                code="05X04",
                context={"error_type": type(e).__name__},
            ) from e

    async def get_category(self, db: AsyncSession, category_id: int) -> CategoryView:
        """
        Raises:
            NotFoundError: No category with this id (→ 404)
            InternalServerError: Query failed (→ 500, 05X05)
        """
        try:
            category = await CategoryRepository(db).get_by_id(category_id)
        except Exception as e:
            logger.error("Error fetching category %s: %s", category_id, str(e), exc_info=True)
            raise InternalServerError(
                code="05X05",
                context={"category_id": category_id, "error_type": type(e).__name__},
            ) from e

        if category is None:
            raise NotFoundError(resource="category", resource_id=category_id)
        return CategoryView.model_validate(category)

    async def create_category(self, db: AsyncSession, editor: EditorCategory) -> CategoryView:
        """
        Validate, insert and commit a new category.

        The slug is stored lowercase; the id is assigned by the database
        during the commit.

        Raises:
            ValidationError: Editor failed validation (nothing is written)
            StoreWriteError: Commit failed, e.g. duplicate slug (05XE9)
            InternalServerError: Anything else (05X10)
        """
        self._ensure_valid(editor)
        repository = CategoryRepository(db)

        try:
            category = Category(name=editor.name, slug=editor.slug.lower())
            repository.add(category)
            await self._save(
                repository,
                code="05XE9",
                message="Não foi possível incluir a categoria",
                context={"slug": category.slug},
            )
            logger.info("Category %s created (slug=%s)", category.id, category.slug)
            return CategoryView.model_validate(category)
        except BlogError:
            raise
        except Exception as e:
            logger.error("Unexpected error creating category: %s", str(e), exc_info=True)
            raise InternalServerError(
                code="05X10",
                context={"error_type": type(e).__name__},
            ) from e

    async def update_category(
        self,
        db: AsyncSession,
        category_id: int,
        editor: EditorCategory,
    ) -> CategoryView:
        """
        Replace name and slug of an existing category. The id never changes.

        Validation runs before the lookup, so invalid input on an unknown id
        is reported as 400, not 404.
        """
        self._ensure_valid(editor)
        repository = CategoryRepository(db)

        try:
            category = await repository.get_by_id(category_id)
            if category is None:
                raise NotFoundError(resource="category", resource_id=category_id)

            category.name = editor.name
            category.slug = editor.slug.lower()
            repository.update(category)
            await self._save(
                repository,
                code="05XE8",
                message="Não foi possível alterar a categoria",
                context={"category_id": category_id, "slug": category.slug},
            )
            logger.info("Category %s updated (slug=%s)", category.id, category.slug)
            return CategoryView.model_validate(category)
        except BlogError:
            raise
        except Exception as e:
            logger.error("Unexpected error updating category %s: %s", category_id, str(e), exc_info=True)
            raise InternalServerError(
                code="05X11",
                context={"category_id": category_id, "error_type": type(e).__name__},
            ) from e

    async def delete_category(self, db: AsyncSession, category_id: int) -> CategoryView:
        """Remove a category and return its state from before the delete."""
        repository = CategoryRepository(db)

        try:
            category = await repository.get_by_id(category_id)
            if category is None:
                raise NotFoundError(resource="category", resource_id=category_id)

            deleted = CategoryView.model_validate(category)
            await repository.remove(category)
            await self._save(
                repository,
                code="05XE7",
                message="Não foi possível excluir a categoria",
                context={"category_id": category_id},
            )
            logger.info("Category %s deleted", category_id)
            return deleted
        except BlogError:
            raise
        except Exception as e:
            logger.error("Unexpected error deleting category %s: %s", category_id, str(e), exc_info=True)
            raise InternalServerError(
                code="05X12",
                context={"category_id": category_id, "error_type": type(e).__name__},
            ) from e

    # ── Helpers ───────────────────────────────────────────────────────────

    @staticmethod
    def _ensure_valid(editor: EditorCategory) -> None:
        failures = validate_editor(editor)
        if failures:
            raise ValidationError(
                messages=extract_error_messages(failures),
                context={"fields": [failure["loc"][-1] for failure in failures]},
            )

    @staticmethod
    async def _save(repository: CategoryRepository, code: str, message: str, context: dict) -> None:
        try:
            await repository.save()
        except SQLAlchemyError as e:
            logger.error("Store write failed [%s]: %s", code, str(e))
            context["error_type"] = type(e).__name__
            raise StoreWriteError(code=code, message=message, context=context) from e


category_service = CategoryService()
