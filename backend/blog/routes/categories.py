"""
Blog API - Category Route Handlers
===================================

What:  CRUD endpoints under /v1/categories.
How:   Binds path/body input, delegates to CategoryService and wraps the
       result in a ResultEnvelope. Errors raised by the service are turned
       into error envelopes by the handlers registered in main.py.

Status codes:
    200  list / get / update / delete succeeded
    201  create succeeded (Location header points at the new resource)
    400  editor validation or request binding failed
    404  no category with that id
    500  store write or internal failure (message carries a diagnostic code)
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.ext.asyncio import AsyncSession

from blog.database import get_db_session
from blog.schemas.category import CategoryView, EditorCategory, ResultEnvelope
from blog.services.category_service import category_service


router = APIRouter(prefix="/v1/categories", tags=["Categories"])

ERROR_RESPONSES = {
    400: {"description": "Invalid input", "model": ResultEnvelope[CategoryView]},
    404: {"description": "Category not found", "model": ResultEnvelope[CategoryView]},
    500: {"description": "Server error", "model": ResultEnvelope[CategoryView]},
}


@router.get(
    "",
    response_model=ResultEnvelope[List[CategoryView]],
    responses={500: ERROR_RESPONSES[500]},
    summary="List categories",
)
async def list_categories(
    db: AsyncSession = Depends(get_db_session),
) -> ResultEnvelope[List[CategoryView]]:
    categories = await category_service.list_categories(db)
    return ResultEnvelope[List[CategoryView]].success(categories)


@router.get(
    "/{category_id}",
    response_model=ResultEnvelope[CategoryView],
    responses=ERROR_RESPONSES,
    summary="Get a single category by id",
)
async def get_category(
    category_id: int = Path(description="Category id"),
    db: AsyncSession = Depends(get_db_session),
) -> ResultEnvelope[CategoryView]:
    category = await category_service.get_category(db, category_id)
    return ResultEnvelope[CategoryView].success(category)


@router.post(
    "",
    status_code=201,
    response_model=ResultEnvelope[CategoryView],
    responses={400: ERROR_RESPONSES[400], 500: ERROR_RESPONSES[500]},
    summary="Create a category",
    description="Creates a category. The slug is stored lowercase.",
)
async def create_category(
    editor: EditorCategory,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> ResultEnvelope[CategoryView]:
    category = await category_service.create_category(db, editor)
    response.headers["Location"] = f"{router.prefix}/{category.id}"
    return ResultEnvelope[CategoryView].success(category)


@router.put(
    "/{category_id}",
    response_model=ResultEnvelope[CategoryView],
    responses=ERROR_RESPONSES,
    summary="Update a category",
    description="Replaces name and slug of an existing category. The id never changes.",
)
async def update_category(
    editor: EditorCategory,
    category_id: int = Path(description="Category id"),
    db: AsyncSession = Depends(get_db_session),
) -> ResultEnvelope[CategoryView]:
    category = await category_service.update_category(db, category_id, editor)
    return ResultEnvelope[CategoryView].success(category)


@router.delete(
    "/{category_id}",
    response_model=ResultEnvelope[CategoryView],
    responses=ERROR_RESPONSES,
    summary="Delete a category",
    description="Deletes a category and returns its state from before the delete.",
)
async def delete_category(
    category_id: int = Path(description="Category id"),
    db: AsyncSession = Depends(get_db_session),
) -> ResultEnvelope[CategoryView]:
    category = await category_service.delete_category(db, category_id)
    return ResultEnvelope[CategoryView].success(category)
