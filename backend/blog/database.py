"""
Blog API - Database Session Management
=======================================

What:  Async SQLAlchemy engine, session factory, declarative base and the
       per-request session dependency.
How:   One engine per process; one AsyncSession per request, handed to route
       handlers through FastAPI's Depends().

Session lifetime:
    get_db_session() opens a session at request start and closes it at
    request end. It does NOT commit: each mutating service operation commits
    exactly once through CategoryRepository.save(). If the request raised,
    the session is rolled back before it is closed.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from blog.config import settings


def _engine_options() -> Dict[str, Any]:
    """Pool options for server databases; SQLite pools reject them."""
    options: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


engine = create_async_engine(settings.database_url, **_engine_options())

# Attributes stay loaded after commit (views are built from saved rows)
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all ORM models (shared metadata for Alembic)."""
    pass


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    Example:
        @router.get("/v1/categories")
        async def list_categories(db: AsyncSession = Depends(get_db_session)):
            ...

    Raises:
        Re-raises whatever the handler raised after rolling back, so the
        global exception handlers can build the response envelope.
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def dispose_engine() -> None:
    """Closes all pooled connections. Called from the lifespan on shutdown."""
    await engine.dispose()
