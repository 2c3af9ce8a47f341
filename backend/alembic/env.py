"""
Alembic migration environment for the Blog API.

The database URL always comes from blog.config.settings (DATABASE_URL), not
from alembic.ini. Online migrations run through the async engine; offline
mode emits SQL to stdout.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from blog.config import settings
from blog.database import Base
from blog.models.category import Category  # noqa: F401  (registers the table)

# Alembic Config object: access to values in alembic.ini
config = context.config
# Same URL the app uses, so migrations and runtime never disagree
config.set_main_option("sqlalchemy.url", settings.database_url)

# Logging setup from the [loggers] sections of alembic.ini
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Autogenerate diffs the models registered on this metadata against the DB
target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Emit SQL without a connection (alembic upgrade --sql)."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_sync_migrations(connection: Connection) -> None:
    # Alembic's migration context is sync; run_sync bridges the async connection
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Run migrations against the live database through an async engine."""
    # NullPool: a one-shot CLI process has no use for pooled connections
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    async with engine.connect() as connection:
        await connection.run_sync(_run_sync_migrations)
    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
