"""Alembic environment for the moderation service.

The URL always comes from bazaar Settings, so migrations and the running
service target the same database. Offline mode renders SQL for that URL.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from bazaar.config import get_settings
from bazaar.db.base import Base
import bazaar.models  # noqa: F401  (populates Base.metadata)

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)

DATABASE_URL = get_settings().database_url


def _migrate(connection=None) -> None:
    if connection is None:
        context.configure(url=DATABASE_URL, target_metadata=Base.metadata, literal_binds=True)
    else:
        context.configure(connection=connection, target_metadata=Base.metadata)
    with context.begin_transaction():
        context.run_migrations()


async def _migrate_online() -> None:
    engine = create_async_engine(DATABASE_URL, poolclass=NullPool)
    async with engine.connect() as connection:
        await connection.run_sync(_migrate)
    await engine.dispose()


if context.is_offline_mode():
    _migrate()
else:
    asyncio.run(_migrate_online())
