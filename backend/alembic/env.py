"""
Alembic Migration Environment
===============================

What:  Runs migrations through the application's own async engine.
Why:   Migrations then see exactly the database, driver and pool settings
       the app uses; DATABASE_URL is the only place the URL is configured.
How:   Online mode borrows app.database.engine and bridges into Alembic's
       sync API with connection.run_sync(). Offline mode (`alembic upgrade
       head --sql`) renders SQL for the configured dialect without connecting.
"""

import asyncio
from logging.config import fileConfig

from alembic import context

from app.config import settings
from app.database import Base, engine

# Alembic only sees models that are imported and registered with Base
from app.models.bird import Bird  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def _configure(**kwargs) -> None:
    context.configure(target_metadata=target_metadata, **kwargs)
    with context.begin_transaction():
        context.run_migrations()


def _migrate_connection(connection) -> None:
    # SQLite cannot ALTER most constraints in place
    _configure(
        connection=connection,
        render_as_batch=connection.dialect.name == "sqlite",
    )


async def _migrate_online() -> None:
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate_connection)
            await connection.commit()
    finally:
        # Pooled connections belong to the event loop asyncio.run is about to close
        await engine.dispose()


if context.is_offline_mode():
    _configure(
        url=settings.database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
else:
    asyncio.run(_migrate_online())
