"""Schema initializer: open the database file and ensure both tables exist."""

from pathlib import Path

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from markermap.core.config import Settings, get_settings
from markermap.core.errors import InitializationError
from markermap.db import models_registry  # noqa: F401 - Import to register models
from markermap.db.base import Base
from markermap.db.session import DatabaseHandle


async def initialize(settings: Settings | None = None) -> DatabaseHandle:
    """Open (or create) the database and create the Marker and Image tables.

    Safe to call on an existing file: tables are only created when absent
    and existing rows are left alone. Foreign key enforcement is verified
    after connecting, since marker deletion relies on the engine cascade.

    Raises:
        InitializationError: the file cannot be opened, the tables cannot be
            created, or foreign key enforcement is not active.
    """
    settings = settings or get_settings()
    logger.info(f"Initializing database at {settings.database_path}")

    try:
        Path(settings.data_save_folder).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Cannot create data folder {settings.data_save_folder}: {e}")
        raise InitializationError(f"Cannot create data folder: {e}") from e

    handle = DatabaseHandle.open(settings)
    try:
        async with handle.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            result = await conn.exec_driver_sql("PRAGMA foreign_keys")
            foreign_keys = result.scalar()
    except (SQLAlchemyError, OSError) as e:
        await handle.dispose()
        logger.error(f"Database initialization failed: {e}")
        raise InitializationError(f"Cannot open database: {e}") from e

    if foreign_keys != 1:
        await handle.dispose()
        logger.error("Foreign key enforcement is disabled")
        raise InitializationError("Foreign key enforcement is disabled")

    logger.info("Database initialized")
    return handle
