"""Build the configured record store"""

from app.config import Settings
from app.core.logging import get_logger
from app.database import create_engine, init_db
from app.store.base import RecordStore
from app.store.remote import build_remote_store
from app.store.sql import build_sql_store

logger = get_logger(__name__)


async def build_store(config: Settings) -> RecordStore:
    """
    Create the record store selected by STORE_BACKEND.

    In development the SQL backend also creates missing tables; production
    schemas are managed by Alembic.
    """
    if config.STORE_BACKEND == "remote":
        logger.info("Using remote record store", extra={"url": config.RECORD_SERVICE_URL})
        return build_remote_store(config)

    engine = create_engine(config.DATABASE_URL)
    if config.is_development:
        await init_db(engine)
        logger.info("Database initialized")
    return build_sql_store(engine)
