"""Database Engine and Session Factories"""

import re
import ssl
from typing import Any, Dict, Optional, Tuple

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from app.config import settings

# Base class for declarative models
Base = declarative_base()


def normalize_database_url(url: str) -> Tuple[str, Dict[str, Any]]:
    """
    Convert postgresql:// to postgresql+asyncpg:// and translate sslmode.

    asyncpg uses ssl=SSLContext or True, not sslmode; strip sslmode from the
    URL (asyncpg#737, SQLAlchemy#6275). Managed Postgres hosts often present
    certs that fail verification, so the context encrypts without verifying.
    """
    connect_args: Dict[str, Any] = {}
    database_url = url.replace("postgresql://", "postgresql+asyncpg://")
    if re.search(r"[?&]sslmode=(require|required|verify-full)", database_url, re.I):
        ssl_ctx = ssl.create_default_context()
        ssl_ctx.check_hostname = False
        ssl_ctx.verify_mode = ssl.CERT_NONE
        connect_args["ssl"] = ssl_ctx
        database_url = re.sub(r"[?&]sslmode=[^&]+", "", database_url, flags=re.I)
        database_url = re.sub(r"\?&", "?", database_url).rstrip("?")
    if "?&" in database_url:
        database_url = database_url.replace("?&", "?")
    return database_url, connect_args


def create_engine(url: Optional[str] = None, **overrides: Any) -> AsyncEngine:
    """
    Create an async engine for the given URL (defaults to settings).

    Pool sizing only applies to server databases; SQLite picks its own pool.
    """
    database_url, connect_args = normalize_database_url(url or settings.DATABASE_URL)
    options: Dict[str, Any] = {
        "connect_args": connect_args,
        "echo": settings.DEBUG,
    }
    if not database_url.startswith("sqlite"):
        options.update(
            pool_pre_ping=True,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
        )
    options.update(overrides)
    return create_async_engine(database_url, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory; every repository call opens and closes its own session."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def init_db(engine: AsyncEngine) -> None:
    """Initialize database tables (for development only - use Alembic in production)"""
    # Register tables on Base.metadata
    import app.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db(engine: AsyncEngine) -> None:
    """Close database connections"""
    await engine.dispose()
