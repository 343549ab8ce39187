"""
Diabetes Diagnosis API — Database Engine & Handle
===================================================

What:  Declarative base for the schema, async engine construction, and the
       `Database` handle that owns the connection pool.
How:   `Database.from_settings()` builds an async engine with a fixed-size
       pool; the app factory stores the handle on `app.state.database`
       and route handlers receive its `QueryGateway` through a dependency.
When:  The handle is created once per application (or per test) and
       disposed during shutdown.

Connection Pooling:
    pool_size=10:     Hard cap on concurrent connections
    max_overflow=0:   No temporary connections above the cap
    pool_timeout:     None by default, so excess requests queue indefinitely
    pool_recycle=3600: Recycles connections every hour
"""

import logging
from typing import Any, Dict, Optional, Union

from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from diabetes_api.config import Settings, settings as default_settings
from diabetes_api.gateway import QueryGateway

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All five tables register with this metadata, which the setup script
    uses to create the schema.
    """
    pass


def build_engine(
    url: Union[str, URL],
    config: Optional[Settings] = None,
) -> AsyncEngine:
    """
    Create an async engine for `url` using the pool settings from `config`.

    SQLite URLs (used by the test suite) skip the pool sizing arguments,
    which their pool class does not need.
    """
    config = config or default_settings
    url = make_url(url)

    kwargs: Dict[str, Any] = {
        "echo": config.log_level == "DEBUG",
        "pool_pre_ping": config.db_pool_pre_ping,
    }
    if url.get_backend_name() != "sqlite":
        kwargs.update(
            pool_size=config.db_pool_size,
            max_overflow=0,
            pool_timeout=config.db_pool_timeout,
            pool_recycle=3600,
        )
    return create_async_engine(url, **kwargs)


class Database:
    """
    Handle around the process-wide connection pool.

    Attributes:
        engine:   The async engine (and its pool)
        gateway:  QueryGateway bound to `engine`; the only way handlers
                  talk to the database
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.gateway = QueryGateway(engine)

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "Database":
        config = config or default_settings
        return cls(build_engine(config.sqlalchemy_url, config))

    @classmethod
    def from_url(cls, url: Union[str, URL], config: Optional[Settings] = None) -> "Database":
        return cls(build_engine(url, config))

    async def create_schema(self) -> None:
        """Create every table that does not exist yet (idempotent)."""
        # Models must be imported so their tables are registered on Base.metadata
        from diabetes_api import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Schema created/verified: %s", ", ".join(sorted(Base.metadata.tables)))

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()
