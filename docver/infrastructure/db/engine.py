"""Process-lifetime engine management.

The engine owns the connection pool. It is created once by the host process
(``init_engine``) and disposed once at shutdown (``dispose_engine``); single
operations only ever borrow a connection through ``StoreGateway.scope``.
"""

import logging
from typing import Any, Dict, Optional
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from docver.config import Settings, get_settings
from docver.infrastructure.entities import EntityBase

logger = logging.getLogger(__name__)

_engine: Optional[Engine] = None


def build_engine(database_url: str, pool_size: Optional[int] = None, echo: bool = False, **kwargs: Any) -> Engine:
    """Create an engine for ``database_url``.

    SQLite connections get ``PRAGMA foreign_keys=ON`` so that a version can
    never reference a missing document.
    """
    options: Dict[str, Any] = {"echo": echo}
    is_sqlite = database_url.startswith("sqlite")
    if pool_size and not is_sqlite:
        options["pool_size"] = pool_size
    options.update(kwargs)

    engine = create_engine(database_url, **options)

    if is_sqlite:

        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def create_schema(engine: Engine) -> None:
    """Create the document and version tables if they don't exist."""
    EntityBase.metadata.create_all(engine)


def init_engine(settings: Optional[Settings] = None) -> Engine:
    """Create the shared engine from settings. Calling it twice is a no-op."""
    global _engine
    if _engine is not None:
        return _engine

    settings = settings or get_settings()
    _engine = build_engine(
        settings.DATABASE_URL, pool_size=settings.POOL_SIZE, echo=settings.ECHO_SQL
    )
    logger.debug(f"Engine initialised for {_engine.url.render_as_string(hide_password=True)}")
    return _engine


def get_engine() -> Engine:
    """Return the shared engine, initialising it on first use."""
    return _engine if _engine is not None else init_engine()


def dispose_engine() -> None:
    """Close every pooled connection and forget the shared engine."""
    global _engine
    if _engine is None:
        return
    _engine.dispose()
    logger.debug("Engine disposed")
    _engine = None
