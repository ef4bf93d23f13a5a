"""Async SQLAlchemy engine and session factory helpers.

The engine and session factory are built once per process by the application
lifespan (see ``app.main``) and handed to the services explicitly. Nothing in
this module holds a global connection.
"""

import ssl
from typing import Any, Dict, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel


def _normalize_db_url(url: str) -> str:
    """Ensure an async-capable driver is selected.

    Plain "postgresql://..." or the alias "postgres://..." switch to asyncpg,
    plain "sqlite://..." switches to aiosqlite. Explicit drivers are respected.
    """
    try:
        u = make_url(url)
        driver = (u.drivername or "").lower()
        if "+" in driver:
            return u.render_as_string(hide_password=False)
        if driver in ("postgres", "postgresql"):
            u = u.set(drivername="postgresql+asyncpg")
        elif driver == "sqlite":
            u = u.set(drivername="sqlite+aiosqlite")
        return u.render_as_string(hide_password=False)
    except Exception:
        # Fallback string-level normalization for odd/partial URLs
        if url.startswith("postgresql://"):
            return "postgresql+asyncpg://" + url.split("://", 1)[1]
        if url.startswith("postgres://"):
            return "postgresql+asyncpg://" + url.split("://", 1)[1]
        return url


def prepare_connection(url: str) -> Tuple[str, Dict[str, Any]]:
    """Strip query args asyncpg does not accept and derive connect kwargs."""

    normalized_url = _normalize_db_url(url)
    if normalized_url.startswith("sqlite"):
        return normalized_url, {}

    split = urlsplit(normalized_url)
    query_pairs = parse_qsl(split.query, keep_blank_values=True)

    sslmode = None
    filtered_pairs = []
    for key, value in query_pairs:
        if key == "sslmode":
            sslmode = value
            continue
        if key == "channel_binding":
            continue
        filtered_pairs.append((key, value))

    cleaned_query = urlencode(filtered_pairs, doseq=True)
    cleaned_url = urlunsplit(split._replace(query=cleaned_query)).rstrip("?")

    connect_args: Dict[str, Any] = {}
    if sslmode:
        mode = sslmode.lower()
        if mode == "disable":
            connect_args["ssl"] = False
        elif mode in {"allow", "prefer"}:
            # asyncpg negotiates TLS on its own when the server asks for it
            pass
        elif mode == "require":
            ssl_context = ssl.create_default_context()
            ssl_context.check_hostname = False
            ssl_context.verify_mode = ssl.CERT_NONE
            connect_args["ssl"] = ssl_context
        elif mode == "verify-ca":
            ssl_context = ssl.create_default_context()
            ssl_context.check_hostname = False
            connect_args["ssl"] = ssl_context
        else:
            connect_args["ssl"] = ssl.create_default_context()

    return cleaned_url, connect_args


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:  # type: ignore[no-untyped-def]
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str) -> AsyncEngine:
    """Create the process-wide async engine for ``url``."""
    cleaned_url, connect_args = prepare_connection(url)
    engine = create_async_engine(
        cleaned_url,
        pool_pre_ping=True,
        connect_args=connect_args,
    )
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)


async def init_db(engine: AsyncEngine) -> None:
    """Initialize the database (create tables)."""
    # Import locally so metadata is fully populated without import cycles
    from app.schemas import projects, seasons, staff  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def dispose_engine(engine: AsyncEngine) -> None:
    """Dispose of the async engine and its connection pool."""
    await engine.dispose()


def describe_database_url(url: str) -> str:
    """Return a sanitized, human-readable description of the DB URL for logging.

    Example: "postgresql+asyncpg://user@host:5432/dbname"
    Passwords are never included.
    """
    try:
        u = make_url(url)
        auth = u.username or "?"
        host = u.host or "?"
        port = f":{u.port}" if u.port else ""
        db = u.database or "?"
        return f"{u.drivername}://{auth}@{host}{port}/{db}"
    except Exception:
        return "<unparseable database URL>"
