from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import settings


def normalize_database_url(url: str) -> str:
    """Normalize PostgreSQL URL to use psycopg3 driver."""
    if url.startswith("postgresql://") and "+psycopg" not in url:
        return url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


def create_db_engine(url: str, timeout_seconds: float | None = None) -> Engine:
    """
    Create an engine whose store calls are all bounded by timeout_seconds.

    - SQLite: busy timeout, and writes open with BEGIN IMMEDIATE so the
      availability counter update serializes instead of failing on lock upgrade
    - PostgreSQL: connect_timeout and statement_timeout
    - Pool checkout waits at most timeout_seconds
    """
    if timeout_seconds is None:
        timeout_seconds = settings.db_timeout_seconds
    url = normalize_database_url(url)

    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={
                "check_same_thread": False,
                "timeout": timeout_seconds,
                "isolation_level": "IMMEDIATE",
            },
        )

    return create_engine(
        url,
        pool_pre_ping=True,
        pool_timeout=timeout_seconds,
        connect_args={
            "connect_timeout": max(1, int(timeout_seconds)),
            "options": f"-c statement_timeout={int(timeout_seconds * 1000)}",
        },
    )


engine = create_db_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()
