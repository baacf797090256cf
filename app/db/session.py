# app/db/session.py
import logging
from typing import Generator

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings

logger = logging.getLogger(__name__)

SQLITE_PRAGMAS = (
    "PRAGMA journal_mode=WAL;",
    "PRAGMA synchronous=NORMAL;",
    # match/path/application rows cascade with their user and job
    "PRAGMA foreign_keys=ON;",
)


def make_engine(url: str) -> Engine:
    """Engine for ``url``; SQLite connections get WAL and enforced foreign keys."""
    if not url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True)

    # the scorer's worker threads share one connection pool
    eng = create_engine(url, connect_args={"check_same_thread": False, "timeout": 30})

    @event.listens_for(eng, "connect")
    def _sqlite_pragmas(dbapi_connection, connection_record):
        cur = dbapi_connection.cursor()
        try:
            for pragma in SQLITE_PRAGMAS:
                cur.execute(pragma)
        except Exception as exc:
            logger.warning("could not set sqlite pragmas on %s: %s", url, exc)
        finally:
            cur.close()

    return eng


engine = make_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)


def get_db() -> Generator[Session, None, None]:
    """
    Request-scoped session for FastAPI dependencies.
    All writes of one request go through it to avoid SQLite lock contention.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
