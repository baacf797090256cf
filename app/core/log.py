# app/core/log.py
import logging

from app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Root handler for the service; modules log through ``logging.getLogger(__name__)``."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
    # SQLAlchemy engine logs stay at WARNING regardless of LOG_LEVEL
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
