# app/core/logging.py
import logging

from app.core.config import settings


def setup_logging() -> None:
    """
    Configure root logging for the API process.
    """
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )
    # Tortoise logs every SQL statement at DEBUG level
    if not settings.DEBUG:
        logging.getLogger("tortoise").setLevel(logging.WARNING)
