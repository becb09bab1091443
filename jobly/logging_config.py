import logging
import sys

from jobly.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Chatty per-request loggers from the server and test client.
QUIET_LOGGERS = ("uvicorn.access", "httpx")

SQL_LOGGER = "sqlalchemy.engine"


def resolve_level(value: int | str | None) -> int:
    """Level name or number -> logging level. None reads LOG_LEVEL; unknown names mean INFO."""
    if value is None:
        value = settings.log_level
    if isinstance(value, int):
        return value
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: int | str | None = None, sql_echo: bool | None = None) -> None:
    """
    Route every log record to stdout through a single root handler.

    ``sql_echo`` (default: DB_ECHO) logs each statement the engine runs at
    INFO on ``sqlalchemy.engine``; otherwise that logger only shows warnings.
    Calling this again replaces the handler instead of stacking another.
    """
    if sql_echo is None:
        sql_echo = settings.db_echo

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(resolve_level(level))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger(SQL_LOGGER).setLevel(logging.INFO if sql_echo else logging.WARNING)
