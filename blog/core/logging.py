import logging
import sys
from typing import Optional

from blog.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Chatty third-party loggers, held back unless LOG_LEVEL is DEBUG
QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,
    "multipart": logging.WARNING,
}


def setup_logging(log_level: Optional[str] = None) -> logging.Logger:
    """
    Send the ``blog`` loggers to stdout at LOG_LEVEL.

    Only the package logger gets a handler, so uvicorn keeps its own
    formatting; per-request access lines and form-parser chatter are
    held back at WARNING unless LOG_LEVEL is DEBUG. Safe to call more
    than once.
    """
    level = logging.getLevelName((log_level or get_settings().LOG_LEVEL).upper())
    if not isinstance(level, int):
        level = logging.INFO

    app_logger = logging.getLogger("blog")
    app_logger.setLevel(level)
    if not any(getattr(h, "_blog_handler", False) for h in app_logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._blog_handler = True
        app_logger.addHandler(handler)
    app_logger.propagate = False

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level if level <= logging.DEBUG else quiet_level)

    return app_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
