"""Logging configuration helpers."""

import logging

LOG_FORMAT = "%(levelname)s: %(name)s: [user=%(user_id)s] %(message)s"


class UserContextFilter(logging.Filter):
    """Fills ``user_id`` for records logged without user context."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "user_id"):
            record.user_id = "-"
        return True


def configure_logging() -> None:
    """Configure application logging with a single stream handler."""
    logger = logging.getLogger("photo_relay")
    logger.setLevel(logging.INFO)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.addFilter(UserContextFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
