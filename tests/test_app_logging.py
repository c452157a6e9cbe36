"""Tests for logging configuration."""

import logging

from photo_relay.app_logging import LOG_FORMAT, UserContextFilter, configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("photo_relay")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1


def test_log_lines_carry_user_context() -> None:
    formatter = logging.Formatter(LOG_FORMAT)
    user_filter = UserContextFilter()
    with_user = logging.LogRecord(
        "photo_relay.services.capture",
        logging.INFO,
        __file__,
        1,
        "Photo taken",
        None,
        None,
    )
    with_user.user_id = "alice"
    without_user = logging.LogRecord(
        "photo_relay.api.app", logging.INFO, __file__, 1, "Started", None, None
    )

    assert user_filter.filter(with_user)
    assert user_filter.filter(without_user)
    assert formatter.format(with_user) == (
        "INFO: photo_relay.services.capture: [user=alice] Photo taken"
    )
    assert formatter.format(without_user) == (
        "INFO: photo_relay.api.app: [user=-] Started"
    )
