"""Helpers for transient status messages on the device display."""

import logging

from photo_relay.adapters.device_session import DisplaySurface

logger = logging.getLogger(__name__)


def show_message(display: DisplaySurface, text: str, duration_ms: int) -> None:
    """Show a status message; a broken display never aborts the caller."""
    try:
        display.show_text_wall(text, duration_ms)
    except Exception:
        logger.exception("Failed to update display", extra={"text": text})
