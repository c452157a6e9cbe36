"""Interfaces of the device session transport."""

from collections.abc import Awaitable, Callable
from typing import Protocol

from photo_relay.domain.photos import ButtonPress, PhotoData

ButtonHandler = Callable[[ButtonPress], Awaitable[None]]


class DisplaySurface(Protocol):
    """Display of the user's device."""

    def show_text_wall(self, text: str, duration_ms: int) -> None:
        """Show a transient full-screen text message."""


class Camera(Protocol):
    """Camera capture primitive of the device."""

    async def request_photo(self) -> PhotoData:
        """Capture a photo, applying the device's own timeout policy."""


class SessionEvents(Protocol):
    """Event subscriptions offered by a device session."""

    def on_button_press(
        self, handler: ButtonHandler
    ) -> Callable[[], None] | None:
        """Subscribe to button presses; may return an unsubscribe callable."""


class DeviceSession(Protocol):
    """Live connection between one user's device and this service."""

    layouts: DisplaySurface
    camera: Camera
    events: SessionEvents
