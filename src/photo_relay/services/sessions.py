"""Device session lifecycle."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from photo_relay.adapters.device_session import DeviceSession
from photo_relay.domain.photos import ButtonPress
from photo_relay.services.capture import CaptureController

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    """Lifecycle states of a device session."""

    CREATED = "created"
    ACTIVE = "active"
    STOPPED = "stopped"


@dataclass
class _SessionContext:
    session_id: str
    user_id: str
    state: SessionState
    unsubscribe: Callable[[], None] | None = None


@dataclass
class SessionLifecycle:
    """Registers button handling for sessions and tears it down on stop.

    Cached photos and tasks are keyed by user and outlive the session. The
    device transport adapter is expected to call on_session and on_stop.
    """

    capture_controller: CaptureController
    _sessions: dict[str, _SessionContext] = field(default_factory=dict)

    async def on_session(
        self, session: DeviceSession, session_id: str, user_id: str
    ) -> None:
        """Activate a new session and subscribe to its button presses."""
        previous = self._sessions.get(session_id)
        if previous is not None and previous.unsubscribe is not None:
            previous.unsubscribe()
        context = _SessionContext(
            session_id=session_id, user_id=user_id, state=SessionState.CREATED
        )
        self._sessions[session_id] = context
        logger.info(
            "Session started",
            extra={"user_id": user_id, "session_id": session_id},
        )

        async def handle_button(press: ButtonPress) -> None:
            try:
                await self.capture_controller.on_button_press(session, user_id, press)
            except Exception:
                logger.exception(
                    "Button handler failed",
                    extra={"user_id": user_id, "session_id": session_id},
                )

        context.unsubscribe = session.events.on_button_press(handle_button)
        context.state = SessionState.ACTIVE

    async def on_stop(self, session_id: str, user_id: str, reason: str) -> None:
        """Stop a session; cached user state is left untouched."""
        context = self._sessions.pop(session_id, None)
        logger.info(
            "Session stopped",
            extra={"user_id": user_id, "session_id": session_id, "reason": reason},
        )
        if context is None:
            return
        context.state = SessionState.STOPPED
        if context.unsubscribe is not None:
            context.unsubscribe()

    def state(self, session_id: str) -> SessionState | None:
        """Return the state of a tracked session, if any."""
        context = self._sessions.get(session_id)
        return context.state if context else None

    def active_sessions(self, user_id: str) -> list[str]:
        """Return ids of the user's active sessions."""
        return [
            context.session_id
            for context in self._sessions.values()
            if context.user_id == user_id and context.state is SessionState.ACTIVE
        ]
