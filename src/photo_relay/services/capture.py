"""Button-triggered photo capture flow."""

import logging
from dataclasses import dataclass

from photo_relay.adapters.device_session import DeviceSession
from photo_relay.adapters.photo_archive import PhotoArchive
from photo_relay.domain.errors import CaptureError
from photo_relay.domain.photos import ButtonPress, CapturedPhoto, PhotoData, PressType
from photo_relay.services.display import show_message
from photo_relay.services.store import PhotoStore
from photo_relay.services.uploads import UploadPipeline

logger = logging.getLogger(__name__)

CAPTURING_MESSAGE = "Taking photo..."
CAPTURING_DURATION_MS = 2000
CAPTURE_FAILED_MESSAGE = "Error taking photo"
CAPTURE_FAILED_DURATION_MS = 3000


@dataclass
class CaptureController:
    """Turns a short button press into capture, cache and upload.

    Presses are handled independently: two quick presses for the same user run
    concurrently, so the cached photo and the registered task may come from
    different captures.
    """

    photo_store: PhotoStore
    upload_pipeline: UploadPipeline
    archive: PhotoArchive | None = None

    async def on_button_press(
        self, session: DeviceSession, user_id: str, press: ButtonPress
    ) -> CapturedPhoto | None:
        """Handle a button press; returns the cached photo when one was taken."""
        logger.info(
            "Button pressed",
            extra={
                "user_id": user_id,
                "button_id": press.button_id,
                "press_type": press.press_type.value,
            },
        )
        if press.press_type != PressType.SHORT:
            logger.debug("Ignoring non-short press", extra={"user_id": user_id})
            return None

        show_message(session.layouts, CAPTURING_MESSAGE, CAPTURING_DURATION_MS)
        try:
            photo = await self._capture(session)
        except CaptureError:
            logger.exception("Error taking photo", extra={"user_id": user_id})
            show_message(
                session.layouts, CAPTURE_FAILED_MESSAGE, CAPTURE_FAILED_DURATION_MS
            )
            return None
        logger.info(
            "Photo taken",
            extra={"user_id": user_id, "request_id": photo.request_id},
        )

        await self._archive(user_id, photo)
        cached = CapturedPhoto.from_photo_data(photo, owner_id=user_id)
        self.photo_store.put(user_id, cached)
        await self.upload_pipeline.submit(user_id, photo, session)
        return cached

    async def _capture(self, session: DeviceSession) -> PhotoData:
        try:
            return await session.camera.request_photo()
        except CaptureError:
            raise
        except Exception as exc:
            raise CaptureError(f"Camera capture failed: {exc}") from exc

    async def _archive(self, user_id: str, photo: PhotoData) -> None:
        if self.archive is None:
            return
        try:
            await self.archive.save(photo)
        except OSError as exc:
            logger.warning(
                "Failed to save photo locally",
                extra={
                    "user_id": user_id,
                    "request_id": photo.request_id,
                    "error_kind": type(exc).__name__,
                },
            )
