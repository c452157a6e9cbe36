"""Submission of captured photos to the processing backend."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

import httpx

from photo_relay.adapters.backend_client import BackendClient
from photo_relay.adapters.device_session import DeviceSession
from photo_relay.domain.errors import UploadError
from photo_relay.domain.photos import PhotoData, ProcessingTask
from photo_relay.services.display import show_message
from photo_relay.services.store import TaskRegistry

logger = logging.getLogger(__name__)

PROCESSING_MESSAGE = "Processing photo..."
STARTED_MESSAGE = "Photo processing started!"
FAILED_MESSAGE = "Error processing photo"
MESSAGE_DURATION_MS = 3000


@dataclass
class UploadPipeline:
    """Uploads a photo once and records the returned task id.

    There is no retry or queueing: a failed upload is dropped and the next
    capture is the only way to recover.
    """

    client: BackendClient
    task_registry: TaskRegistry

    async def submit(
        self, user_id: str, photo: PhotoData, session: DeviceSession
    ) -> ProcessingTask | None:
        """Upload the photo; failures are reported to the user, never raised."""
        show_message(session.layouts, PROCESSING_MESSAGE, MESSAGE_DURATION_MS)
        try:
            task_id = await self._upload(photo)
        except UploadError:
            logger.exception(
                "Error processing photo",
                extra={"user_id": user_id, "request_id": photo.request_id},
            )
            show_message(session.layouts, FAILED_MESSAGE, MESSAGE_DURATION_MS)
            return None
        task = self.task_registry.put(user_id, task_id)
        logger.info(
            "Photo processing started",
            extra={"user_id": user_id, "task_id": task_id},
        )
        show_message(session.layouts, STARTED_MESSAGE, MESSAGE_DURATION_MS)
        return task

    async def _upload(self, photo: PhotoData) -> str:
        filename = f"photo_{int(datetime.now(tz=UTC).timestamp() * 1000)}.jpg"
        try:
            payload = await self.client.upload_photo(
                photo.data, filename, photo.mime_type
            )
        except (httpx.HTTPError, ValueError) as exc:
            raise UploadError(f"Backend upload failed: {exc}") from exc
        except Exception as exc:
            raise UploadError(f"Unexpected upload failure: {exc}") from exc
        return _extract_task_id(payload)


def _extract_task_id(payload: dict[str, object]) -> str:
    """Return the non-empty ``task_id`` of a backend acknowledgement."""
    task_id = payload.get("task_id")
    if not isinstance(task_id, str) or not task_id:
        raise UploadError("Invalid response from backend")
    return task_id
