"""Read-only queries over a user's cached photo and task."""

from dataclasses import dataclass

from photo_relay.domain.errors import PhotoNotFoundError
from photo_relay.domain.photos import CapturedPhoto, ProcessingStatus
from photo_relay.services.store import PhotoStore, TaskRegistry


@dataclass
class QueryService:
    """Answers status and photo lookups scoped to one user."""

    photo_store: PhotoStore
    task_registry: TaskRegistry

    def status(self, user_id: str) -> ProcessingStatus:
        """Return whether a photo is cached and the latest task id."""
        photo = self.photo_store.get(user_id)
        task = self.task_registry.get(user_id)
        return ProcessingStatus(
            has_photo=photo is not None,
            task_id=task.task_id if task else None,
            photo_timestamp=photo.captured_at_ms if photo else None,
        )

    def fetch_photo(self, user_id: str, request_id: str) -> CapturedPhoto:
        """Return the user's photo only if it is the one requested."""
        photo = self.photo_store.get(user_id)
        if photo is None:
            raise PhotoNotFoundError("No photo captured")
        if photo.request_id != request_id:
            raise PhotoNotFoundError("Photo has been superseded")
        return photo
