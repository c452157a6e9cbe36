"""In-memory per-user stores for the latest photo and processing task."""

import logging
from collections import OrderedDict
from dataclasses import dataclass

from photo_relay.domain.photos import CapturedPhoto, ProcessingTask

logger = logging.getLogger(__name__)


@dataclass
class _UserSlots:
    """Per-user map with an optional least-recently-written bound."""

    _entries: OrderedDict[str, object]
    max_users: int | None

    def __init__(self, max_users: int | None = None) -> None:
        if max_users is not None and max_users < 1:
            raise ValueError("max_users must be positive")
        self._entries = OrderedDict()
        self.max_users = max_users

    def _get(self, user_id: str) -> object | None:
        return self._entries.get(user_id)

    def _put(self, user_id: str, value: object) -> None:
        self._entries[user_id] = value
        self._entries.move_to_end(user_id)
        if self.max_users is None:
            return
        while len(self._entries) > self.max_users:
            evicted, _ = self._entries.popitem(last=False)
            logger.info(
                "Evicted cached entry",
                extra={"user_id": evicted, "store": type(self).__name__},
            )

    def __len__(self) -> int:
        return len(self._entries)


class PhotoStore(_UserSlots):
    """Latest captured photo per user; last write wins."""

    def get(self, user_id: str) -> CapturedPhoto | None:
        """Return the user's current photo, if any."""
        return self._get(user_id)  # type: ignore[return-value]

    def put(self, user_id: str, photo: CapturedPhoto) -> None:
        """Replace the user's photo."""
        if photo.owner_id != user_id:
            raise ValueError("photo owner does not match user")
        self._put(user_id, photo)
        logger.info(
            "Photo cached",
            extra={"user_id": user_id, "request_id": photo.request_id},
        )


class TaskRegistry(_UserSlots):
    """Latest backend processing task per user; last write wins."""

    def get(self, user_id: str) -> ProcessingTask | None:
        """Return the user's most recent task, if any."""
        return self._get(user_id)  # type: ignore[return-value]

    def put(self, user_id: str, task_id: str) -> ProcessingTask:
        """Record a new task for the user and return it."""
        task = ProcessingTask(task_id=task_id, owner_id=user_id)
        self._put(user_id, task)
        return task
