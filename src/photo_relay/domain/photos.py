"""Domain models for captured photos and processing tasks."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class PressType(str, Enum):
    """Kind of hardware button press reported by the device."""

    SHORT = "short"
    LONG = "long"


@dataclass(frozen=True)
class ButtonPress:
    """Button event delivered by a device session."""

    button_id: str
    press_type: PressType


@dataclass(frozen=True)
class PhotoData:
    """Raw result of the device camera capture."""

    request_id: str
    data: bytes
    timestamp: datetime
    mime_type: str
    filename: str
    size: int


@dataclass(frozen=True)
class CapturedPhoto:
    """Latest photo cached for a user."""

    request_id: str
    data: bytes
    captured_at: datetime
    owner_id: str
    mime_type: str
    filename: str
    size_bytes: int

    @classmethod
    def from_photo_data(cls, photo: PhotoData, owner_id: str) -> "CapturedPhoto":
        """Attach an owner to a freshly captured photo."""
        return cls(
            request_id=photo.request_id,
            data=photo.data,
            captured_at=photo.timestamp,
            owner_id=owner_id,
            mime_type=photo.mime_type,
            filename=photo.filename,
            size_bytes=photo.size,
        )

    @property
    def captured_at_ms(self) -> int:
        """Capture time as epoch milliseconds."""
        return int(self.captured_at.timestamp() * 1000)


@dataclass(frozen=True)
class ProcessingTask:
    """Pointer to backend-side work started for a user's upload."""

    task_id: str
    owner_id: str


@dataclass(frozen=True)
class ProcessingStatus:
    """Point-in-time view of a user's photo and task."""

    has_photo: bool
    task_id: str | None
    photo_timestamp: int | None
