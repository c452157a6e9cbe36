"""HTTP response models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from photo_relay.domain.photos import ProcessingStatus


class ProcessingStatusResponse(BaseModel):
    """Processing status polled by the webview."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    has_photo: bool
    task_id: str | None
    photo_timestamp: int | None

    @classmethod
    def from_status(cls, status: ProcessingStatus) -> "ProcessingStatusResponse":
        """Build the response from a domain status."""
        return cls(
            has_photo=status.has_photo,
            task_id=status.task_id,
            photo_timestamp=status.photo_timestamp,
        )


class ServiceInfo(BaseModel):
    """Root health payload."""

    message: str
    status: str
    version: str
    backend_url: str
    port: int
