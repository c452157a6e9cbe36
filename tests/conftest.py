"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

import pytest

from photo_relay.adapters.backend_client import BackendClient
from photo_relay.adapters.device_session import ButtonHandler
from photo_relay.api.auth import HeaderIdentityResolver
from photo_relay.config import Settings
from photo_relay.containers import AppContainer
from photo_relay.domain.photos import ButtonPress, PhotoData, PressType
from photo_relay.services.capture import CaptureController
from photo_relay.services.queries import QueryService
from photo_relay.services.sessions import SessionLifecycle
from photo_relay.services.store import PhotoStore, TaskRegistry
from photo_relay.services.uploads import UploadPipeline

CAPTURED_AT = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
CAPTURED_AT_MS = int(CAPTURED_AT.timestamp() * 1000)
SHORT_PRESS = ButtonPress(button_id="main", press_type=PressType.SHORT)
LONG_PRESS = ButtonPress(button_id="main", press_type=PressType.LONG)


def make_photo(request_id: str = "req-1", data: bytes = b"jpeg-bytes") -> PhotoData:
    return PhotoData(
        request_id=request_id,
        data=data,
        timestamp=CAPTURED_AT,
        mime_type="image/jpeg",
        filename=f"{request_id}.jpg",
        size=len(data),
    )


@dataclass
class FakeDisplay:
    """Display that records shown messages."""

    messages: list[tuple[str, int]] = field(default_factory=list)

    def show_text_wall(self, text: str, duration_ms: int) -> None:
        self.messages.append((text, duration_ms))

    @property
    def texts(self) -> list[str]:
        return [text for text, _ in self.messages]


@dataclass
class FakeCamera:
    """Camera returning queued photos or raising a fixed error."""

    photos: list[PhotoData] = field(default_factory=list)
    error: Exception | None = None
    calls: int = 0

    async def request_photo(self) -> PhotoData:
        self.calls += 1
        if self.error is not None:
            raise self.error
        if self.photos:
            return self.photos.pop(0)
        return make_photo(request_id=f"req-{self.calls}")


@dataclass
class FakeEvents:
    """Event bus that lets tests fire button presses."""

    handlers: list[ButtonHandler] = field(default_factory=list)

    def on_button_press(self, handler: ButtonHandler) -> Callable[[], None]:
        self.handlers.append(handler)

        def unsubscribe() -> None:
            self.handlers.remove(handler)

        return unsubscribe

    async def press(self, press: ButtonPress) -> None:
        for handler in list(self.handlers):
            await handler(press)


@dataclass
class FakeSession:
    """Device session assembled from fakes."""

    layouts: FakeDisplay = field(default_factory=FakeDisplay)
    camera: FakeCamera = field(default_factory=FakeCamera)
    events: FakeEvents = field(default_factory=FakeEvents)


@dataclass
class FakeBackendClient(BackendClient):
    """Backend client returning a fixed payload or raising."""

    payload: dict[str, object] = field(default_factory=lambda: {"task_id": "abc123"})
    error: Exception | None = None
    uploads: list[tuple[bytes, str, str]] = field(default_factory=list)

    async def upload_photo(
        self, content: bytes, filename: str, mime_type: str
    ) -> dict[str, object]:
        self.uploads.append((content, filename, mime_type))
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class FakePhotoArchive:
    """Archive that records saved photos or raises a fixed error."""

    saved: list[PhotoData] = field(default_factory=list)
    error: Exception | None = None

    async def save(self, photo: PhotoData) -> Path:
        if self.error is not None:
            raise self.error
        self.saved.append(photo)
        return Path("photos") / photo.filename


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        package_name="com.example.photo",
        mentraos_api_key="test-key",
    )


@pytest.fixture
def backend_client() -> FakeBackendClient:
    return FakeBackendClient()


@pytest.fixture
def photo_archive() -> FakePhotoArchive:
    return FakePhotoArchive()


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def container(
    settings: Settings,
    backend_client: FakeBackendClient,
    photo_archive: FakePhotoArchive,
) -> AppContainer:
    return build_test_container(settings, backend_client, photo_archive)


def build_test_container(
    settings: Settings,
    backend_client: BackendClient,
    photo_archive: FakePhotoArchive | None = None,
) -> AppContainer:
    photo_store = PhotoStore()
    task_registry = TaskRegistry()
    upload_pipeline = UploadPipeline(client=backend_client, task_registry=task_registry)
    capture_controller = CaptureController(
        photo_store=photo_store,
        upload_pipeline=upload_pipeline,
        archive=photo_archive,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        photo_store=photo_store,
        task_registry=task_registry,
        backend_client=backend_client,
        upload_pipeline=upload_pipeline,
        capture_controller=capture_controller,
        session_lifecycle=SessionLifecycle(capture_controller),
        query_service=QueryService(photo_store, task_registry),
        identity_resolver=HeaderIdentityResolver(
            shared_secret=settings.mentraos_api_key,
            header_name=settings.auth_user_header,
            secret_header_name=settings.auth_secret_header,
        ),
        close_resources=close_resources,
    )
