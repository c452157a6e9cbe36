"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from photo_relay.adapters.backend_client import BackendClient, HttpxBackendClient
from photo_relay.adapters.photo_archive import LocalPhotoArchive
from photo_relay.api.auth import HeaderIdentityResolver, IdentityResolver
from photo_relay.config import Settings
from photo_relay.services.capture import CaptureController
from photo_relay.services.queries import QueryService
from photo_relay.services.sessions import SessionLifecycle
from photo_relay.services.store import PhotoStore, TaskRegistry
from photo_relay.services.uploads import UploadPipeline


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    photo_store: PhotoStore
    task_registry: TaskRegistry
    backend_client: BackendClient
    upload_pipeline: UploadPipeline
    capture_controller: CaptureController
    session_lifecycle: SessionLifecycle
    query_service: QueryService
    identity_resolver: IdentityResolver
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    photo_store = PhotoStore(max_users=resolved_settings.max_cached_users)
    task_registry = TaskRegistry(max_users=resolved_settings.max_cached_users)
    backend_client = HttpxBackendClient.create(
        base_url=resolved_settings.backend_url,
        timeout=resolved_settings.upload_timeout_seconds,
    )
    upload_pipeline = UploadPipeline(client=backend_client, task_registry=task_registry)
    capture_controller = CaptureController(
        photo_store=photo_store,
        upload_pipeline=upload_pipeline,
        archive=LocalPhotoArchive(Path(resolved_settings.photos_dir)),
    )

    async def close_resources() -> None:
        await backend_client.close()

    return AppContainer(
        settings=resolved_settings,
        photo_store=photo_store,
        task_registry=task_registry,
        backend_client=backend_client,
        upload_pipeline=upload_pipeline,
        capture_controller=capture_controller,
        session_lifecycle=SessionLifecycle(capture_controller),
        query_service=QueryService(photo_store, task_registry),
        identity_resolver=HeaderIdentityResolver(
            shared_secret=resolved_settings.mentraos_api_key,
            header_name=resolved_settings.auth_user_header,
            secret_header_name=resolved_settings.auth_secret_header,
        ),
        close_resources=close_resources,
    )
