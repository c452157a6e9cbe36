"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request, Response, status
from fastapi.responses import HTMLResponse

from photo_relay.api.auth import optional_user, require_user
from photo_relay.api.models import ProcessingStatusResponse, ServiceInfo
from photo_relay.api.webview import NOT_AUTHENTICATED_HTML, WEBVIEW_HTML
from photo_relay.app_logging import configure_logging
from photo_relay.containers import AppContainer
from photo_relay.domain.errors import PhotoNotFoundError

APP_TITLE = "MentraOS Photo Taker App"
APP_VERSION = "1.0.0"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title=APP_TITLE, version=APP_VERSION, lifespan=lifespan)
    app.state.container = container

    @app.get("/")
    async def service_info(request: Request) -> ServiceInfo:
        """Health check with deployment details."""
        settings = request.app.state.container.settings
        return ServiceInfo(
            message=APP_TITLE,
            status="running",
            version=APP_VERSION,
            backend_url=settings.backend_url,
            port=settings.port,
        )

    @app.get("/webview", response_class=HTMLResponse)
    async def webview(user_id: str | None = Depends(optional_user)) -> HTMLResponse:
        """Companion page that polls the processing status."""
        if user_id is None:
            return HTMLResponse(
                NOT_AUTHENTICATED_HTML, status_code=status.HTTP_401_UNAUTHORIZED
            )
        return HTMLResponse(WEBVIEW_HTML)

    @app.get("/api/processing-status")
    async def processing_status(
        request: Request, user_id: str = Depends(require_user)
    ) -> ProcessingStatusResponse:
        """Return the caller's cached photo and task status."""
        state_container: AppContainer = request.app.state.container
        return ProcessingStatusResponse.from_status(
            state_container.query_service.status(user_id)
        )

    @app.get("/api/photo/{request_id}")
    async def photo(
        request_id: str, request: Request, user_id: str = Depends(require_user)
    ) -> Response:
        """Return the caller's cached photo bytes if the id still matches."""
        state_container: AppContainer = request.app.state.container
        try:
            cached = state_container.query_service.fetch_photo(user_id, request_id)
        except PhotoNotFoundError as exc:
            logger.info(
                "Photo lookup failed",
                extra={
                    "user_id": user_id,
                    "request_id": request_id,
                    "reason": str(exc),
                },
            )
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Photo not found"
            ) from exc
        return Response(
            content=cached.data,
            media_type=cached.mime_type,
            headers={"Cache-Control": "no-cache"},
        )

    return app
