"""Command-line entrypoint running the API with uvicorn."""

import uvicorn

from photo_relay.api.app import create_app
from photo_relay.config import Settings
from photo_relay.containers import build_container


def main() -> None:
    """Serve the application on the configured port."""
    settings = Settings()
    app = create_app(build_container(settings))
    uvicorn.run(app, host="0.0.0.0", port=settings.port)  # noqa: S104


if __name__ == "__main__":
    main()
