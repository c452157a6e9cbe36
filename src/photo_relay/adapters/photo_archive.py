"""Local filesystem copy of captured photos."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Protocol

from photo_relay.domain.photos import PhotoData

logger = logging.getLogger(__name__)


class PhotoArchive(Protocol):
    """Interface for keeping a local copy of each capture."""

    async def save(self, photo: PhotoData) -> Path:
        """Write the photo bytes and return where they were stored."""


@dataclass
class LocalPhotoArchive(PhotoArchive):
    """Writes photos into a directory as ``photo_<epoch-ms>.jpg``."""

    directory: Path

    async def save(self, photo: PhotoData) -> Path:
        """Write photo bytes off the event loop."""
        filename = f"photo_{int(datetime.now(tz=UTC).timestamp() * 1000)}.jpg"
        path = self.directory / filename
        await asyncio.to_thread(self._write, path, photo.data)
        logger.info("Photo saved to file", extra={"path": str(path)})
        return path

    def _write(self, path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
