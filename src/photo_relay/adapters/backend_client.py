"""Photo processing backend client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class BackendClient(Protocol):
    """Interface for submitting photos to the processing backend."""

    async def upload_photo(
        self, content: bytes, filename: str, mime_type: str
    ) -> dict[str, object]:
        """Upload photo bytes and return the decoded JSON acknowledgement."""


@dataclass
class HttpxBackendClient(BackendClient):
    """Backend client implemented with httpx."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 10.0

    @classmethod
    def create(cls, base_url: str, timeout: float = 10.0) -> "HttpxBackendClient":
        """Create a backend client with a managed httpx session."""
        return cls(base_url=base_url, http_client=httpx.AsyncClient(), timeout=timeout)

    async def upload_photo(
        self, content: bytes, filename: str, mime_type: str
    ) -> dict[str, object]:
        """POST the photo as multipart field ``file`` to /photos/upload."""
        url = f"{self.base_url}/photos/upload"
        response = await self.http_client.post(
            url,
            files={"file": (filename, content, mime_type)},
            timeout=self.timeout,
        )
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError("Backend response is not a JSON object")
        return payload

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()
