"""Identity resolution for webview and API requests."""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from fastapi import HTTPException, Request, status

from photo_relay.domain.errors import AuthError

if TYPE_CHECKING:
    from photo_relay.containers import AppContainer

logger = logging.getLogger(__name__)


class IdentityResolver(Protocol):
    """Resolves the authenticated user of an HTTP request."""

    def resolve(self, request: Request) -> str | None:
        """Return the user id, ``None`` when anonymous, or raise AuthError."""


@dataclass
class HeaderIdentityResolver(IdentityResolver):
    """Trusts a user id header injected by the fronting auth layer.

    The auth layer proves itself with a shared secret header; without a
    matching secret the user id header is ignored.
    """

    shared_secret: str
    header_name: str = "X-Auth-User-Id"
    secret_header_name: str = "X-Auth-Secret"

    def resolve(self, request: Request) -> str | None:
        """Read the user id header once the shared secret checks out."""
        secret = request.headers.get(self.secret_header_name)
        if not secret:
            return None
        if not secrets.compare_digest(secret.encode(), self.shared_secret.encode()):
            raise AuthError("Invalid auth layer secret")
        value = request.headers.get(self.header_name)
        if value is None:
            return None
        cleaned = value.strip()
        return cleaned or None


def resolve_user_id(request: Request) -> str | None:
    """Return the caller's user id, or ``None`` when unauthenticated."""
    container: AppContainer = request.app.state.container
    try:
        return container.identity_resolver.resolve(request)
    except AuthError:
        logger.warning("Rejected credentials", extra={"path": request.url.path})
        return None


async def optional_user(request: Request) -> str | None:
    """Dependency yielding the caller's user id if authenticated."""
    return resolve_user_id(request)


async def require_user(request: Request) -> str:
    """Dependency rejecting unauthenticated requests with 401."""
    user_id = resolve_user_id(request)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated"
        )
    return user_id
