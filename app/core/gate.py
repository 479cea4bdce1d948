"""Process-wide bearer-token gate.

``access_gate`` is installed as an application-level dependency, so it runs
for every route before any handler code. Routes opt out by being decorated
with :func:`public`. Handlers that need the caller read it through
``CurrentIdentity``; FastAPI caches the dependency per request, so the token
is verified once.
"""

from typing import Annotated, Callable, TypeVar

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.exceptions import UnauthorizedError
from app.core.tokens import TokenIssuer, get_token_issuer
from app.logger import get_logger
from app.schemas.auth import TokenPayload

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

F = TypeVar("F", bound=Callable)


def public(endpoint: F) -> F:
    """Mark a route endpoint as reachable without an access token."""
    endpoint.is_public = True
    return endpoint


def is_public(request: Request) -> bool:
    endpoint = request.scope.get("endpoint")
    return bool(getattr(endpoint, "is_public", False))


async def access_gate(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> TokenPayload | None:
    if is_public(request):
        return None
    if credentials is None:
        logger.debug("gate_rejected", path=request.url.path, reason="missing_bearer")
        raise UnauthorizedError()
    try:
        return issuer.verify_access(credentials.credentials.strip())
    except UnauthorizedError as exc:
        logger.debug("gate_rejected", path=request.url.path, reason=type(exc).__name__)
        raise


# only meaningful on routes that are not public
CurrentIdentity = Annotated[TokenPayload, Depends(access_gate)]
