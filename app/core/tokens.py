"""JWT issue and verification for access and refresh tokens.

Both token kinds carry the same ``{id, email}`` payload and are told apart
only by the secret that signed them, so every verification must name the
secret of the kind it expects.
"""

from datetime import datetime, timedelta, timezone
from functools import lru_cache

import jwt
from pydantic import ValidationError

from app.config import Settings, get_settings
from app.core.exceptions import TokenExpiredError, TokenMalformedError, TokenSignatureError
from app.schemas.auth import TokenPayload

ALGORITHM = "HS256"


def issue_token(payload: TokenPayload, secret: str, ttl: timedelta) -> str:
    """Sign ``payload`` with ``secret``; the token expires ``ttl`` from now."""
    now = datetime.now(timezone.utc)
    claims = {
        **payload.model_dump(),
        "iat": now,
        "exp": now + ttl,
    }
    return jwt.encode(claims, secret, algorithm=ALGORITHM)


def verify_token(token: str, secret: str) -> TokenPayload:
    """Return the payload of ``token`` if it was signed by ``secret`` and is unexpired.

    Raises:
        TokenExpiredError: the ``exp`` claim has passed.
        TokenSignatureError: the token was signed with another key.
        TokenMalformedError: the token cannot be decoded or lacks identity claims.
    """
    if not token:
        raise TokenMalformedError()
    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            options={"require": ["exp", "iat"]},
        )
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError()
    except jwt.InvalidSignatureError:
        raise TokenSignatureError()
    except jwt.InvalidTokenError:
        raise TokenMalformedError()

    try:
        return TokenPayload(id=claims["id"], email=claims["email"])
    except (KeyError, ValidationError):
        raise TokenMalformedError()


class TokenIssuer:
    """Binds the two token kinds to their configured secrets and lifetimes."""

    def __init__(self, settings: Settings | None = None):
        settings = settings or get_settings()
        if settings.access_secret == settings.refresh_secret:
            raise ValueError("ACCESS_SECRET_KEY and REFRESH_SECRET_KEY must differ")
        self.access_secret = settings.access_secret
        self.refresh_secret = settings.refresh_secret
        self.access_ttl = timedelta(seconds=settings.access_token_ttl)
        self.refresh_ttl = timedelta(seconds=settings.refresh_token_ttl)

    def issue_access(self, payload: TokenPayload) -> str:
        return issue_token(payload, self.access_secret, self.access_ttl)

    def issue_refresh(self, payload: TokenPayload) -> str:
        return issue_token(payload, self.refresh_secret, self.refresh_ttl)

    def verify_access(self, token: str) -> TokenPayload:
        return verify_token(token, self.access_secret)

    def verify_refresh(self, token: str) -> TokenPayload:
        return verify_token(token, self.refresh_secret)


@lru_cache
def get_token_issuer() -> TokenIssuer:
    return TokenIssuer()
