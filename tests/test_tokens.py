from datetime import timedelta

import jwt
import pytest

from app.config import Settings, get_settings
from app.core.exceptions import (
    TokenExpiredError,
    TokenMalformedError,
    TokenSignatureError,
    UnauthorizedError,
)
from app.core.tokens import TokenIssuer, issue_token, verify_token
from app.schemas.auth import TokenPayload

ACCESS = "access-secret-for-tests-0123456789abcdef"
REFRESH = "refresh-secret-for-tests-0123456789abcdef"


def test_round_trip_reproduces_payload():
    payload = TokenPayload(id=7, email="a@example.com")
    token = issue_token(payload, ACCESS, timedelta(minutes=1))
    assert verify_token(token, ACCESS) == payload


def test_other_secret_never_verifies():
    payload = TokenPayload(id=7, email="a@example.com")
    access = issue_token(payload, ACCESS, timedelta(minutes=1))
    refresh = issue_token(payload, REFRESH, timedelta(days=7))
    with pytest.raises(TokenSignatureError):
        verify_token(access, REFRESH)
    with pytest.raises(TokenSignatureError):
        verify_token(refresh, ACCESS)


def test_expired_token_is_rejected():
    token = issue_token(TokenPayload(id=1, email="a@example.com"), ACCESS, timedelta(seconds=-5))
    with pytest.raises(TokenExpiredError):
        verify_token(token, ACCESS)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_malformed_token_is_rejected(token):
    with pytest.raises(TokenMalformedError):
        verify_token(token, ACCESS)


def test_token_without_identity_claims_is_malformed():
    token = jwt.encode({"email": "a@example.com", "iat": 0, "exp": 4102444800}, ACCESS, algorithm="HS256")
    with pytest.raises(TokenMalformedError):
        verify_token(token, ACCESS)


def test_token_failures_are_unauthorized():
    with pytest.raises(UnauthorizedError) as exc_info:
        verify_token("garbage", ACCESS)
    assert exc_info.value.status_code == 401


def test_issuer_uses_configured_lifetimes():
    settings = get_settings()
    issuer = TokenIssuer(settings)
    assert issuer.access_ttl == timedelta(seconds=settings.access_token_ttl)
    assert issuer.refresh_ttl == timedelta(seconds=settings.refresh_token_ttl)

    payload = TokenPayload(id=3, email="c@example.com")
    assert issuer.verify_access(issuer.issue_access(payload)) == payload
    assert issuer.verify_refresh(issuer.issue_refresh(payload)) == payload
    with pytest.raises(TokenSignatureError):
        issuer.verify_refresh(issuer.issue_access(payload))


def test_issuer_refuses_shared_secret():
    settings = Settings(
        api_key=None,
        access_secret="same-secret-0123456789abcdefghijklmn",
        refresh_secret="same-secret-0123456789abcdefghijklmn",
        access_token_ttl=60,
        refresh_token_ttl=3600,
        database_url="sqlite+aiosqlite:///:memory:",
        todo_ownership_check=True,
        log_level="INFO",
        log_json=False,
    )
    with pytest.raises(ValueError):
        TokenIssuer(settings)
