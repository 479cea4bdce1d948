from fastapi import APIRouter, Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.gate import public
from app.core.response import EnvelopeRoute
from app.database import get_db
from app.schemas.auth import AccessTokenOut, LoginPayload, TokenPair
from app.services.auth_service import AuthService

router = APIRouter(route_class=EnvelopeRoute)
service = AuthService()


def bearer_value(header: str | None) -> str | None:
    """``"Bearer <token>"`` -> ``"<token>"``; anything else -> None."""
    if not header:
        return None
    parts = header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]


@router.post("/login", response_model=TokenPair, status_code=200)
@public
async def login(payload: LoginPayload, db: AsyncSession = Depends(get_db)):
    return await service.login(db, payload)


@router.post("/refresh-token", response_model=AccessTokenOut, status_code=200)
@public
async def refresh_token(
    refresh_token: str | None = Header(default=None, alias="Refresh-Token", description="Bearer <token>"),
    db: AsyncSession = Depends(get_db),
):
    return await service.refresh(db, bearer_value(refresh_token))
