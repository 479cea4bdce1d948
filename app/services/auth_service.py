from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import AppError, UnauthorizedError
from app.core.tokens import TokenIssuer, get_token_issuer
from app.logger import get_logger
from app.schemas.auth import AccessTokenOut, LoginPayload, TokenPair, TokenPayload
from app.services.user_service import UserService

logger = get_logger(__name__)


class AuthService:
    def __init__(self, users: UserService | None = None, issuer: TokenIssuer | None = None):
        self.users = users or UserService()
        self._issuer = issuer

    @property
    def issuer(self) -> TokenIssuer:
        return self._issuer or get_token_issuer()

    async def login(self, db: AsyncSession, payload: LoginPayload) -> TokenPair:
        try:
            user = await self.users.authenticate(db, payload.email, payload.password)
        except AppError as exc:
            logger.info("login_rejected", reason=type(exc).__name__)
            raise

        identity = TokenPayload(id=user.id, email=user.email)
        logger.info("login_succeeded", user_id=user.id)
        return TokenPair(
            accessToken=self.issuer.issue_access(identity),
            refreshToken=self.issuer.issue_refresh(identity),
        )

    async def refresh(self, db: AsyncSession, refresh_token: str | None) -> AccessTokenOut:
        # every failure looks the same to the caller, including a vanished user
        try:
            claims = self.issuer.verify_refresh(refresh_token or "")
            user = await self.users.get_user(db, claims.id)
        except AppError as exc:
            logger.info("refresh_rejected", reason=type(exc).__name__)
            raise UnauthorizedError("Invalid refresh token")

        identity = TokenPayload(id=user.id, email=user.email)
        return AccessTokenOut(accessToken=self.issuer.issue_access(identity))
