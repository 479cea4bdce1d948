from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, InvalidCredentialsError, NotFoundError
from app.core.security import hash_password, verify_password
from app.logger import get_logger
from app.models.user import User
from app.repositories.user_repo import UserRepository
from app.schemas.user import UserCreate

logger = get_logger(__name__)


class UserService:
    def __init__(self, repo: UserRepository | None = None):
        self.repo = repo or UserRepository()

    async def create_user(self, db: AsyncSession, user_in: UserCreate) -> dict:
        if await self.repo.get_by_email(db, user_in.email):
            raise ConflictError("Email already registered")
        user = User(
            name=user_in.name,
            email=user_in.email,
            password=hash_password(user_in.password),
        )
        await self.repo.add(db, user)
        await db.commit()
        logger.info("user_registered", user_id=user.id)
        return {"message": "User created successfully"}

    async def get_user(self, db: AsyncSession, user_id: int) -> User:
        user = await self.repo.get(db, user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    async def authenticate(self, db: AsyncSession, email: str, password: str) -> User:
        user = await self.repo.get_by_email(db, email)
        if not user:
            raise NotFoundError("User not found")
        if not verify_password(password, user.password):
            raise InvalidCredentialsError("Invalid password")
        return user
