from sqlalchemy.ext.asyncio import AsyncSession

from app.models.todo import Todo
from app.repositories.base import BaseRepository


class TodoRepository(BaseRepository[Todo]):
    def __init__(self):
        super().__init__(Todo)

    async def list_for_user(
        self, db: AsyncSession, user_id: int, *, limit: int, offset: int
    ) -> tuple[list[Todo], int]:
        """Newest first."""
        return await self.page(
            db,
            where={"user_id": user_id},
            order_by=(Todo.created_at.desc(), Todo.id.desc()),
            limit=limit,
            offset=offset,
        )
