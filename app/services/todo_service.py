from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.core.exceptions import NotFoundError
from app.models.todo import Todo
from app.repositories.todo_repo import TodoRepository
from app.schemas.auth import TokenPayload
from app.schemas.todo import TodoCreate, TodoOut, TodoUpdate


class TodoService:
    """Todo CRUD for the calling identity.

    With ``ownership_check`` enabled, reading, updating or deleting another
    user's todo by id behaves as if the todo does not exist. Disabled, any
    authenticated caller may act on any todo id.
    """

    def __init__(self, repo: TodoRepository | None = None, ownership_check: bool | None = None):
        self.repo = repo or TodoRepository()
        self._ownership_check = ownership_check

    @property
    def ownership_check(self) -> bool:
        if self._ownership_check is None:
            return get_settings().todo_ownership_check
        return self._ownership_check

    async def create_todo(self, db: AsyncSession, todo_in: TodoCreate, identity: TokenPayload) -> dict:
        todo = Todo(**todo_in.model_dump(), user_id=identity.id)
        await self.repo.add(db, todo)
        await db.commit()
        return {"message": "Todo created successfully"}

    async def list_todos(self, db: AsyncSession, identity: TokenPayload, *, limit: int, offset: int) -> dict:
        todos, total = await self.repo.list_for_user(db, identity.id, limit=limit, offset=offset)
        return {
            "data": [TodoOut.model_validate(t) for t in todos],
            "meta": {"total": total, "limit": limit, "offset": offset},
        }

    async def get_todo(self, db: AsyncSession, todo_id: int, identity: TokenPayload) -> Todo:
        todo = await self.repo.get(db, todo_id)
        if not todo or (self.ownership_check and todo.user_id != identity.id):
            raise NotFoundError("Todo not found")
        return todo

    async def update_todo(
        self, db: AsyncSession, todo_id: int, todo_in: TodoUpdate, identity: TokenPayload
    ) -> dict:
        todo = await self.get_todo(db, todo_id, identity)
        await self.repo.apply(db, todo, todo_in.model_dump(exclude_unset=True, exclude_none=True))
        await db.commit()
        return {"message": "Todo updated successfully"}

    async def delete_todo(self, db: AsyncSession, todo_id: int, identity: TokenPayload) -> dict:
        await self.get_todo(db, todo_id, identity)
        await self.repo.remove(db, todo_id)
        await db.commit()
        return {"message": "Todo deleted successfully"}
