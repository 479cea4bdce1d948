from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.gate import CurrentIdentity
from app.core.response import EnvelopeRoute
from app.database import get_db
from app.schemas.common import MessageOut
from app.schemas.todo import TodoCreate, TodoOut, TodoPage, TodoUpdate
from app.services.todo_service import TodoService

router = APIRouter(route_class=EnvelopeRoute)
service = TodoService()


@router.post("/", response_model=MessageOut, status_code=201)
async def create_todo(todo_in: TodoCreate, identity: CurrentIdentity, db: AsyncSession = Depends(get_db)):
    return await service.create_todo(db, todo_in, identity)


@router.get("/", response_model=TodoPage)
async def list_todos(
    identity: CurrentIdentity,
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    return await service.list_todos(db, identity, limit=limit, offset=offset)


@router.get("/{todo_id}", response_model=TodoOut)
async def get_todo(todo_id: int, identity: CurrentIdentity, db: AsyncSession = Depends(get_db)):
    return await service.get_todo(db, todo_id, identity)


@router.patch("/{todo_id}", response_model=MessageOut)
async def update_todo(
    todo_id: int, todo_in: TodoUpdate, identity: CurrentIdentity, db: AsyncSession = Depends(get_db)
):
    return await service.update_todo(db, todo_id, todo_in, identity)


@router.delete("/{todo_id}", response_model=MessageOut)
async def delete_todo(todo_id: int, identity: CurrentIdentity, db: AsyncSession = Depends(get_db)):
    return await service.delete_todo(db, todo_id, identity)
