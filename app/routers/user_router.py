from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.gate import CurrentIdentity, public
from app.core.response import EnvelopeRoute
from app.database import get_db
from app.schemas.common import MessageOut
from app.schemas.user import UserCreate, UserOut
from app.services.user_service import UserService

router = APIRouter(route_class=EnvelopeRoute)
service = UserService()


@router.post("/", response_model=MessageOut, status_code=201)
@public
async def create_user(user_in: UserCreate, db: AsyncSession = Depends(get_db)):
    return await service.create_user(db, user_in)


@router.get("/me", response_model=UserOut)
async def read_me(identity: CurrentIdentity, db: AsyncSession = Depends(get_db)):
    return await service.get_user(db, identity.id)
