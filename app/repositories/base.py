from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import delete as sa_delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.inspection import inspect as sa_inspect
from sqlalchemy.orm import InstrumentedAttribute

T = TypeVar("T")  # SQLAlchemy model class (Declarative)


class BaseRepository(Generic[T]):
    """
    Async repository over one declarative model.
    - Writes only flush; the calling service owns commit/rollback.
    - Filters are plain column equality (``filter_by``).
    """

    def __init__(self, model: type[T]) -> None:
        self.model = model
        self._pk = self._single_pk()

    def _single_pk(self):
        pk_cols = sa_inspect(self.model).primary_key
        if len(pk_cols) != 1:
            raise ValueError(f"{self.model.__name__}: composite primary key is not supported")
        return pk_cols[0]

    async def get(self, session: AsyncSession, pk: Any) -> T | None:
        return await session.get(self.model, pk)

    async def find_one(self, session: AsyncSession, **filters: Any) -> T | None:
        res = await session.execute(select(self.model).filter_by(**filters).limit(1))
        return res.scalars().first()

    async def page(
        self,
        session: AsyncSession,
        *,
        where: dict[str, Any],
        order_by: Sequence[InstrumentedAttribute],
        limit: int,
        offset: int,
    ) -> tuple[list[T], int]:
        """One page of matching rows plus the total number of matches."""
        rows = await session.execute(
            select(self.model).filter_by(**where).order_by(*order_by).limit(limit).offset(offset)
        )
        total = await session.execute(
            select(func.count()).select_from(self.model).filter_by(**where)
        )
        return list(rows.scalars().all()), int(total.scalar_one())

    async def add(self, session: AsyncSession, obj: T) -> T:
        """Insert a new instance; its primary key is set once flushed."""
        if not sa_inspect(obj).transient:
            raise ValueError(f"add(): {obj!r} is already persisted")
        session.add(obj)
        await session.flush()
        return obj

    async def apply(self, session: AsyncSession, obj: T, values: dict[str, Any]) -> T:
        """Copy ``values`` onto a loaded instance, skipping the key and unknown names."""
        columns = {c.key for c in sa_inspect(self.model).columns} - {self._pk.key}
        for name, value in values.items():
            if name in columns:
                setattr(obj, name, value)
        await session.flush()
        return obj

    async def remove(self, session: AsyncSession, pk: Any) -> bool:
        res = await session.execute(sa_delete(self.model).where(self._pk == pk))
        return (res.rowcount or 0) > 0
