from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from articles_api.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """
    Generic async data access for one ORM model.

    Repositories flush but never commit; the transaction boundary belongs
    to the ``get_db`` dependency.  Subclasses set ``model`` and may override
    ``_select`` to attach eager-loading options and ``_default_order``.
    """

    model: type[ModelT]

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    def _select(self) -> Select:
        return select(self.model)

    def _default_order(self) -> Any:
        return self.model.id

    async def _all(self, query: Select) -> list[ModelT]:
        result = await self.db.execute(query)
        return list(result.unique().scalars().all())

    async def _count(self, *criteria) -> int:
        q = select(func.count()).select_from(self.model)
        if criteria:
            q = q.where(*criteria)
        return (await self.db.execute(q)).scalar_one()

    async def get_by_id(self, entity_id: int) -> ModelT | None:
        q = (
            self._select()
            .where(self.model.id == entity_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(q)
        return result.unique().scalar_one_or_none()

    async def get_all(self) -> list[ModelT]:
        return await self._all(self._select().order_by(self._default_order()))

    async def get_total_count(self) -> int:
        return await self._count()

    async def exists(self, entity_id: int) -> bool:
        q = select(self.model.id).where(self.model.id == entity_id)
        return (await self.db.execute(q)).scalar_one_or_none() is not None

    async def add(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        await self.db.flush()
        # Re-read so eager-loaded relationships are populated.
        return await self.get_by_id(entity.id)

    async def update(self, entity: ModelT) -> ModelT:
        await self.db.flush()
        return await self.get_by_id(entity.id)

    async def delete(self, entity_id: int) -> bool:
        entity = await self.db.get(self.model, entity_id)
        if entity is None:
            return False
        await self.db.delete(entity)
        await self.db.flush()
        return True
