from sqlalchemy import Select, func, select, update
from sqlalchemy.orm import selectinload

from articles_api.models import Article, Newspaper
from articles_api.pagination import PaginationParameters, PaginationResult, total_pages
from articles_api.repositories.base import Repository


def _name_equals(name: str):
    return func.lower(Newspaper.name) == name.lower()


class NewspaperRepository(Repository[Newspaper]):
    model = Newspaper

    def _select(self) -> Select:
        # Articles are loaded for the articlesCount field of the DTO.
        return select(Newspaper).options(selectinload(Newspaper.articles))

    def _default_order(self):
        return Newspaper.name

    async def get_all_paginated(self, params: PaginationParameters) -> PaginationResult[Newspaper]:
        """Page through newspapers by name, paginating in SQL (LIMIT/OFFSET)."""
        total = await self._count()
        q = (
            self._select()
            .order_by(Newspaper.name)
            .offset(params.offset)
            .limit(params.page_size)
        )
        return PaginationResult(
            items=await self._all(q),
            total_count=total,
            page_number=params.page_number,
            page_size=params.page_size,
            total_pages=total_pages(total, params.page_size),
        )

    async def get_by_name(self, name: str) -> Newspaper | None:
        result = await self.db.execute(self._select().where(_name_equals(name)))
        return result.unique().scalar_one_or_none()

    async def get_active(self) -> list[Newspaper]:
        q = self._select().where(Newspaper.is_active.is_(True)).order_by(Newspaper.name)
        return await self._all(q)

    async def exists_by_name(self, name: str) -> bool:
        q = select(Newspaper.id).where(_name_equals(name)).limit(1)
        return (await self.db.execute(q)).scalar_one_or_none() is not None

    async def delete(self, entity_id: int) -> bool:
        # Detach the articles explicitly: SQLite does not enforce ON DELETE SET NULL
        # unless foreign keys are switched on for the connection.
        await self.db.execute(
            update(Article).where(Article.newspaper_id == entity_id).values(newspaper_id=None)
        )
        return await super().delete(entity_id)
