"""
Article queries.

Every filtered read has a matching count query; the service issues both
and paginates the materialised list itself.  The newspaper is joined
eagerly on every read so DTOs can carry its name without lazy loads.
"""
from sqlalchemy import Select, select
from sqlalchemy.orm import joinedload

from articles_api.models import Article
from articles_api.repositories.base import Repository


def _tag_filter(tag: str):
    # Case-insensitive substring match over the comma-separated tag string.
    return Article.tags.icontains(tag, autoescape=True)


def _newest_first():
    return Article.created_at.desc(), Article.id.desc()


class ArticleRepository(Repository[Article]):
    model = Article

    def _select(self) -> Select:
        return select(Article).options(joinedload(Article.newspaper))

    async def get_by_title(self, title: str) -> Article | None:
        result = await self.db.execute(self._select().where(Article.title == title))
        return result.unique().scalar_one_or_none()

    async def exists_by_title(self, title: str) -> bool:
        q = select(Article.id).where(Article.title == title).limit(1)
        return (await self.db.execute(q)).scalar_one_or_none() is not None

    async def get_by_tag(self, tag: str) -> list[Article]:
        return await self._all(self._select().where(_tag_filter(tag)).order_by(*_newest_first()))

    async def get_by_tag_count(self, tag: str) -> int:
        return await self._count(_tag_filter(tag))

    async def get_published(self) -> list[Article]:
        q = self._select().where(Article.is_published.is_(True)).order_by(*_newest_first())
        return await self._all(q)

    async def get_published_count(self) -> int:
        return await self._count(Article.is_published.is_(True))

    async def get_by_newspaper(self, newspaper_id: int) -> list[Article]:
        q = self._select().where(Article.newspaper_id == newspaper_id).order_by(*_newest_first())
        return await self._all(q)

    async def get_by_newspaper_count(self, newspaper_id: int) -> int:
        return await self._count(Article.newspaper_id == newspaper_id)
