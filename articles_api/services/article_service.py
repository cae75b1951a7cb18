"""
Article service: business rules and the dual-datasource read path.

Design notes
------------
- Reads come either from the relational store or from the S3 JSON
  document, chosen once by the ``use_s3`` constructor flag.  Writes always
  go to the relational store.
- Relational reads pair a list query with a count query; both paths
  paginate the materialised list in memory.
- Every rule violation (duplicate title, unknown id, unknown newspaper)
  raises ``InvalidOperationError``.
"""
import logging
from datetime import datetime, timezone

from articles_api.exceptions import DataSourceUnavailableError, InvalidOperationError
from articles_api.mappers import apply_article_update
from articles_api.models import Article
from articles_api.pagination import PaginationParameters, PaginationResult, paginate
from articles_api.repositories import ArticleRepository, NewspaperRepository
from articles_api.schemas import ArticleUpdate
from articles_api.services.s3_article_provider import S3ArticleProvider

logger = logging.getLogger(__name__)


def _has_tag(article: Article, tag: str) -> bool:
    return tag.lower() in (article.tags or "").lower()


class ArticleService:
    def __init__(
        self,
        repository: ArticleRepository,
        newspapers: NewspaperRepository,
        s3_provider: S3ArticleProvider | None = None,
        use_s3: bool = False,
    ) -> None:
        self._repository = repository
        self._newspapers = newspapers
        self._s3_provider = s3_provider
        self._use_s3 = use_s3

    @property
    def uses_s3(self) -> bool:
        return self._use_s3

    def _provider(self) -> S3ArticleProvider:
        if self._s3_provider is None:
            raise DataSourceUnavailableError("S3 article provider is not configured")
        return self._s3_provider

    # ------------------------------------------------------------------
    # Single-article reads
    # ------------------------------------------------------------------

    async def get_article_by_id(self, article_id: int) -> Article | None:
        if self._use_s3:
            return await self._provider().get_article_by_id(article_id)
        return await self._repository.get_by_id(article_id)

    async def get_article_by_title(self, title: str) -> Article | None:
        if self._use_s3:
            return await self._provider().get_article_by_title(title)
        return await self._repository.get_by_title(title)

    # ------------------------------------------------------------------
    # Paginated reads
    # ------------------------------------------------------------------

    async def get_all_articles(self, params: PaginationParameters) -> PaginationResult[Article]:
        if self._use_s3:
            articles = await self._provider().get_all_articles()
            return paginate(articles, len(articles), params)

        articles = await self._repository.get_all()
        total = await self._repository.get_total_count()
        return paginate(articles, total, params)

    async def get_articles_by_tag(self, tag: str, params: PaginationParameters) -> PaginationResult[Article]:
        if self._use_s3:
            articles = [a for a in await self._provider().get_all_articles() if _has_tag(a, tag)]
            return paginate(articles, len(articles), params)

        articles = await self._repository.get_by_tag(tag)
        total = await self._repository.get_by_tag_count(tag)
        return paginate(articles, total, params)

    async def get_published_articles(self, params: PaginationParameters) -> PaginationResult[Article]:
        if self._use_s3:
            articles = [a for a in await self._provider().get_all_articles() if a.is_published]
            return paginate(articles, len(articles), params)

        articles = await self._repository.get_published()
        total = await self._repository.get_published_count()
        return paginate(articles, total, params)

    async def get_articles_by_newspaper(
        self, newspaper_id: int, params: PaginationParameters
    ) -> PaginationResult[Article]:
        if self._use_s3:
            articles = [
                a for a in await self._provider().get_all_articles() if a.newspaper_id == newspaper_id
            ]
            return paginate(articles, len(articles), params)

        articles = await self._repository.get_by_newspaper(newspaper_id)
        total = await self._repository.get_by_newspaper_count(newspaper_id)
        return paginate(articles, total, params)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def _check_newspaper(self, newspaper_id: int | None) -> None:
        if newspaper_id is not None and not await self._newspapers.exists(newspaper_id):
            raise InvalidOperationError(f"Newspaper with ID {newspaper_id} not found.")

    async def create_article(self, article: Article) -> Article:
        if await self._repository.exists_by_title(article.title):
            raise InvalidOperationError(f"Article with title '{article.title}' already exists.")
        await self._check_newspaper(article.newspaper_id)

        article.created_at = datetime.now(timezone.utc)
        article.updated_at = None
        article.view_count = 0

        created = await self._repository.add(article)
        logger.info("Created article id=%s title=%r", created.id, created.title)
        return created

    async def update_article(self, article_id: int, changes: ArticleUpdate) -> Article:
        existing = await self._repository.get_by_id(article_id)
        if existing is None:
            raise InvalidOperationError(f"Article with ID {article_id} not found.")

        # Validate before touching the entity so autoflush never writes a
        # colliding title.
        if changes.title != existing.title and await self._repository.exists_by_title(changes.title):
            raise InvalidOperationError(f"Article with title '{changes.title}' already exists.")
        await self._check_newspaper(changes.newspaper_id)

        # created_at and view_count are left as stored.
        apply_article_update(existing, changes)
        existing.updated_at = datetime.now(timezone.utc)

        updated = await self._repository.update(existing)
        logger.info("Updated article id=%s", article_id)
        return updated

    async def delete_article(self, article_id: int) -> bool:
        if not await self._repository.exists(article_id):
            raise InvalidOperationError(f"Article with ID {article_id} not found.")

        deleted = await self._repository.delete(article_id)
        logger.info("Deleted article id=%s: %s", article_id, deleted)
        return deleted
