"""
Article reads from a single JSON document in S3.

The document is a JSON array of article objects (the ``ArticleResponse``
shape, camelCase or snake_case keys).  It is fetched whole, validated and
cached for ``ttl`` seconds; callers filter and paginate the returned list.
Title lookups also cache the resolved article under a per-title key.

Two cache tiers: an in-process ``TTLCache`` owned by the provider, then the
shared Redis ``CacheManager``.  With Redis down the process tier alone keeps
S3 to one fetch per TTL window, so the provider must outlive a request.

Any failure to reach S3 or to parse the document is raised as
``DataSourceUnavailableError`` so the HTTP layer answers 503.
"""
import logging

from botocore.exceptions import ClientError
from cachetools import TTLCache
from pydantic import TypeAdapter, ValidationError

from articles_api.cache import CacheManager
from articles_api.exceptions import DataSourceUnavailableError
from articles_api.mappers import article_from_response, article_to_response
from articles_api.models import Article
from articles_api.schemas import ArticleResponse
from articles_api.storage import S3ClientFactory

logger = logging.getLogger(__name__)

ALL_ARTICLES_CACHE_KEY = "s3:articles:all"
DEFAULT_CACHE_TTL = 15 * 60
LOCAL_CACHE_SIZE = 1024

# A bare JSON ``null`` document reads as no articles.
_document_adapter = TypeAdapter(list[ArticleResponse] | None)


def title_cache_key(title: str) -> str:
    return f"{ALL_ARTICLES_CACHE_KEY}:title:{title.lower()}"


class S3ArticleProvider:
    def __init__(
        self,
        client_factory: S3ClientFactory | None,
        articles_key: str,
        cache: CacheManager,
        ttl: int = DEFAULT_CACHE_TTL,
    ) -> None:
        self._client_factory = client_factory
        self._articles_key = articles_key
        self._cache = cache
        self._ttl = ttl
        # Holds ArticleResponse DTOs; Articles are rebuilt per call so callers
        # never share ORM instances.
        self._local: TTLCache = TTLCache(maxsize=LOCAL_CACHE_SIZE, ttl=ttl)

    async def _load_all(self) -> list[ArticleResponse]:
        dtos = self._local.get(ALL_ARTICLES_CACHE_KEY)
        if dtos is not None:
            return dtos

        cached = await self._cache.get(ALL_ARTICLES_CACHE_KEY)
        if cached is not None:
            dtos = [ArticleResponse.model_validate(item) for item in cached]
        else:
            dtos = self._parse(await self._fetch_document())
            await self._cache.set(
                ALL_ARTICLES_CACHE_KEY,
                [dto.model_dump(mode="json") for dto in dtos],
                ttl=self._ttl,
            )
            logger.info("Loaded %d article(s) from s3://%s/%s", len(dtos), self._bucket, self._articles_key)

        self._local[ALL_ARTICLES_CACHE_KEY] = dtos
        return dtos

    async def get_all_articles(self) -> list[Article]:
        return [article_from_response(dto) for dto in await self._load_all()]

    async def get_article_by_id(self, article_id: int) -> Article | None:
        for article in await self.get_all_articles():
            if article.id == article_id:
                return article
        return None

    async def get_article_by_title(self, title: str) -> Article | None:
        if not title:
            return None

        cache_key = title_cache_key(title)
        dto = self._local.get(cache_key)
        if dto is not None:
            return article_from_response(dto)

        cached = await self._cache.get(cache_key)
        if cached is not None:
            dto = ArticleResponse.model_validate(cached)
            self._local[cache_key] = dto
            return article_from_response(dto)

        wanted = title.lower()
        for dto in await self._load_all():
            if dto.title.lower() == wanted:
                self._local[cache_key] = dto
                await self._cache.set(cache_key, dto.model_dump(mode="json"), ttl=self._ttl)
                return article_from_response(dto)
        return None

    # ------------------------------------------------------------------
    # Remote document
    # ------------------------------------------------------------------

    @property
    def _bucket(self) -> str:
        return self._client_factory.bucket_name if self._client_factory else ""

    async def _fetch_document(self) -> bytes:
        if self._client_factory is None or not self._client_factory.configured:
            raise DataSourceUnavailableError("S3 client is not configured properly")
        try:
            async with self._client_factory.client() as s3:
                response = await s3.get_object(Bucket=self._bucket, Key=self._articles_key)
                return await response["Body"].read()
        except ClientError as exc:
            logger.error("S3 get_object failed for %s: %s", self._articles_key, exc)
            raise DataSourceUnavailableError(f"S3 service error: {exc}") from exc
        except Exception as exc:
            logger.error("Error reading %s from S3: %s", self._articles_key, exc)
            raise DataSourceUnavailableError(f"Error reading from S3: {exc}") from exc

    def _parse(self, body: bytes) -> list[ArticleResponse]:
        try:
            return _document_adapter.validate_json(body) or []
        except ValidationError as exc:
            logger.error("Malformed articles document %s: %s", self._articles_key, exc)
            raise DataSourceUnavailableError(f"Malformed articles document: {exc.error_count()} error(s)") from exc
