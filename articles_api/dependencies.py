"""
FastAPI dependencies: page parameters, per-request service assembly and
bearer-token extraction.

The relational / S3 read-path flag is read here, once per service
construction, and handed to ``ArticleService`` explicitly.
"""
from functools import lru_cache

from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from articles_api.cache import cache
from articles_api.config import settings
from articles_api.database import get_db
from articles_api.exceptions import UnauthorizedError
from articles_api.pagination import PaginationParameters
from articles_api.repositories import ArticleRepository, NewspaperRepository
from articles_api.security import decode_access_token
from articles_api.services.article_service import ArticleService
from articles_api.services.newspaper_service import NewspaperService
from articles_api.services.s3_article_provider import S3ArticleProvider
from articles_api.services.s3_file_provider import S3FileProvider
from articles_api.storage import S3ClientFactory

_bearer = HTTPBearer(auto_error=False)


def get_pagination(
    page_number: int = Query(1, alias="pageNumber", description="Page number (1-based)."),
    page_size: int = Query(
        settings.DEFAULT_PAGE_SIZE,
        alias="pageSize",
        description=f"Items per page, clamped to {settings.MAX_PAGE_SIZE}.",
    ),
) -> PaginationParameters:
    """
    Out-of-range values are clamped, not rejected: ``pageNumber < 1``
    becomes 1, ``pageSize < 1`` falls back to the default and anything
    above ``MAX_PAGE_SIZE`` is capped.
    """
    return PaginationParameters(
        page_number,
        page_size,
        default_page_size=settings.DEFAULT_PAGE_SIZE,
        max_page_size=settings.MAX_PAGE_SIZE,
    )


@lru_cache
def get_s3_client_factory() -> S3ClientFactory:
    return S3ClientFactory.from_settings(settings)


@lru_cache
def get_s3_article_provider() -> S3ArticleProvider:
    # One instance per process: it owns the in-process document cache.
    return S3ArticleProvider(
        get_s3_client_factory(),
        articles_key=settings.S3_ARTICLES_KEY,
        cache=cache,
        ttl=settings.S3_CACHE_TTL,
    )


def get_s3_file_provider(
    client_factory: S3ClientFactory = Depends(get_s3_client_factory),
) -> S3FileProvider:
    return S3FileProvider(client_factory)


def get_article_service(
    db: AsyncSession = Depends(get_db),
    s3_provider: S3ArticleProvider = Depends(get_s3_article_provider),
) -> ArticleService:
    return ArticleService(
        ArticleRepository(db),
        NewspaperRepository(db),
        s3_provider=s3_provider,
        use_s3=settings.USE_S3_ARTICLES,
    )


def get_newspaper_service(db: AsyncSession = Depends(get_db)) -> NewspaperService:
    return NewspaperService(NewspaperRepository(db))


def get_token_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> dict:
    """Verified claims of the request's ``Authorization: Bearer`` token."""
    if credentials is None:
        raise UnauthorizedError("Invalid token format")
    return decode_access_token(credentials.credentials)
