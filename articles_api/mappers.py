"""
Explicit conversions between ORM entities and wire DTOs.

One function per direction and entity/DTO pair.  Entities built from wire
payloads are transient: nothing here touches a session.
"""
from typing import Callable, TypeVar

from articles_api.models import Article, Newspaper
from articles_api.pagination import PaginationResult
from articles_api.schemas import (
    ArticleCreate,
    ArticleResponse,
    ArticleUpdate,
    NewspaperCreate,
    NewspaperResponse,
    NewspaperUpdate,
    PaginatedResponse,
)

E = TypeVar("E")
D = TypeVar("D")


# ---------------------------------------------------------------------------
# Article
# ---------------------------------------------------------------------------

def article_to_response(article: Article) -> ArticleResponse:
    newspaper = article.newspaper
    return ArticleResponse(
        id=article.id,
        title=article.title,
        description=article.description,
        content=article.content,
        tags=article.tags,
        author=article.author,
        created_at=article.created_at,
        updated_at=article.updated_at,
        is_published=article.is_published,
        view_count=article.view_count,
        newspaper_id=article.newspaper_id,
        newspaper_name=newspaper.name if newspaper is not None else None,
    )


def article_from_response(dto: ArticleResponse) -> Article:
    """Rebuild a detached Article from a stored DTO (object-store documents)."""
    article = Article(
        id=dto.id,
        title=dto.title,
        description=dto.description,
        content=dto.content,
        tags=dto.tags,
        author=dto.author,
        created_at=dto.created_at,
        updated_at=dto.updated_at,
        is_published=dto.is_published,
        view_count=dto.view_count,
        newspaper_id=dto.newspaper_id,
    )
    if dto.newspaper_id is not None and dto.newspaper_name is not None:
        article.newspaper = Newspaper(id=dto.newspaper_id, name=dto.newspaper_name)
    return article


def article_from_create(dto: ArticleCreate) -> Article:
    # created_at / view_count are assigned by the service.
    return Article(
        title=dto.title,
        description=dto.description,
        content=dto.content,
        tags=dto.tags,
        author=dto.author,
        is_published=dto.is_published,
        newspaper_id=dto.newspaper_id,
    )


def apply_article_update(article: Article, dto: ArticleUpdate) -> None:
    article.title = dto.title
    article.description = dto.description
    article.content = dto.content
    article.tags = dto.tags
    article.author = dto.author
    article.is_published = dto.is_published
    article.newspaper_id = dto.newspaper_id


# ---------------------------------------------------------------------------
# Newspaper
# ---------------------------------------------------------------------------

def newspaper_to_response(newspaper: Newspaper) -> NewspaperResponse:
    return NewspaperResponse(
        id=newspaper.id,
        name=newspaper.name,
        description=newspaper.description,
        publisher=newspaper.publisher,
        website=newspaper.website,
        logo_url=newspaper.logo_url,
        founded_date=newspaper.founded_date,
        created_at=newspaper.created_at,
        updated_at=newspaper.updated_at,
        is_active=newspaper.is_active,
        articles_count=len(newspaper.articles),
    )


def newspaper_from_create(dto: NewspaperCreate) -> Newspaper:
    return Newspaper(
        name=dto.name,
        description=dto.description,
        publisher=dto.publisher,
        website=dto.website,
        logo_url=dto.logo_url,
        founded_date=dto.founded_date,
    )


def apply_newspaper_update(newspaper: Newspaper, dto: NewspaperUpdate) -> None:
    newspaper.name = dto.name
    newspaper.description = dto.description
    newspaper.publisher = dto.publisher
    newspaper.website = dto.website
    newspaper.logo_url = dto.logo_url
    newspaper.founded_date = dto.founded_date
    newspaper.is_active = dto.is_active


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------

def page_to_response(result: PaginationResult[E], convert: Callable[[E], D]) -> PaginatedResponse[D]:
    return PaginatedResponse(
        items=[convert(item) for item in result.items],
        total_count=result.total_count,
        page_number=result.page_number,
        page_size=result.page_size,
        total_pages=result.total_pages,
    )
