"""
Direct service-layer tests: business rules exercised against the SQLite test
database without going through HTTP.
"""
from datetime import datetime, timezone

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from articles_api.exceptions import DataSourceUnavailableError, InvalidOperationError
from articles_api.models import Article, Newspaper
from articles_api.pagination import PaginationParameters
from articles_api.repositories import ArticleRepository, NewspaperRepository
from articles_api.schemas import ArticleUpdate, NewspaperUpdate
from articles_api.services.article_service import ArticleService
from articles_api.services.newspaper_service import NewspaperService


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _article_service(db: AsyncSession, **kwargs) -> ArticleService:
    return ArticleService(ArticleRepository(db), NewspaperRepository(db), **kwargs)


def _newspaper_service(db: AsyncSession) -> NewspaperService:
    return NewspaperService(NewspaperRepository(db))


def _article(title: str, **overrides) -> Article:
    fields = dict(
        title=title,
        description="",
        content=f"Content of {title}",
        tags="",
        author="Author",
        is_published=False,
    )
    fields.update(overrides)
    return Article(**fields)


def _newspaper(name: str, **overrides) -> Newspaper:
    fields = dict(
        name=name,
        description="",
        publisher="Publisher",
        website="",
        logo_url="",
        founded_date=datetime(2020, 1, 1, tzinfo=timezone.utc),
    )
    fields.update(overrides)
    return Newspaper(**fields)


def _update(title: str, **overrides) -> ArticleUpdate:
    fields = dict(title=title, content=f"Content of {title}", author="Author")
    fields.update(overrides)
    return ArticleUpdate(**fields)


# ---------------------------------------------------------------------------
# ArticleService: writes
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_create_article_sets_server_fields(db_session: AsyncSession):
    service = _article_service(db_session)
    article = _article("Fresh", view_count=999)

    created = await service.create_article(article)

    assert created.id is not None
    assert created.created_at is not None
    assert created.updated_at is None
    assert created.view_count == 0


@pytest.mark.asyncio
async def test_create_article_duplicate_title_rejected(db_session: AsyncSession):
    service = _article_service(db_session)
    await service.create_article(_article("Same Title"))

    with pytest.raises(InvalidOperationError, match="already exists"):
        await service.create_article(_article("Same Title"))


@pytest.mark.asyncio
async def test_create_article_unknown_newspaper_rejected(db_session: AsyncSession):
    service = _article_service(db_session)

    with pytest.raises(InvalidOperationError, match="Newspaper with ID 42 not found"):
        await service.create_article(_article("Orphan", newspaper_id=42))


@pytest.mark.asyncio
async def test_update_title_collision_then_rename(db_session: AsyncSession):
    """Articles A (id 1) and B (id 2): renaming B to A fails, renaming B to C succeeds."""
    service = _article_service(db_session)
    a = await service.create_article(_article("A"))
    b = await service.create_article(_article("B"))
    assert (a.id, b.id) == (1, 2)

    with pytest.raises(InvalidOperationError):
        await service.update_article(b.id, _update("A"))

    updated = await service.update_article(b.id, _update("C"))
    assert updated.id == 2
    assert updated.title == "C"
    assert updated.updated_at is not None

    untouched = await service.get_article_by_id(a.id)
    assert untouched.title == "A"


@pytest.mark.asyncio
async def test_update_keeps_created_at_and_view_count(db_session: AsyncSession):
    service = _article_service(db_session)
    created = await service.create_article(_article("Counted"))
    created.view_count = 12
    await db_session.flush()
    created_at = created.created_at

    updated = await service.update_article(created.id, _update("Counted", tags="x,y", is_published=True))

    assert updated.view_count == 12
    assert updated.created_at == created_at
    assert updated.tags == "x,y"
    assert updated.is_published is True


@pytest.mark.asyncio
async def test_update_same_title_is_allowed(db_session: AsyncSession):
    service = _article_service(db_session)
    created = await service.create_article(_article("Stable"))

    updated = await service.update_article(created.id, _update("Stable", description="new"))
    assert updated.description == "new"


@pytest.mark.asyncio
async def test_update_unknown_article_rejected(db_session: AsyncSession):
    service = _article_service(db_session)
    with pytest.raises(InvalidOperationError, match="Article with ID 99 not found"):
        await service.update_article(99, _update("Nope"))


@pytest.mark.asyncio
async def test_delete_article(db_session: AsyncSession):
    service = _article_service(db_session)
    created = await service.create_article(_article("Doomed"))

    assert await service.delete_article(created.id) is True
    assert await service.get_article_by_id(created.id) is None

    with pytest.raises(InvalidOperationError):
        await service.delete_article(created.id)


# ---------------------------------------------------------------------------
# ArticleService: relational reads
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_three_articles_two_per_page(db_session: AsyncSession):
    service = _article_service(db_session)
    for title in ("One", "Two", "Three"):
        await service.create_article(_article(title))

    first = await service.get_all_articles(PaginationParameters(1, 2))
    assert len(first.items) == 2
    assert first.total_count == 3
    assert first.total_pages == 2

    second = await service.get_all_articles(PaginationParameters(2, 2))
    assert len(second.items) == 1
    assert second.items[0].title == "Three"


@pytest.mark.asyncio
async def test_tag_filter_is_case_insensitive_substring(db_session: AsyncSession):
    service = _article_service(db_session)
    await service.create_article(_article("Py", tags="Python,FastAPI"))
    await service.create_article(_article("Sql", tags="SQL,Database"))

    result = await service.get_articles_by_tag("python", PaginationParameters())
    assert [a.title for a in result.items] == ["Py"]
    assert result.total_count == 1

    result = await service.get_articles_by_tag("AS", PaginationParameters())
    assert {a.title for a in result.items} == {"Py", "Sql"}


@pytest.mark.asyncio
async def test_published_and_by_newspaper(db_session: AsyncSession):
    paper = await _newspaper_service(db_session).create_newspaper(_newspaper("Daily"))
    service = _article_service(db_session)
    await service.create_article(_article("Live", is_published=True, newspaper_id=paper.id))
    await service.create_article(_article("Draft", newspaper_id=paper.id))
    await service.create_article(_article("Loose", is_published=True))

    published = await service.get_published_articles(PaginationParameters())
    assert {a.title for a in published.items} == {"Live", "Loose"}
    assert published.total_count == 2

    by_paper = await service.get_articles_by_newspaper(paper.id, PaginationParameters())
    assert {a.title for a in by_paper.items} == {"Live", "Draft"}
    assert all(a.newspaper.name == "Daily" for a in by_paper.items)


@pytest.mark.asyncio
async def test_get_by_title(db_session: AsyncSession):
    service = _article_service(db_session)
    await service.create_article(_article("Exact Title"))

    assert (await service.get_article_by_title("Exact Title")).title == "Exact Title"
    assert await service.get_article_by_title("Missing") is None


@pytest.mark.asyncio
async def test_s3_flag_without_provider_is_unavailable(db_session: AsyncSession):
    service = _article_service(db_session, use_s3=True)
    assert service.uses_s3

    with pytest.raises(DataSourceUnavailableError):
        await service.get_all_articles(PaginationParameters())


@pytest.mark.asyncio
async def test_writes_go_to_database_when_reading_from_s3(db_session: AsyncSession):
    service = _article_service(db_session, use_s3=True)

    created = await service.create_article(_article("Stored"))

    row = await db_session.scalar(select(Article).where(Article.id == created.id))
    assert row.title == "Stored"


# ---------------------------------------------------------------------------
# NewspaperService
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_create_newspaper_is_active(db_session: AsyncSession):
    service = _newspaper_service(db_session)
    created = await service.create_newspaper(_newspaper("Gazette", is_active=False))

    assert created.is_active is True
    assert created.created_at is not None
    assert await service.exists(created.id)
    assert await service.exists_by_name("GAZETTE")


@pytest.mark.asyncio
async def test_newspaper_names_collide_case_insensitively(db_session: AsyncSession):
    service = _newspaper_service(db_session)
    await service.create_newspaper(_newspaper("Tech Daily"))

    with pytest.raises(InvalidOperationError, match="already exists"):
        await service.create_newspaper(_newspaper("tech daily"))


@pytest.mark.asyncio
async def test_update_newspaper(db_session: AsyncSession):
    service = _newspaper_service(db_session)
    first = await service.create_newspaper(_newspaper("First"))
    await service.create_newspaper(_newspaper("Second"))

    with pytest.raises(InvalidOperationError):
        await service.update_newspaper(
            first.id, NewspaperUpdate(name="SECOND", publisher="P", founded_date=first.founded_date)
        )

    # A change of case only is not a collision with itself.
    updated = await service.update_newspaper(
        first.id,
        NewspaperUpdate(name="FIRST", publisher="New P", founded_date=first.founded_date, is_active=False),
    )
    assert updated.name == "FIRST"
    assert updated.publisher == "New P"
    assert updated.is_active is False
    assert updated.updated_at is not None


@pytest.mark.asyncio
async def test_newspaper_lookups(db_session: AsyncSession):
    service = _newspaper_service(db_session)
    await service.create_newspaper(_newspaper("Zeta"))
    alpha = await service.create_newspaper(_newspaper("Alpha"))
    await service.update_newspaper(
        alpha.id, NewspaperUpdate(name="Alpha", publisher="P", founded_date=alpha.founded_date, is_active=False)
    )

    assert [n.name for n in await service.get_all_newspapers()] == ["Alpha", "Zeta"]
    assert [n.name for n in await service.get_active_newspapers()] == ["Zeta"]
    assert (await service.get_newspaper_by_name("zeta")).name == "Zeta"

    page = await service.get_all_newspapers_paginated(PaginationParameters(2, 1))
    assert [n.name for n in page.items] == ["Zeta"]
    assert page.total_pages == 2


@pytest.mark.asyncio
async def test_delete_newspaper_keeps_articles(db_session: AsyncSession):
    papers = _newspaper_service(db_session)
    articles = _article_service(db_session)
    paper = await papers.create_newspaper(_newspaper("Closing"))
    article = await articles.create_article(_article("Survivor", newspaper_id=paper.id))

    assert await papers.delete_newspaper(paper.id) is True

    survivor = await articles.get_article_by_id(article.id)
    assert survivor is not None
    assert survivor.newspaper_id is None
    assert await papers.get_newspaper_by_id(paper.id) is None

    with pytest.raises(InvalidOperationError):
        await papers.delete_newspaper(paper.id)
