from fastapi import APIRouter, Depends, Response

from articles_api.dependencies import get_article_service, get_pagination
from articles_api.exceptions import NotFoundError
from articles_api.mappers import article_from_create, article_to_response, page_to_response
from articles_api.pagination import PaginationParameters
from articles_api.schemas import ArticleCreate, ArticleResponse, ArticleUpdate, PaginatedResponse
from articles_api.services.article_service import ArticleService

router = APIRouter(prefix="/api/articles", tags=["articles"])

# Fixed paths are registered before "/{article_id}" so they are matched first.


@router.get("", response_model=PaginatedResponse[ArticleResponse])
async def list_articles(
    pagination: PaginationParameters = Depends(get_pagination),
    service: ArticleService = Depends(get_article_service),
):
    result = await service.get_all_articles(pagination)
    return page_to_response(result, article_to_response)


@router.get("/published", response_model=PaginatedResponse[ArticleResponse])
async def list_published_articles(
    pagination: PaginationParameters = Depends(get_pagination),
    service: ArticleService = Depends(get_article_service),
):
    result = await service.get_published_articles(pagination)
    return page_to_response(result, article_to_response)


@router.get("/title/{title}", response_model=ArticleResponse)
async def get_article_by_title(title: str, service: ArticleService = Depends(get_article_service)):
    article = await service.get_article_by_title(title)
    if article is None:
        raise NotFoundError(f"Article with title '{title}' not found")
    return article_to_response(article)


@router.get("/tag/{tag}", response_model=PaginatedResponse[ArticleResponse])
async def list_articles_by_tag(
    tag: str,
    pagination: PaginationParameters = Depends(get_pagination),
    service: ArticleService = Depends(get_article_service),
):
    result = await service.get_articles_by_tag(tag, pagination)
    return page_to_response(result, article_to_response)


@router.get("/newspaper/{newspaper_id}", response_model=PaginatedResponse[ArticleResponse])
async def list_articles_by_newspaper(
    newspaper_id: int,
    pagination: PaginationParameters = Depends(get_pagination),
    service: ArticleService = Depends(get_article_service),
):
    result = await service.get_articles_by_newspaper(newspaper_id, pagination)
    return page_to_response(result, article_to_response)


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(article_id: int, service: ArticleService = Depends(get_article_service)):
    article = await service.get_article_by_id(article_id)
    if article is None:
        raise NotFoundError(f"Article with ID {article_id} not found")
    return article_to_response(article)


@router.post("", status_code=201, response_model=ArticleResponse)
async def create_article(
    data: ArticleCreate,
    response: Response,
    service: ArticleService = Depends(get_article_service),
):
    article = await service.create_article(article_from_create(data))
    response.headers["Location"] = router.url_path_for("get_article", article_id=str(article.id))
    return article_to_response(article)


@router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: int,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
):
    article = await service.update_article(article_id, data)
    return article_to_response(article)


@router.delete("/{article_id}", status_code=204)
async def delete_article(article_id: int, service: ArticleService = Depends(get_article_service)):
    if not await service.delete_article(article_id):
        raise NotFoundError(f"Article with ID {article_id} not found")
