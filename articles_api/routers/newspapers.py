from fastapi import APIRouter, Depends

from articles_api.dependencies import get_newspaper_service, get_pagination
from articles_api.exceptions import NotFoundError
from articles_api.mappers import newspaper_from_create, newspaper_to_response, page_to_response
from articles_api.pagination import PaginationParameters
from articles_api.schemas import NewspaperCreate, NewspaperResponse, NewspaperUpdate, PaginatedResponse
from articles_api.services.newspaper_service import NewspaperService

router = APIRouter(prefix="/api/newspapers", tags=["newspapers"])


@router.get("", response_model=PaginatedResponse[NewspaperResponse])
async def list_newspapers(
    pagination: PaginationParameters = Depends(get_pagination),
    service: NewspaperService = Depends(get_newspaper_service),
):
    result = await service.get_all_newspapers_paginated(pagination)
    return page_to_response(result, newspaper_to_response)


@router.get("/all", response_model=list[NewspaperResponse])
async def list_all_newspapers(service: NewspaperService = Depends(get_newspaper_service)):
    return [newspaper_to_response(n) for n in await service.get_all_newspapers()]


@router.get("/active", response_model=list[NewspaperResponse])
async def list_active_newspapers(service: NewspaperService = Depends(get_newspaper_service)):
    return [newspaper_to_response(n) for n in await service.get_active_newspapers()]


@router.get("/name/{name}", response_model=NewspaperResponse)
async def get_newspaper_by_name(name: str, service: NewspaperService = Depends(get_newspaper_service)):
    newspaper = await service.get_newspaper_by_name(name)
    if newspaper is None:
        raise NotFoundError(f"Newspaper with name '{name}' not found")
    return newspaper_to_response(newspaper)


@router.get("/{newspaper_id}", response_model=NewspaperResponse)
async def get_newspaper(newspaper_id: int, service: NewspaperService = Depends(get_newspaper_service)):
    newspaper = await service.get_newspaper_by_id(newspaper_id)
    if newspaper is None:
        raise NotFoundError(f"Newspaper with ID {newspaper_id} not found")
    return newspaper_to_response(newspaper)


@router.post("", status_code=201, response_model=NewspaperResponse)
async def create_newspaper(
    data: NewspaperCreate,
    service: NewspaperService = Depends(get_newspaper_service),
):
    newspaper = await service.create_newspaper(newspaper_from_create(data))
    return newspaper_to_response(newspaper)


@router.put("/{newspaper_id}", response_model=NewspaperResponse)
async def update_newspaper(
    newspaper_id: int,
    data: NewspaperUpdate,
    service: NewspaperService = Depends(get_newspaper_service),
):
    newspaper = await service.update_newspaper(newspaper_id, data)
    return newspaper_to_response(newspaper)


@router.delete("/{newspaper_id}", status_code=204)
async def delete_newspaper(newspaper_id: int, service: NewspaperService = Depends(get_newspaper_service)):
    if not await service.delete_newspaper(newspaper_id):
        raise NotFoundError(f"Newspaper with ID {newspaper_id} not found")
