"""
Newspaper service: CRUD for the Newspaper aggregate.

Names are unique without regard to case.  Deleting a newspaper keeps its
articles and clears their ``newspaper_id``.
"""
import logging
from datetime import datetime, timezone

from articles_api.exceptions import InvalidOperationError
from articles_api.mappers import apply_newspaper_update
from articles_api.models import Newspaper
from articles_api.pagination import PaginationParameters, PaginationResult
from articles_api.repositories import NewspaperRepository
from articles_api.schemas import NewspaperUpdate

logger = logging.getLogger(__name__)


class NewspaperService:
    def __init__(self, repository: NewspaperRepository) -> None:
        self._repository = repository

    async def get_all_newspapers(self) -> list[Newspaper]:
        return await self._repository.get_all()

    async def get_all_newspapers_paginated(self, params: PaginationParameters) -> PaginationResult[Newspaper]:
        return await self._repository.get_all_paginated(params)

    async def get_newspaper_by_id(self, newspaper_id: int) -> Newspaper | None:
        return await self._repository.get_by_id(newspaper_id)

    async def get_newspaper_by_name(self, name: str) -> Newspaper | None:
        return await self._repository.get_by_name(name)

    async def get_active_newspapers(self) -> list[Newspaper]:
        return await self._repository.get_active()

    async def exists(self, newspaper_id: int) -> bool:
        return await self._repository.exists(newspaper_id)

    async def exists_by_name(self, name: str) -> bool:
        return await self._repository.exists_by_name(name)

    async def create_newspaper(self, newspaper: Newspaper) -> Newspaper:
        if await self._repository.exists_by_name(newspaper.name):
            raise InvalidOperationError(f"Newspaper with name '{newspaper.name}' already exists.")

        newspaper.created_at = datetime.now(timezone.utc)
        newspaper.updated_at = None
        newspaper.is_active = True

        created = await self._repository.add(newspaper)
        logger.info("Created newspaper id=%s name=%r", created.id, created.name)
        return created

    async def update_newspaper(self, newspaper_id: int, changes: NewspaperUpdate) -> Newspaper:
        existing = await self._repository.get_by_id(newspaper_id)
        if existing is None:
            raise InvalidOperationError(f"Newspaper with ID {newspaper_id} not found.")

        renamed = changes.name.lower() != existing.name.lower()
        if renamed and await self._repository.exists_by_name(changes.name):
            raise InvalidOperationError(f"Newspaper with name '{changes.name}' already exists.")

        apply_newspaper_update(existing, changes)
        existing.updated_at = datetime.now(timezone.utc)

        updated = await self._repository.update(existing)
        logger.info("Updated newspaper id=%s", newspaper_id)
        return updated

    async def delete_newspaper(self, newspaper_id: int) -> bool:
        if not await self._repository.exists(newspaper_id):
            raise InvalidOperationError(f"Newspaper with ID {newspaper_id} not found.")

        deleted = await self._repository.delete(newspaper_id)
        logger.info("Deleted newspaper id=%s: %s", newspaper_id, deleted)
        return deleted
