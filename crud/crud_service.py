from __future__ import annotations

from typing import List, Optional

from crud.crud_repo import SurrealCrudRepo
from entities.entity_models import Entity


class CrudService:
    """Pass-through between the endpoint handlers and one repository.

    The only logic is on update, where the id from the request path
    replaces whatever id the body carried.
    """

    def __init__(self, repo: SurrealCrudRepo) -> None:
        self.repo = repo

    async def find_all(self) -> List[Entity]:
        return await self.repo.list_all()

    async def find_by_id(self, entity_id: str) -> Optional[Entity]:
        return await self.repo.find_by_id(entity_id)

    async def create(self, entity: Entity) -> Entity:
        return await self.repo.save(entity)

    async def update(self, entity_id: str, entity: Entity) -> Entity:
        entity = entity.model_copy(update={"id": entity_id})
        return await self.repo.save(entity)

    async def delete(self, entity_id: str) -> None:
        await self.repo.delete_by_id(entity_id)
