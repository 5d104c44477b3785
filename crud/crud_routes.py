import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from surrealdb import AsyncSurreal

from crud.crud_repo import SurrealCrudRepo
from crud.crud_service import CrudService
from entities.resources import RESOURCES, CrudResource
from settings.db import get_db


logger = logging.getLogger(__name__)


def build_crud_router(resource: CrudResource) -> APIRouter:
    """Build the list/get/create/update/delete routes for one record kind."""
    model = resource.model
    label = model.__name__
    router = APIRouter(prefix=resource.path, tags=[resource.tag])

    def get_service(db: AsyncSurreal = Depends(get_db)) -> CrudService:
        return CrudService(SurrealCrudRepo(db, resource))

    @router.get("", response_model=List[model], name=f"list_{resource.collection}")
    async def list_entities(service: CrudService = Depends(get_service)):
        return await service.find_all()

    @router.get("/{entity_id}", response_model=model, name=f"get_{resource.name}")
    async def get_entity(entity_id: str, service: CrudService = Depends(get_service)):
        entity = await service.find_by_id(entity_id)
        if entity is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")
        return entity

    @router.post("", response_model=model, status_code=status.HTTP_201_CREATED, name=f"create_{resource.name}")
    async def create_entity(entity: model, service: CrudService = Depends(get_service)):
        return await service.create(entity)

    @router.put("/{entity_id}", response_model=model, name=f"update_{resource.name}")
    async def update_entity(entity_id: str, entity: model, service: CrudService = Depends(get_service)):
        if entity.id and entity.id != entity_id:
            logger.info("Ignoring body id %s for %s:%s", entity.id, resource.collection, entity_id)
        return await service.update(entity_id, entity)

    @router.delete(
        "/{entity_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        name=f"delete_{resource.name}",
    )
    async def delete_entity(entity_id: str, service: CrudService = Depends(get_service)) -> Response:
        await service.delete(entity_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


routers = [build_crud_router(resource) for resource in RESOURCES]
