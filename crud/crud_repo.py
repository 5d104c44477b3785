from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from surrealdb import AsyncSurreal, RecordID

from crud.errors import StoreError
from entities.entity_models import Entity
from entities.resources import CrudResource


logger = logging.getLogger(__name__)


def record_key(value: Any) -> str:
    """Return the bare key of a record id (``RecordID`` or ``"table:key"``)."""
    if isinstance(value, RecordID):
        return str(value.id)
    text = str(value)
    return text.split(":", 1)[1] if ":" in text else text


def _single(result: Any) -> Optional[Dict[str, Any]]:
    # The client returns either a record or a one-element list depending on the call
    if isinstance(result, list):
        return result[0] if result else None
    return result or None


class SurrealCrudRepo:
    """Find-all / find-by-id / upsert / delete against one SurrealDB table."""

    def __init__(self, db: AsyncSurreal, resource: CrudResource) -> None:
        self.db = db
        self.resource = resource
        self.collection = resource.collection

    async def list_all(self) -> List[Entity]:
        logger.debug("Listing %s", self.collection)
        try:
            records = await self.db.select(self.collection)
        except Exception as exc:
            logger.exception("Error listing collection '%s'", self.collection)
            raise StoreError(self.collection, "list", exc) from exc
        return [self._to_entity(rec) for rec in records or []]

    async def find_by_id(self, entity_id: str) -> Optional[Entity]:
        logger.debug("Fetching %s:%s", self.collection, entity_id)
        try:
            record = _single(await self.db.select(self._thing(entity_id)))
        except Exception as exc:
            logger.exception("Error fetching %s:%s", self.collection, entity_id)
            raise StoreError(self.collection, "find", exc) from exc
        if record is None:
            return None
        return self._to_entity(record)

    async def save(self, entity: Entity) -> Entity:
        payload = entity.to_document()
        try:
            if entity.id:
                record = await self.db.upsert(self._thing(entity.id), payload)
            else:
                record = await self.db.create(self.collection, payload)
        except Exception as exc:
            logger.exception("Error saving into collection '%s'", self.collection)
            raise StoreError(self.collection, "save", exc) from exc
        saved = self._to_entity(_single(record) or {**payload, "id": entity.id})
        logger.info("Saved %s:%s", self.collection, saved.id)
        return saved

    async def delete_by_id(self, entity_id: str) -> None:
        try:
            await self.db.delete(self._thing(entity_id))
        except Exception as exc:
            logger.exception("Error deleting %s:%s", self.collection, entity_id)
            raise StoreError(self.collection, "delete", exc) from exc
        logger.info("Deleted %s:%s", self.collection, entity_id)

    async def count(self) -> int:
        query = "SELECT count() FROM type::table($tb) GROUP ALL"
        try:
            res = await self.db.query(query, {"tb": self.collection})
        except Exception as exc:
            logger.exception("Error counting collection '%s'", self.collection)
            raise StoreError(self.collection, "count", exc) from exc
        # An empty table yields no rows at all
        row = _single(res)
        return int(row.get("count", 0)) if row else 0

    def _thing(self, entity_id: str) -> RecordID:
        return RecordID(self.collection, entity_id)

    def _to_entity(self, record: Dict[str, Any]) -> Entity:
        if record.get("id") is not None:
            record = {**record, "id": record_key(record["id"])}
        return self.resource.model.model_validate(record)
