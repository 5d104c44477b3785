import os
import sys


def pytest_sessionstart(session):
    # Ensure project root is on sys.path so `crud`, `entities` and `settings` resolve
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


# --- Test utilities: Fake in-memory SurrealDB ---
import uuid
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from surrealdb import RecordID


class FakeAsyncSurreal:
    """Implements the subset of ``AsyncSurreal`` the repositories use."""

    def __init__(self) -> None:
        self._tables = {}
        self.queries = []

    def _split(self, thing):
        if isinstance(thing, RecordID):
            return thing.table_name, str(thing.id)
        if ":" in thing:
            table, id_part = thing.split(":", 1)
            return table, id_part
        return thing, None

    def _record(self, table, id_part, content):
        # Return a plain dict like the real client, id as a RecordID
        return {**content, "id": RecordID(table, id_part)}

    async def select(self, thing):
        table, id_part = self._split(thing)
        rows = self._tables.get(table, {})
        if id_part is None:
            return [self._record(table, key, rec) for key, rec in rows.items()]
        rec = rows.get(id_part)
        if rec is None:
            return None
        return self._record(table, id_part, rec)

    async def create(self, table, payload: dict):
        new_id = uuid.uuid4().hex
        content = {k: v for k, v in payload.items() if k != "id"}
        self._tables.setdefault(table, {})[new_id] = content
        return self._record(table, new_id, content)

    async def upsert(self, thing, payload: dict):
        table, id_part = self._split(thing)
        content = {k: v for k, v in payload.items() if k != "id"}
        self._tables.setdefault(table, {})[id_part] = content
        return self._record(table, id_part, content)

    async def delete(self, thing):
        table, id_part = self._split(thing)
        removed = self._tables.get(table, {}).pop(id_part, None)
        return self._record(table, id_part, removed) if removed is not None else None

    async def query(self, query: str, vars: dict | None = None):
        self.queries.append(query)
        if query.strip().upper().startswith("SELECT COUNT() FROM TYPE::TABLE($TB) GROUP ALL"):
            n = len(self._tables.get((vars or {}).get("tb"), {}))
            # Like the real store, an empty table yields no rows
            return [{"count": n}] if n else []
        return [{"result": []}]

    async def close(self):
        pass


@pytest_asyncio.fixture
async def fake_db():
    # Provide a fresh fake DB per test function
    db = FakeAsyncSurreal()
    yield db


@pytest_asyncio.fixture
async def client(fake_db):
    from main import app
    from settings.db import get_db

    app.dependency_overrides[get_db] = lambda: fake_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
