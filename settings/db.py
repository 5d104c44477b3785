from __future__ import annotations

import asyncio
import logging
import pathlib

from surrealdb import AsyncSurreal

from settings.config import settings

logger = logging.getLogger(__name__)

SCHEMA_PATH = pathlib.Path(__file__).resolve().parent / "surreal" / "schema.surql"


db = None
_init_lock = asyncio.Lock()


async def _close_quietly(client: AsyncSurreal) -> None:
    try:
        await client.close()
    except Exception:
        logger.warning("Error closing half-open SurrealDB client", exc_info=True)


# --- Lifecycle management ---
async def init_db():
    """Initialize SurrealDB connection on app startup."""
    logger.info("Connecting to SurrealDB at %s (ns=%s, db=%s)", settings.SURREALDB_URL, settings.SURREALDB_NS, settings.SURREALDB_DB)
    global db
    client = AsyncSurreal(settings.SURREALDB_URL)
    try:
        await client.signin({
            "username": settings.SURREALDB_USER,
            "password": settings.SURREALDB_PASS
            })
    except Exception as e:
        await _close_quietly(client)
        raise Exception(f"Error initializing app database connection. Check your login credentials: {e}") from e

    try:
        await client.use(settings.SURREALDB_NS, settings.SURREALDB_DB)
    except Exception as e:
        await _close_quietly(client)
        raise Exception(f"Error initializing app database connection. Check your namespace and database: {e}") from e

    # Idempotent DEFINE statements; an unreadable schema is not fatal since tables are schemaless
    try:
        schema_sql = SCHEMA_PATH.read_text(encoding="utf-8")
        await client.query(schema_sql)
    except Exception:
        logger.warning("Could not apply schema from %s", SCHEMA_PATH, exc_info=True)

    db = client
    return db


async def close_db():
    """Close SurrealDB connection on app shutdown."""
    global db
    if db is None:
        return
    try:
        await db.close()
    except Exception as e:
        raise Exception("Error closing app database connection") from e
    finally:
        db = None


# --- FastAPI dependencies ---
async def get_db() -> AsyncSurreal:
    """Return the Surreal client for DI and direct usage in scripts.

    Concurrent first calls share a single connection.
    """
    if db is None:
        async with _init_lock:
            if db is None:
                await init_db()
    return db  # type: ignore
