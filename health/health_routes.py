from __future__ import annotations

import logging
import os
import platform
import socket
import time
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from surrealdb import AsyncSurreal

from crud.crud_repo import SurrealCrudRepo
from entities.resources import RESOURCES
from settings.db import get_db


logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

_STARTED_AT = time.monotonic()


def _uptime_seconds() -> int:
    return round(time.monotonic() - _STARTED_AT)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


async def surreal_status(db: AsyncSurreal) -> Dict[str, str]:
    try:
        await db.query("INFO FOR DB")
    except Exception as exc:
        logger.warning("SurrealDB health check failed: %s", exc)
        return {"status": "error", "error": str(exc)}
    return {"status": "ok"}


@router.get("/ping")
async def ping() -> Dict[str, bool]:
    return {"pong": True}


@router.get("/health")
async def health(db: AsyncSurreal = Depends(get_db)) -> JSONResponse:
    surrealdb = await surreal_status(db)
    overall = "ok" if surrealdb["status"] == "ok" else "degraded"
    body: Dict[str, Any] = {
        "status": overall,
        "timestamp": _now_iso(),
        "uptimeSeconds": _uptime_seconds(),
        "host": {
            "hostname": socket.gethostname(),
            "platform": platform.system().lower(),
            "cpuCount": os.cpu_count(),
        },
        "services": {"surrealdb": surrealdb},
    }
    return JSONResponse(status_code=200 if overall == "ok" else 503, content=body)


@router.get("/metrics")
async def metrics(db: AsyncSurreal = Depends(get_db)) -> Dict[str, Any]:
    counts = {}
    for resource in RESOURCES:
        counts[resource.collection] = await SurrealCrudRepo(db, resource).count()
    return {
        "timestamp": _now_iso(),
        "counts": counts,
        "process": {"uptimeSeconds": _uptime_seconds()},
    }
