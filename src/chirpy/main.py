# src/chirpy/main.py
"""Main entry point for the Chirpy application."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from chirpy.api.v1 import (
    admin_router,
    auth_router,
    chirps_router,
    system_router,
    users_router,
)
from chirpy.api.v1.dependencies import get_store
from chirpy.core.settings import settings
from chirpy.db.store import PersistenceError
from chirpy.services.metrics import get_hit_counter

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    store = app.dependency_overrides.get(get_store, get_store)()
    store.ensure_exists()
    logger.info("Serving %s with document %s", settings.app_name, store.path)
    yield


app = FastAPI(
    title="Chirpy API",
    description="Short text posts backed by a single JSON document",
    version=settings.app_version,
    lifespan=lifespan,
)


@app.middleware("http")
async def count_api_hits(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    if request.url.path.startswith("/api"):
        get_hit_counter().increment()
    return await call_next(request)


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage failure"},
    )


# Include API routers
app.include_router(system_router, prefix="/api")
app.include_router(users_router, prefix="/api")
app.include_router(auth_router, prefix="/api")
app.include_router(chirps_router, prefix="/api")
app.include_router(admin_router)
