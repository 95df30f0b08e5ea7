# src/chirpy/api/v1/endpoints/system.py
"""Health and admin endpoints for the Chirpy API."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, PlainTextResponse

from chirpy.api.v1.dependencies import HitCounterDep
from chirpy.core.settings import settings

router = APIRouter(tags=["system"])
admin_router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/healthz", response_class=PlainTextResponse)
def healthz() -> str:
    """Readiness probe."""
    return "OK"


@admin_router.get("/metrics", response_class=HTMLResponse)
def metrics(hits: HitCounterDep) -> str:
    """Render the number of API hits since start or last reset."""
    return (
        "<html><body>"
        f"<h1>Welcome, {settings.app_name} Admin</h1>"
        f"<p>{settings.app_name} has been visited {hits.value} times!</p>"
        "</body></html>"
    )


@admin_router.post("/reset", response_class=PlainTextResponse)
def reset(hits: HitCounterDep) -> str:
    """Reset the hit counter."""
    hits.reset()
    return "Hits reset to 0"
