"""Health check endpoint. No dependencies; used for liveness probes."""

from fastapi import APIRouter, Request

from embedgate.core.config import get_settings
from embedgate.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    """Return ok plus whether the embed cache backend is usable.

    A disconnected Redis store does not fail the probe: embeds still
    resolve, they are just not cached.
    """
    settings = get_settings()
    if settings.meta_store_backend == "sql":
        available = True
    else:
        store = getattr(request.app.state, "meta_store", None)
        available = store is not None and store.is_available()
    return HealthResponse(
        meta_store=settings.meta_store_backend,
        meta_store_available=available,
    )
