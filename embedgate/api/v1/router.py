"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from embedgate.api.v1.dependencies.
"""

from fastapi import APIRouter

from embedgate.api.v1.endpoints import embeds, entries, fields, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(embeds.router, prefix="/embeds", tags=["embeds"])
api_router.include_router(fields.router, prefix="/fields", tags=["fields"])
api_router.include_router(entries.router, prefix="/entries", tags=["entries"])
