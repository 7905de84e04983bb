"""API v1: router aggregation."""

from embedgate.api.v1.router import api_router

__all__ = ["api_router"]
