"""HTTP adapter (FastAPI routers)."""
