"""Persistence: SQLAlchemy engine, models, and repositories (sql backend)."""
