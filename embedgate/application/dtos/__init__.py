"""Application DTOs (plain dataclasses; no ORM or pydantic)."""

from embedgate.application.dtos.embed import CachePolicy, EmbedResult, ValidationResult

__all__ = ["CachePolicy", "EmbedResult", "ValidationResult"]
