"""Domain value objects."""

from embedgate.domain.value_objects.core import EntryIdentity

__all__ = ["EntryIdentity"]
