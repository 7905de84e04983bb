"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from embedgate.domain.entities import EmbedFieldType, FormEntity, FormField
from embedgate.domain.enums import ResolutionOutcome
from embedgate.domain.exceptions import (
    AuthorizationException,
    CacheInvalidationException,
    EmbedGateException,
    MetaStoreUnavailableException,
    SqlNotConfiguredException,
    ValidationException,
)
from embedgate.domain.value_objects import EntryIdentity

__all__ = [
    "AuthorizationException",
    "CacheInvalidationException",
    "EmbedFieldType",
    "EmbedGateException",
    "EntryIdentity",
    "FormEntity",
    "FormField",
    "MetaStoreUnavailableException",
    "ResolutionOutcome",
    "SqlNotConfiguredException",
    "ValidationException",
]
