"""Domain entities.

Pure domain models; no ORM or persistence concerns.
"""

from embedgate.domain.entities.form import EmbedFieldType, FormEntity, FormField

__all__ = ["EmbedFieldType", "FormEntity", "FormField"]
