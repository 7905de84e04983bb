"""Form domain entities.

A minimal view of the forms framework: a form and the field definitions
attached to it, plus the descriptor of the embed field type. Only what the
invalidation sweep needs to enumerate fields by type.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from embedgate.core.constants import EMBED_FIELD_TYPE
from embedgate.domain.exceptions import ValidationException


@dataclass(frozen=True)
class EmbedFieldType:
    """Descriptor for the field type whose values render as embeds.

    Passed explicitly to whatever enumerates or renders fields instead of
    being registered in a global field registry.
    """

    type: str = EMBED_FIELD_TYPE


@dataclass(frozen=True)
class FormField:
    """Field definition on a form (id and type only)."""

    id: int
    type: str


@dataclass
class FormEntity:
    """Form with its field definitions. Validation runs on construction."""

    id: int
    fields: list[FormField] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise ValidationException if the form id is not a positive integer."""
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id <= 0:
            raise ValidationException("Form ID must be a positive integer", field="id")

    def fields_of_type(self, field_type: str) -> list[FormField]:
        """Return every field of the given type, in form order."""
        return [f for f in self.fields if f.type == field_type]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FormEntity":
        """Build from a forms-framework form payload ({"id": .., "fields": [..]})."""
        raw_fields: Iterable[Mapping[str, Any]] = data.get("fields") or []
        return cls(
            id=int(data["id"]),
            fields=[FormField(id=int(f["id"]), type=str(f.get("type", ""))) for f in raw_fields],
        )
