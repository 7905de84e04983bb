"""Domain value objects for the embed cache gate.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from dataclasses import dataclass


def _validate_positive_id(value: int, field_name: str) -> None:
    """Raise ValueError unless value is a positive int (bool excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be an integer, got {type(value).__name__}")
    if value <= 0:
        raise ValueError(f"{field_name} must be positive, got {value}")


@dataclass(frozen=True)
class EntryIdentity:
    """Identity triple scoping one cacheable embed.

    form_id and field_id are stable for the lifetime of a field definition
    and select the cache key; entry_id selects the per-entry meta partition
    the key is stored under.
    """

    form_id: int
    field_id: int
    entry_id: int

    def __post_init__(self) -> None:
        """Validate all three components.

        Raises:
            ValueError: If any component is not a positive integer.
        """
        _validate_positive_id(self.form_id, "form_id")
        _validate_positive_id(self.field_id, "field_id")
        _validate_positive_id(self.entry_id, "entry_id")
