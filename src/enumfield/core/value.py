"""Enum values: a record's current label backed by its stored code."""

from dataclasses import dataclass
from typing import Optional

from enumfield.core.definition import EnumDefinition
from enumfield.core.errors import UnknownLabelError


@dataclass(frozen=True, eq=False)
class EnumValue:
    """
    Immutable label/code pair bound to a definition.

    Compares equal to another value with the same label and code whose
    definition shares the same leading labels (one may extend the other), and
    to its label string, so `user.role == "admin"` reads naturally.
    """

    definition: EnumDefinition
    code: int

    def __post_init__(self) -> None:
        # Fails with UnknownCodeError for codes the definition lacks
        self.definition.decode(self.code)

    @classmethod
    def of(
        cls,
        definition: EnumDefinition,
        label: Optional[str] = None,
        default: Optional[str] = None,
    ) -> "EnumValue":
        """Build a value from a label, falling back to default when label is None."""
        chosen = label if label is not None else default
        if chosen is None:
            raise UnknownLabelError(None, definition.labels)
        return cls(definition, definition.encode(chosen))

    @property
    def label(self) -> str:
        return self.definition.labels[self.code]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EnumValue):
            shared = min(len(self.definition), len(other.definition))
            return (
                self.code == other.code
                and self.definition.labels[:shared] == other.definition.labels[:shared]
            )
        if isinstance(other, str):
            return self.label == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.label)

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        return f"<EnumValue({self.label!r}, code={self.code})>"


def is_label(value: EnumValue, label: str) -> bool:
    """True iff value currently holds label. Unknown labels raise UnknownLabelError."""
    return value.code == value.definition.encode(label)


def set_label(value: EnumValue, label: str) -> EnumValue:
    """Return a value holding label. Nothing is persisted."""
    return EnumValue(value.definition, value.definition.encode(label))
