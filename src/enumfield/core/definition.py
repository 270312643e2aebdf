"""
Enum definitions: ordered labels mapped to dense integer codes.

A label's position in the definition is its stored code. Appending labels
keeps every existing code; removing or reordering labels does not, and
check_compatible() refuses such changes when a previous definition is given.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Optional

from enumfield.core.errors import (
    DuplicateLabelError,
    IncompatibleDefinitionError,
    InvalidLabelError,
    UnknownCodeError,
    UnknownLabelError,
)


@dataclass(frozen=True)
class EnumDefinition:
    """Immutable, versioned label -> code mapping."""

    labels: tuple[str, ...]
    version: int = 1
    _codes: Mapping[str, int] = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        # A bare string would otherwise split into one label per character
        if isinstance(self.labels, (str, bytes)):
            raise InvalidLabelError(self.labels)
        object.__setattr__(self, "labels", tuple(self.labels))
        _validate_labels(self.labels)
        object.__setattr__(
            self,
            "_codes",
            MappingProxyType({label: code for code, label in enumerate(self.labels)}),
        )

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels)

    def __contains__(self, label: object) -> bool:
        return label in self._codes

    @property
    def codes(self) -> Mapping[str, int]:
        """Read-only label -> code mapping in declaration order."""
        return self._codes

    def encode(self, label: Any) -> int:
        """Return the stored code for a label."""
        try:
            return self._codes[label]
        except (KeyError, TypeError):
            raise UnknownLabelError(label, self.labels) from None

    def decode(self, code: Any) -> str:
        """Return the label for a stored code."""
        # bool is an int subclass but never a valid stored code
        if not isinstance(code, int) or isinstance(code, bool):
            raise UnknownCodeError(code, len(self.labels))
        if not 0 <= code < len(self.labels):
            raise UnknownCodeError(code, len(self.labels))
        return self.labels[code]

    def extend(self, *labels: str) -> "EnumDefinition":
        """Append labels, keeping every existing code and bumping the version."""
        return define(self.labels + tuple(labels), previous=self)


def _validate_labels(labels: tuple[Any, ...]) -> None:
    seen: set[str] = set()
    duplicates: list[str] = []
    for label in labels:
        if not isinstance(label, str) or not label.strip():
            raise InvalidLabelError(label)
        if label in seen and label not in duplicates:
            duplicates.append(label)
        seen.add(label)
    if duplicates:
        raise DuplicateLabelError(duplicates)


def check_compatible(previous: EnumDefinition, current: EnumDefinition) -> None:
    """
    Ensure current keeps every label of previous at the same code.

    Raises:
        IncompatibleDefinitionError: If labels were removed or moved
    """
    removed = [label for label in previous.labels if label not in current]
    moved = {
        label: (code, current.encode(label))
        for label, code in previous.codes.items()
        if label in current and current.encode(label) != code
    }
    if removed or moved:
        raise IncompatibleDefinitionError(removed, moved)


def define(
    labels: Iterable[str],
    *,
    previous: Optional[EnumDefinition] = None,
) -> EnumDefinition:
    """
    Build an enum definition from ordered, unique labels.

    Args:
        labels: Labels in code order (first label is code 0)
        previous: Definition this one evolves from, checked for compatibility

    Returns:
        EnumDefinition (version 1, or previous.version + 1 when labels changed)

    Raises:
        InvalidLabelError: If a label is not a non-empty string
        DuplicateLabelError: If any label repeats
        IncompatibleDefinitionError: If previous labels were removed or reordered
    """
    if isinstance(labels, (str, bytes)):
        raise InvalidLabelError(labels)
    labels = tuple(labels)

    if previous is None:
        return EnumDefinition(labels=labels)

    version = previous.version if labels == previous.labels else previous.version + 1
    definition = EnumDefinition(labels=labels, version=version)
    check_compatible(previous, definition)
    return definition


def encode(label: str, definition: EnumDefinition) -> int:
    """Label -> stored code. Raises UnknownLabelError."""
    return definition.encode(label)


def decode(code: int, definition: EnumDefinition) -> str:
    """Stored code -> label. Raises UnknownCodeError."""
    return definition.decode(code)


def all_codes(definition: EnumDefinition) -> Mapping[str, int]:
    """Read-only label -> code mapping, declaration order preserved."""
    return definition.codes
