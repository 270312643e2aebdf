"""SQLAlchemy binding: enum values stored as integer codes."""

from typing import Any, Optional

from sqlalchemy import Integer
from sqlalchemy.orm import MappedColumn, mapped_column
from sqlalchemy.types import TypeDecorator

from enumfield.core.definition import EnumDefinition
from enumfield.core.errors import UnknownLabelError
from enumfield.core.value import EnumValue


class EnumCode(TypeDecorator):
    """
    Integer column holding enum codes.

    Binds EnumValue objects or label strings as their integer code, and loads
    integers back as EnumValue. A stored integer outside the definition raises
    UnknownCodeError on load.
    """

    impl = Integer
    cache_ok = True

    def __init__(self, definition: EnumDefinition):
        super().__init__()
        self.definition = definition

    def process_bind_param(self, value: Any, dialect) -> Optional[int]:
        if value is None:
            return None
        if isinstance(value, EnumValue):
            # Re-encode by label so values from an older definition version still bind
            return self.definition.encode(value.label)
        return self.definition.encode(value)

    def process_result_value(self, value: Optional[int], dialect) -> Optional[EnumValue]:
        if value is None:
            return None
        return EnumValue(self.definition, value)

    def coerce_compared_value(self, op, value):
        return self

    @property
    def python_type(self) -> type:
        return EnumValue


class EnumField:
    """
    A definition plus its default label, as declared on a model.

    Usage:
        ROLE = EnumField(define(["volunteer", "admin"]), default="volunteer")

        class User(Base):
            role: Mapped[EnumValue] = ROLE.column()
    """

    def __init__(self, definition: EnumDefinition, default: Optional[str] = None):
        if default is not None:
            definition.encode(default)
        self.definition = definition
        self.default = default

    def __repr__(self) -> str:
        return f"<EnumField(labels={list(self.definition.labels)}, default={self.default!r})>"

    def new(self, label: Optional[str] = None) -> Optional[EnumValue]:
        """Value for a new record: label if given, else the default (None when there is none)."""
        if label is None and self.default is None:
            return None
        return EnumValue.of(self.definition, label, self.default)

    def coerce(self, value: Any) -> Optional[EnumValue]:
        """Accept a label, a stored code or an EnumValue and return an EnumValue of this field."""
        if value is None:
            return None
        if isinstance(value, EnumValue):
            if value.definition == self.definition:
                return value
            return EnumValue(self.definition, self.definition.encode(value.label))
        if isinstance(value, int) and not isinstance(value, bool):
            return EnumValue(self.definition, value)
        if isinstance(value, str):
            return EnumValue(self.definition, self.definition.encode(value))
        raise UnknownLabelError(value, self.definition.labels)

    def column(self, **kwargs: Any) -> MappedColumn[Any]:
        """Declare the integer column; defaults to NOT NULL with the default code as server default."""
        options: dict[str, Any] = {
            "nullable": self.default is None,
            "index": True,
        }
        if self.default is not None:
            options["default"] = self.new()
            options["server_default"] = str(self.definition.encode(self.default))
        options.update(kwargs)
        return mapped_column(EnumCode(self.definition), **options)
