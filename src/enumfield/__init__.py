"""Integer-backed symbolic enum fields for SQLAlchemy models."""

from enumfield.core.column import EnumCode, EnumField
from enumfield.core.definition import (
    EnumDefinition,
    all_codes,
    check_compatible,
    decode,
    define,
    encode,
)
from enumfield.core.errors import (
    DuplicateLabelError,
    EnumFieldError,
    IncompatibleDefinitionError,
    InvalidLabelError,
    UnknownCodeError,
    UnknownLabelError,
)
from enumfield.core.persistence import (
    all_with_label,
    all_without_label,
    count_by_label,
    set_and_persist,
    with_label,
    without_label,
)
from enumfield.core.value import EnumValue, is_label, set_label

__all__ = [
    "DuplicateLabelError",
    "EnumCode",
    "EnumDefinition",
    "EnumField",
    "EnumFieldError",
    "EnumValue",
    "IncompatibleDefinitionError",
    "InvalidLabelError",
    "UnknownCodeError",
    "UnknownLabelError",
    "all_codes",
    "all_with_label",
    "all_without_label",
    "check_compatible",
    "count_by_label",
    "decode",
    "define",
    "encode",
    "is_label",
    "set_and_persist",
    "set_label",
    "with_label",
    "without_label",
]
