"""Pydantic schemas for enum introspection."""

from pydantic import BaseModel, ConfigDict, Field

from enumfield.core.definition import EnumDefinition, all_codes
from enumfield.core.value import EnumValue


class EnumDefinitionRead(BaseModel):
    """Label -> code mapping of a definition, for display and debugging."""

    version: int
    labels: list[str]
    codes: dict[str, int] = Field(..., description="Label to stored code, declaration order")

    @classmethod
    def from_definition(cls, definition: EnumDefinition) -> "EnumDefinitionRead":
        return cls(
            version=definition.version,
            labels=list(definition.labels),
            codes=dict(all_codes(definition)),
        )


class EnumValueRead(BaseModel):
    """Current label of a field with its stored code."""

    label: str
    code: int

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_value(cls, value: EnumValue) -> "EnumValueRead":
        return cls(label=value.label, code=value.code)
