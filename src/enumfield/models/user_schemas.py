"""Pydantic schemas for User."""

import re
from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from enumfield.core.value import EnumValue
from enumfield.models.enums import USER_ROLES, USER_STATUSES

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class UserCreate(BaseModel):
    """Schema for creating a new user."""

    email: str = Field(..., min_length=5, max_length=255)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    role: Optional[str] = Field(None, description="Role label; defaults to volunteer")
    status: Optional[str] = Field(None, description="Status label; defaults to active")

    @field_validator("email")
    @classmethod
    def validate_and_lowercase_email(cls, v: str) -> str:
        """Validate and lowercase email."""
        v = v.strip()
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email format")
        return v.lower()

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_names(cls, v: str, info) -> str:
        """Validate name fields."""
        if not v.strip():
            raise ValueError(f"{info.field_name} cannot be empty")
        return v.strip()

    @field_validator("role")
    @classmethod
    def validate_role(cls, v: Optional[str]) -> Optional[str]:
        """Reject labels missing from the role definition."""
        if v is not None:
            USER_ROLES.encode(v)
        return v

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: Optional[str]) -> Optional[str]:
        """Reject labels missing from the status definition."""
        if v is not None:
            USER_STATUSES.encode(v)
        return v


class UserResponse(BaseModel):
    """Schema for reading a user from the database."""

    id: UUID
    email: str
    first_name: str
    last_name: str
    display_name: str
    role: str
    status: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("role", "status", mode="before")
    @classmethod
    def enum_value_to_label(cls, v: Any) -> Any:
        if isinstance(v, EnumValue):
            return v.label
        return v
