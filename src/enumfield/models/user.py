"""User model with integer-backed role and status fields."""

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, validates

from enumfield.core.db import Base
from enumfield.core.value import EnumValue
from enumfield.models.enums import ROLE, STATUS

ENUM_FIELDS = {"role": ROLE, "status": STATUS}


class User(Base):
    """Member account. Roles and statuses are stored as small integers."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )

    first_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        default="",
    )

    last_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        default="",
    )

    role: Mapped[EnumValue] = ROLE.column()

    status: Mapped[EnumValue] = STATUS.column()

    created_at: Mapped[datetime] = mapped_column(
        nullable=False,
        default=lambda: datetime.now(),
    )

    def __init__(self, **kwargs: Any):
        # Column defaults only apply at flush; new instances get theirs up front
        for name, field in ENUM_FIELDS.items():
            if kwargs.get(name) is None:
                kwargs[name] = field.new()
        super().__init__(**kwargs)

    @validates("role", "status")
    def _coerce_enum(self, key: str, value: Any) -> EnumValue:
        return ENUM_FIELDS[key].coerce(value)

    @property
    def display_name(self) -> str:
        """Return formatted display name (first_name last_name or email fallback)."""
        full_name = f"{self.first_name} {self.last_name}".strip()
        return full_name if full_name else self.email

    def __repr__(self) -> str:
        return f"<User(email={self.email}, role={self.role}, status={self.status})>"
