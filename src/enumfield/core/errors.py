"""Custom exceptions and error response schemas."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Standardized error response."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(None, description="Additional context")


class AppError(Exception):
    """Base exception for all app-level errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_response(self) -> ErrorDetail:
        """Convert to response schema."""
        return ErrorDetail(
            code=self.code,
            message=self.message,
            details=self.details if self.details else None,
        )


class EnumFieldError(AppError):
    """Base for every enum field validation failure."""


class DuplicateLabelError(EnumFieldError, ValueError):
    """Raised at definition time when a label repeats."""

    def __init__(self, labels: list[str]):
        super().__init__(
            code="DUPLICATE_LABEL",
            message=f"Duplicate enum labels: {', '.join(labels)}",
            details={"labels": labels},
        )


class InvalidLabelError(EnumFieldError, ValueError):
    """Raised when a label is not a non-empty string."""

    def __init__(self, label: Any):
        super().__init__(
            code="INVALID_LABEL",
            message=f"Enum labels must be non-empty strings, got {label!r}",
            details={"label": repr(label)},
        )


class UnknownLabelError(EnumFieldError, ValueError):
    """Raised when assigning or querying a label the definition lacks."""

    def __init__(self, label: Any, labels: tuple[str, ...]):
        super().__init__(
            code="UNKNOWN_LABEL",
            message=f"'{label}' is not a valid label (expected one of: {', '.join(labels)})",
            details={"label": label if isinstance(label, str) else repr(label), "labels": list(labels)},
        )


class UnknownCodeError(EnumFieldError, ValueError):
    """Raised when a stored code has no label in the current definition.

    Usually means a label was removed or reordered after data was written.
    """

    def __init__(self, code: Any, size: int):
        super().__init__(
            code="UNKNOWN_CODE",
            message=f"Stored code {code!r} is outside the valid range [0, {size})",
            details={"stored_code": code if isinstance(code, int) else repr(code), "size": size},
        )


class IncompatibleDefinitionError(EnumFieldError):
    """Raised when a new definition would change codes of existing labels."""

    def __init__(self, removed: list[str], moved: dict[str, tuple[int, int]]):
        parts = []
        if removed:
            parts.append(f"removed labels: {', '.join(removed)}")
        if moved:
            parts.append(
                "moved labels: "
                + ", ".join(f"{label} ({old} -> {new})" for label, (old, new) in moved.items())
            )
        super().__init__(
            code="INCOMPATIBLE_DEFINITION",
            message="Definition breaks stored codes; " + "; ".join(parts),
            details={
                "removed": removed,
                "moved": {label: list(codes) for label, codes in moved.items()},
            },
        )
