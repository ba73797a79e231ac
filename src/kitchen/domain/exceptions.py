"""Builder-specific exceptions."""

from __future__ import annotations


class BuilderError(RuntimeError):
    """Base class for failures raised while staging or building a value."""


class NullRequiredFieldError(BuilderError, ValueError):
    """Raised eagerly when a required builder argument is missing."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"{field_name} is required and cannot be None")
        self.field_name = field_name


class InvalidFieldError(BuilderError, ValueError):
    """Raised when a staged value violates a type or range constraint."""

    def __init__(self, field_name: str, reason: str) -> None:
        super().__init__(f"Invalid {field_name}: {reason}")
        self.field_name = field_name
        self.reason = reason
