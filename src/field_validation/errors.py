"""
Exceptions raised by the field dispatch helpers.

The is_*_valid predicates never raise; these are only used by ensure_valid()
and by lookups of unknown field names.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from field_validation.fields import ValidationResult


class FieldValidationBaseError(Exception):
    """Base class for field_validation errors."""


class UnknownFieldError(FieldValidationBaseError, KeyError):
    """No validator is registered under the given field name."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(field)

    def __str__(self) -> str:
        return f"Unknown field type: {self.field!r}"


class FieldValidationError(FieldValidationBaseError, ValueError):
    """A value failed validation in ensure_valid()."""

    def __init__(self, result: "ValidationResult") -> None:
        self.result = result
        self.field = result.field
        super().__init__(result.message)


class DuplicateFieldError(FieldValidationBaseError, ValueError):
    """Two keys of a payload name the same field (e.g. "email" and "EMAIL")."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Field given more than once: {field!r}")
