"""
Field dispatch: validate a value by field name and get a structured result.

Wraps the boolean predicates in validators.py with a ValidationResult so form
layers can report a message per field, validate a whole payload at once, or
raise on the first bad value with ensure_valid().
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Literal, Mapping, Optional, Union

from pydantic import BaseModel, Field

from field_validation.errors import DuplicateFieldError, FieldValidationError, UnknownFieldError
from field_validation.utils.logging import get_logger
from field_validation.validators import (
    is_abn_valid,
    is_acn_valid,
    is_email_valid,
    is_indian_zipcode_valid,
    is_mobile_number_valid,
    is_name_valid,
    is_password_valid,
    is_url_valid,
    is_usa_zipcode_valid,
)

logger = get_logger(__name__)


class FieldType(str, Enum):
    """Field kinds with a registered validator."""

    EMAIL = "email"
    PASSWORD = "password"
    NAME = "name"
    MOBILE_NUMBER = "mobile_number"
    ABN = "abn"
    ACN = "acn"
    URL = "url"
    INDIAN_ZIPCODE = "indian_zipcode"
    USA_ZIPCODE = "usa_zipcode"


# -----------------------------------------------------------------------------
# ValidationResult
# -----------------------------------------------------------------------------


class ValidationResult(BaseModel):
    """Result of validating one field value."""

    field: FieldType = Field(..., description="Field kind that was validated")
    status: Literal["pass", "fail"] = Field(..., description="pass = value accepted; fail = value rejected")
    message: str = Field(default="", description="Human-readable outcome message")
    details: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Extra data (e.g. the rejected value, except for passwords)",
    )

    def is_ok(self) -> bool:
        """True if the value was accepted."""
        return self.status == "pass"

    def should_block(self) -> bool:
        """True if the value should be rejected by the caller."""
        return self.status == "fail"


# -----------------------------------------------------------------------------
# Registry
# -----------------------------------------------------------------------------

# field -> (predicate, failure message)
_VALIDATORS: Dict[FieldType, tuple[Callable[[Any], bool], str]] = {
    FieldType.EMAIL: (is_email_valid, "Enter a valid email address."),
    FieldType.PASSWORD: (
        is_password_valid,
        "Password must be at least 8 characters with no spaces and include a digit, "
        "a lowercase letter, an uppercase letter and one of @#$%^&+=.",
    ),
    FieldType.NAME: (is_name_valid, "Name may only contain letters, spaces, periods, apostrophes and hyphens."),
    FieldType.MOBILE_NUMBER: (is_mobile_number_valid, "Enter a valid mobile number."),
    FieldType.ABN: (is_abn_valid, "ABN must be 11 characters."),
    FieldType.ACN: (is_acn_valid, "ACN must be 9 characters."),
    FieldType.URL: (is_url_valid, "Enter a valid URL."),
    FieldType.INDIAN_ZIPCODE: (is_indian_zipcode_valid, "PIN code must be 6 characters."),
    FieldType.USA_ZIPCODE: (is_usa_zipcode_valid, "ZIP code must be 5 digits, optionally followed by -NNNN."),
}

# values never echoed back in result details
_SENSITIVE_FIELDS = frozenset({FieldType.PASSWORD})


def _coerce_field(field: Union[FieldType, str]) -> FieldType:
    if isinstance(field, FieldType):
        return field
    try:
        return FieldType(str(field).strip().lower())
    except ValueError:
        raise UnknownFieldError(str(field)) from None


def get_validator(field: Union[FieldType, str]) -> Callable[[Any], bool]:
    """Return the predicate registered for a field."""
    return _VALIDATORS[_coerce_field(field)][0]


def validate_field(field: Union[FieldType, str], value: Any) -> ValidationResult:
    """
    Validate one value. Raises UnknownFieldError for an unregistered field name;
    the value itself never causes an exception.
    """
    field_type = _coerce_field(field)
    predicate, failure_message = _VALIDATORS[field_type]
    if predicate(value):
        return ValidationResult(field=field_type, status="pass", message="Valid.")

    details: Dict[str, Any] = {}
    if field_type not in _SENSITIVE_FIELDS:
        details["value"] = value
    logger.debug("field_rejected", field=field_type.value)
    return ValidationResult(field=field_type, status="fail", message=failure_message, details=details or None)


def validate_fields(values: Mapping[Union[FieldType, str], Any]) -> Dict[str, ValidationResult]:
    """
    Validate each entry of a field -> value mapping. Keys of the result are field
    names. Raises DuplicateFieldError when two keys resolve to the same field.
    """
    results: Dict[str, ValidationResult] = {}
    for field, value in values.items():
        field_type = _coerce_field(field)
        if field_type.value in results:
            raise DuplicateFieldError(field_type.value)
        results[field_type.value] = validate_field(field_type, value)
    return results


def ensure_valid(field: Union[FieldType, str], value: Any) -> Any:
    """Return value unchanged if valid, else raise FieldValidationError."""
    result = validate_field(field, value)
    if result.should_block():
        raise FieldValidationError(result)
    return value
