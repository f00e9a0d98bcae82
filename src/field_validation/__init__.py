"""
field_validation: format checks for user-entered form fields.

Boolean predicates for email, password strength, personal names, mobile
numbers, Australian business identifiers (ABN/ACN), URLs and postal codes
(India, USA), plus a small dispatch layer returning structured results.
"""

import logging

from field_validation.errors import (
    FieldValidationBaseError,
    DuplicateFieldError,
    FieldValidationError,
    UnknownFieldError,
)
from field_validation.fields import (
    FieldType,
    ValidationResult,
    ensure_valid,
    get_validator,
    validate_field,
    validate_fields,
)
from field_validation.phone import (
    GlobalPhoneNumberChecker,
    PhoneFormatChecker,
    get_phone_checker,
    set_phone_checker,
)
from field_validation.validators import (
    ABN_LENGTH,
    ACN_LENGTH,
    INDIAN_ZIPCODE_LENGTH,
    PASSWORD_MIN_LENGTH,
    PASSWORD_SPECIAL_CHARACTERS,
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

__all__ = [
    "ABN_LENGTH",
    "ACN_LENGTH",
    "INDIAN_ZIPCODE_LENGTH",
    "PASSWORD_MIN_LENGTH",
    "PASSWORD_SPECIAL_CHARACTERS",
    "DuplicateFieldError",
    "FieldType",
    "FieldValidationBaseError",
    "FieldValidationError",
    "GlobalPhoneNumberChecker",
    "PhoneFormatChecker",
    "UnknownFieldError",
    "ValidationResult",
    "ensure_valid",
    "get_phone_checker",
    "get_validator",
    "is_abn_valid",
    "is_acn_valid",
    "is_email_valid",
    "is_indian_zipcode_valid",
    "is_mobile_number_valid",
    "is_name_valid",
    "is_password_valid",
    "is_url_valid",
    "is_usa_zipcode_valid",
    "set_phone_checker",
    "validate_field",
    "validate_fields",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
