"""
Format validators for user-entered fields.

Each predicate takes the raw input and returns True only when it has the
expected shape. They never raise: None, non-string and malformed input all
come back as False, so callers can use them directly in form handlers.

Identifier checks (ABN, ACN, Indian PIN code) look at length only; no digit
content or checksum is verified.

Lengths are counted in code points, so a character outside the Basic
Multilingual Plane (an emoji, say) counts once, not as a surrogate pair.

Names are NFC-normalised before the letter check. This deliberately widens
a plain per-character Unicode letter match: an accent typed as a separate
combining mark is accepted once it composes with its base letter.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Any
from urllib.parse import urlsplit

from field_validation.config.settings import ValidationSettings, get_settings
from field_validation.phone import get_phone_checker
from field_validation.utils.logging import get_logger

logger = get_logger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

#: Length of an Australian Business Number
ABN_LENGTH = 11
#: Length of an Australian Company Number
ACN_LENGTH = 9
#: Length of an Indian postal (PIN) code
INDIAN_ZIPCODE_LENGTH = 6

PASSWORD_MIN_LENGTH = 8
PASSWORD_SPECIAL_CHARACTERS = "@#$%^&+="

# =============================================================================
# PATTERNS
# =============================================================================

_EMAIL_RE = re.compile(r"[\w.\-]+@(?:[\w\-]+\.)+[A-Z]{2,4}", re.IGNORECASE | re.ASCII)

_PASSWORD_RE = re.compile(
    r"(?=.*[0-9])"
    r"(?=.*[a-z])"
    r"(?=.*[A-Z])"
    rf"(?=.*[{re.escape(PASSWORD_SPECIAL_CHARACTERS)}])"
    r"(?=\S+\Z)"
    rf".{{{PASSWORD_MIN_LENGTH},}}"
)

_NAME_PUNCTUATION = frozenset(" .'-")

_USA_ZIPCODE_RE = re.compile(r"[0-9]{5}(?:-[0-9]{4})?")

_URL_FORBIDDEN_RE = re.compile(r"[\s\x00-\x1f\x7f]")


def _has_length(value: Any, length: int) -> bool:
    return isinstance(value, str) and len(value) == length


# fallback when the environment holds invalid VALIDATION_* values
_DEFAULT_VALIDATION_SETTINGS = ValidationSettings.model_construct()


def _validation_settings() -> ValidationSettings:
    try:
        return get_settings().validation
    except ValueError as e:
        # pydantic ValidationError and pydantic-settings SettingsError are both ValueErrors
        logger.warning("validation_settings_invalid", error=str(e), fallback="defaults")
        return _DEFAULT_VALIDATION_SETTINGS


# =============================================================================
# VALIDATORS
# =============================================================================


def is_email_valid(email: Any) -> bool:
    """
    Check an email address has the form local-part@domain.tld.

    The local part may hold word characters, dots and hyphens; the domain is
    one or more labels followed by a 2-4 letter top-level domain. Case-insensitive.
    """
    if not isinstance(email, str):
        return False
    return _EMAIL_RE.fullmatch(email) is not None


def is_password_valid(password: Any) -> bool:
    """
    Check password strength rules: at least 8 characters, no whitespace, and at
    least one digit, one lowercase letter, one uppercase letter and one of
    ``@#$%^&+=``.
    """
    if not isinstance(password, str):
        return False
    # never log the value itself
    ok = _PASSWORD_RE.fullmatch(password) is not None
    if not ok:
        logger.debug("password_rejected", length=len(password))
    return ok


def is_name_valid(name: Any) -> bool:
    """
    Check a personal name: letters of any script plus space, period, apostrophe
    and hyphen. Decomposed accents are composed first, so "José" passes.
    """
    if not isinstance(name, str) or not name:
        return False
    normalised = unicodedata.normalize("NFC", name)
    return all(ch in _NAME_PUNCTUATION or unicodedata.category(ch).startswith("L") for ch in normalised)


def is_mobile_number_valid(mobile_number: Any) -> bool:
    """
    Check a mobile number is 7-13 characters long and accepted by the installed
    phone format checker (see field_validation.phone).
    """
    if not isinstance(mobile_number, str):
        return False
    bounds = _validation_settings()
    if not bounds.mobile_min_length <= len(mobile_number) <= bounds.mobile_max_length:
        logger.debug("mobile_number_rejected", reason="length", length=len(mobile_number))
        return False
    checker = get_phone_checker()
    try:
        return bool(checker.is_global_phone_number(mobile_number))
    except Exception as e:
        logger.warning("phone_checker_failed", checker=repr(checker), error=str(e))
        return False


def is_abn_valid(abn: Any) -> bool:
    """Check an Australian Business Number is exactly 11 characters."""
    return _has_length(abn, ABN_LENGTH)


def is_acn_valid(acn: Any) -> bool:
    """Check an Australian Company Number is exactly 9 characters."""
    return _has_length(acn, ACN_LENGTH)


def is_url_valid(url: Any) -> bool:
    """
    Check a URL is well formed: a supported scheme (http, https, ftp, file, jar,
    mailto by default) followed by an authority or a path. Whitespace, control
    characters and bad ports make it malformed. Nothing is fetched.
    """
    if not isinstance(url, str) or not url:
        return False
    if _URL_FORBIDDEN_RE.search(url):
        return False
    try:
        parts = urlsplit(url)
        parts.port  # raises ValueError for non-numeric or out-of-range ports
    except ValueError as e:
        logger.debug("url_rejected", reason="malformed", error=str(e))
        return False
    if parts.scheme.lower() not in _validation_settings().url_schemes:
        logger.debug("url_rejected", reason="scheme", scheme=parts.scheme)
        return False
    return bool(parts.netloc or parts.path)


def is_indian_zipcode_valid(indian_zipcode: Any) -> bool:
    """Check an Indian PIN code is exactly 6 characters."""
    return _has_length(indian_zipcode, INDIAN_ZIPCODE_LENGTH)


def is_usa_zipcode_valid(usa_zipcode: Any) -> bool:
    """Check a US ZIP code: five digits, optionally followed by a dash and four digits."""
    if not isinstance(usa_zipcode, str):
        return False
    return _USA_ZIPCODE_RE.fullmatch(usa_zipcode) is not None


__all__ = [
    "ABN_LENGTH",
    "ACN_LENGTH",
    "INDIAN_ZIPCODE_LENGTH",
    "PASSWORD_MIN_LENGTH",
    "PASSWORD_SPECIAL_CHARACTERS",
    "is_abn_valid",
    "is_acn_valid",
    "is_email_valid",
    "is_indian_zipcode_valid",
    "is_mobile_number_valid",
    "is_name_valid",
    "is_password_valid",
    "is_url_valid",
    "is_usa_zipcode_valid",
]
