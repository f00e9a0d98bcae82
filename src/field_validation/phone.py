"""
Phone number format capability used by the mobile number validator.

Mobile platforms ship a "is this a global phone number" primitive; there is no
portable equivalent, so the default here is a regex heuristic with the same
shape: an optional leading '+' followed by digits, dots and dashes. It does not
know about country codes or number plans. Hosts with a better source of truth
(a carrier lookup, a full numbering-plan library) install their own checker
via set_phone_checker().
"""

from __future__ import annotations

import re
from typing import Optional, Protocol, runtime_checkable

from field_validation.utils.logging import get_logger

logger = get_logger(__name__)

GLOBAL_PHONE_NUMBER_PATTERN = re.compile(r"\+?[0-9.\-]+")


@runtime_checkable
class PhoneFormatChecker(Protocol):
    """Anything that can say whether a string is a syntactically global phone number."""

    def is_global_phone_number(self, number: str) -> bool:
        ...


class GlobalPhoneNumberChecker:
    """Default checker: optional '+', then one or more digits, '.' or '-'."""

    def __init__(self, pattern: Optional[re.Pattern[str]] = None) -> None:
        self.pattern = pattern or GLOBAL_PHONE_NUMBER_PATTERN

    def is_global_phone_number(self, number: str) -> bool:
        if not number:
            return False
        return self.pattern.fullmatch(number) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pattern={self.pattern.pattern!r})"


_default_checker = GlobalPhoneNumberChecker()
_checker: PhoneFormatChecker = _default_checker


def get_phone_checker() -> PhoneFormatChecker:
    """Return the process-wide phone format checker."""
    return _checker


def set_phone_checker(checker: Optional[PhoneFormatChecker]) -> PhoneFormatChecker:
    """
    Install a phone format checker; None restores the default heuristic.
    Returns the previously installed checker so callers can put it back.
    """
    global _checker
    if checker is not None and not isinstance(checker, PhoneFormatChecker):
        raise TypeError(f"{checker!r} does not implement is_global_phone_number()")
    previous = _checker
    _checker = checker if checker is not None else _default_checker
    logger.debug("phone_checker_installed", checker=repr(_checker))
    return previous
