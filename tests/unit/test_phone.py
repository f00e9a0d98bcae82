"""Unit tests for the phone format capability and its process-wide registration."""

import re

import pytest

from field_validation.phone import (
    GlobalPhoneNumberChecker,
    PhoneFormatChecker,
    get_phone_checker,
    set_phone_checker,
)


class TestGlobalPhoneNumberChecker:
    @pytest.mark.parametrize("number", ["5", "+61412345678", "1-800-555-0199", "555.0100", "+-.", "0"])
    def test_accepts_plus_digits_dots_dashes(self, number: str) -> None:
        assert GlobalPhoneNumberChecker().is_global_phone_number(number) is True

    @pytest.mark.parametrize("number", ["", "+", "++61", "61+4", "555 0100", "(02)99990000", "12a45", "#31#"])
    def test_rejects_everything_else(self, number: str) -> None:
        assert GlobalPhoneNumberChecker().is_global_phone_number(number) is False

    def test_custom_pattern(self) -> None:
        checker = GlobalPhoneNumberChecker(pattern=re.compile(r"\+?[0-9 ]+"))
        assert checker.is_global_phone_number("+61 412 345 678") is True
        assert checker.is_global_phone_number("0412-345-678") is False

    def test_is_a_phone_format_checker(self) -> None:
        assert isinstance(GlobalPhoneNumberChecker(), PhoneFormatChecker)


class TestCheckerRegistration:
    def test_default_is_global_phone_number_checker(self) -> None:
        assert isinstance(get_phone_checker(), GlobalPhoneNumberChecker)

    def test_set_returns_previous_and_none_restores_default(self, always_valid_phone_checker) -> None:
        default = get_phone_checker()
        previous = set_phone_checker(always_valid_phone_checker)
        assert previous is default
        assert get_phone_checker() is always_valid_phone_checker

        previous = set_phone_checker(None)
        assert previous is always_valid_phone_checker
        assert get_phone_checker() is default

    def test_rejects_object_without_checker_method(self) -> None:
        with pytest.raises(TypeError):
            set_phone_checker(object())
        assert isinstance(get_phone_checker(), GlobalPhoneNumberChecker)
