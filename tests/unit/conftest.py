"""Pytest configuration and fixtures for unit tests."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def validation_settings() -> MagicMock:
    """Settings stand-in with the default validator bounds; tweak per test."""
    settings = MagicMock()
    settings.validation.mobile_min_length = 7
    settings.validation.mobile_max_length = 13
    settings.validation.url_schemes = ["http", "https", "ftp", "file", "jar", "mailto"]
    return settings


class AlwaysValidPhoneChecker:
    """Accepts anything; lets tests isolate the length rule."""

    def is_global_phone_number(self, number: str) -> bool:
        return True


class BrokenPhoneChecker:
    def is_global_phone_number(self, number: str) -> bool:
        raise RuntimeError("carrier lookup unavailable")


@pytest.fixture
def always_valid_phone_checker() -> AlwaysValidPhoneChecker:
    return AlwaysValidPhoneChecker()


@pytest.fixture
def broken_phone_checker() -> BrokenPhoneChecker:
    return BrokenPhoneChecker()
