"""Pytest configuration and shared fixtures."""

import pytest

from field_validation.config import settings as settings_module
from field_validation.phone import set_phone_checker


@pytest.fixture(autouse=True)
def reset_global_state():
    """Drop cached settings and restore the default phone checker after each test."""
    yield
    settings_module._settings = None
    set_phone_checker(None)
