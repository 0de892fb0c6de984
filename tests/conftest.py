"""
Pytest configuration and shared fixtures.
"""

from datetime import date

import pytest

from standard_options.config import get_settings
from standard_options.models.domain import Option, OptionType
from standard_options.services.calendar import ExpirationCalendar, reset_calendar

REFERENCE_NOW = date(2019, 1, 10)


@pytest.fixture(autouse=True)
def clean_globals():
    """Reset cached settings and the default calendar around each test."""
    get_settings.cache_clear()
    reset_calendar()
    yield
    get_settings.cache_clear()
    reset_calendar()


@pytest.fixture
def calendar() -> ExpirationCalendar:
    """Calendar spanning Jan 2018 through Jan 2020 (25 monthly expirations)."""
    return ExpirationCalendar(past_years=1, future_years=1, reference_now=REFERENCE_NOW)


@pytest.fixture
def sample_call() -> Option:
    """Create a sample call option for testing."""
    return Option(
        underlying="AAPL",
        expiration=date(2019, 1, 18),
        type=OptionType.CALL,
        strike=150.0,
    )


@pytest.fixture
def sample_put() -> Option:
    """Create a sample put option for testing."""
    return Option(
        underlying="XYZ",
        expiration=date(2019, 1, 18),
        type=OptionType.PUT,
        strike=2.5,
    )
