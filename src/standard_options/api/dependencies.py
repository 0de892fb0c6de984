"""
FastAPI dependency injection helpers.

Provides reusable dependencies for routes to access configuration
and the expiration calendar.
"""

from typing import Annotated

from fastapi import Depends

from ..config import Settings, get_settings
from ..services.calendar import ExpirationCalendar, get_calendar


def get_calendar_dep(
    settings: Annotated[Settings, Depends(get_settings)]
) -> ExpirationCalendar:
    """
    Get expiration calendar instance.

    Args:
        settings: Application settings

    Returns:
        Process-wide ExpirationCalendar built from settings
    """
    return get_calendar(settings)
