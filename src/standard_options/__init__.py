"""
Standardized equity options.

Monthly (3rd Friday) expiration calendar, strike rounding and ladders,
option chains and OCC-style symbols.
"""

from .models.domain import Option, OptionType
from .services import (
    ExpirationCalendar,
    ParsedSymbol,
    closest_strike,
    get_calendar,
    make_option,
    option_chain,
    parse_symbol,
    reset_calendar,
    strike_chain,
    strike_spacing,
    third_friday,
    to_symbol,
)
from .utils.exceptions import InvalidArgumentError, OutOfRangeError, StandardOptionsError

__version__ = "0.1.0"

__all__ = [
    "ExpirationCalendar",
    "InvalidArgumentError",
    "Option",
    "OptionType",
    "OutOfRangeError",
    "ParsedSymbol",
    "StandardOptionsError",
    "closest_strike",
    "get_calendar",
    "make_option",
    "option_chain",
    "parse_symbol",
    "reset_calendar",
    "strike_chain",
    "strike_spacing",
    "third_friday",
    "to_symbol",
]
