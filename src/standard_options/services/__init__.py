"""Calendar, strike and option services."""

from .calendar import ExpirationCalendar, get_calendar, reset_calendar, third_friday
from .chains import make_option, option_chain
from .strikes import closest_strike, strike_chain, strike_spacing
from .symbols import ParsedSymbol, parse_symbol, to_symbol

__all__ = [
    "ExpirationCalendar",
    "ParsedSymbol",
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
