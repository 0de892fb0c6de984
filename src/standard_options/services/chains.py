"""
Option construction and option chains.

Options are built from an underlying, a reference date, a forward-month
offset, a type, and either a raw price or a strike. The expiration comes
from an ExpirationCalendar and the strike is snapped with closest_strike().
"""

from datetime import date, datetime

from ..models.domain import Option, OptionType
from ..utils.exceptions import InvalidArgumentError
from .calendar import ExpirationCalendar, get_calendar
from .strikes import closest_strike, strike_chain


def _snapped_strike(strike_or_price: float) -> float:
    if strike_or_price <= 0:
        raise InvalidArgumentError(
            f"Strike or price must be positive, got {strike_or_price}"
        )
    strike = closest_strike(strike_or_price)
    if strike <= 0:
        raise InvalidArgumentError(
            f"Price {strike_or_price} is below the lowest valid strike"
        )
    return strike


def make_option(
    underlying: str,
    on_date: date | datetime,
    months: int,
    option_type: OptionType,
    strike_or_price: float,
    calendar: ExpirationCalendar | None = None,
) -> Option:
    """
    Build a standardized option.

    Args:
        underlying: Underlying ticker symbol (case-insensitive)
        on_date: Date the option is created on
        months: Forward months to the expiration (0 = nearest future expiration)
        option_type: Call or put
        strike_or_price: Underlying price or strike; snapped to the closest strike
        calendar: Expiration calendar (defaults to get_calendar())

    Returns:
        Option with calendar expiration and snapped strike

    Raises:
        InvalidArgumentError: If the underlying is blank or the price is not
            positive or snaps to a zero strike
        OutOfRangeError: If the calendar has no expiration that far forward
    """
    if calendar is None:
        calendar = get_calendar()
    expiration = calendar.resolve_expiration(on_date, months)
    return Option(
        underlying=underlying,
        expiration=expiration,
        type=option_type,
        strike=_snapped_strike(strike_or_price),
    )


def option_chain(
    underlying: str,
    on_date: date | datetime,
    months: int,
    price: float,
    option_type: OptionType,
    levels: int = 4,
    calendar: ExpirationCalendar | None = None,
) -> list[Option]:
    """
    Build a chain of options around an underlying price.

    Args:
        underlying: Underlying ticker symbol
        on_date: Date the options are created on
        months: Forward months to the expiration
        price: Underlying stock price
        option_type: Call or put
        levels: Number of strikes above and below the closest strike
        calendar: Expiration calendar (defaults to get_calendar())

    Returns:
        Options in ascending strike order

    Raises:
        InvalidArgumentError: If levels is negative or any option is rejected
        OutOfRangeError: If the calendar has no expiration that far forward

    Note:
        All-or-nothing: the expiration is resolved before any option is
        built and any failure aborts the whole chain. Each ladder strike is
        re-snapped with closest_strike(), so a ladder crossing a spacing tier
        can yield repeated strikes (e.g. 205 snaps to 200).
    """
    if calendar is None:
        calendar = get_calendar()
    calendar.resolve_expiration(on_date, months)
    return [
        make_option(underlying, on_date, months, option_type, strike, calendar)
        for strike in strike_chain(price, levels)
    ]
