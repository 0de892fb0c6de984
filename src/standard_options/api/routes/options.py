"""
Expiration, strike, option and symbol endpoints.

Stateless wrappers over the calendar, strike engine and chain services.
"""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from ...config import Settings, get_settings
from ...models.domain import OptionType
from ...services.calendar import ExpirationCalendar
from ...services.chains import make_option, option_chain
from ...services.strikes import closest_strike, strike_chain, strike_spacing
from ...services.symbols import parse_symbol
from ..dependencies import get_calendar_dep
from ..schemas import (
    ExpirationsResponse,
    OptionChainResponse,
    OptionResponse,
    ResolvedExpirationResponse,
    StrikesResponse,
)

router = APIRouter(prefix="/api", tags=["options"])

CalendarDep = Annotated[ExpirationCalendar, Depends(get_calendar_dep)]


@router.get("/expirations", response_model=ExpirationsResponse)
async def list_expirations(
    calendar: CalendarDep,
    start: date | None = None,
    end: date | None = None,
) -> ExpirationsResponse:
    """
    List calendar expirations, optionally within an inclusive date window.

    Example:
        GET /api/expirations?start=2019-01-01&end=2019-03-31
        Response: {"count": 3, "expirations": ["2019-01-18", "2019-02-15", "2019-03-15"]}
    """
    expirations = [
        e
        for e in calendar.expirations
        if (start is None or e >= start) and (end is None or e <= end)
    ]
    return ExpirationsResponse(count=len(expirations), expirations=expirations)


@router.get("/expirations/resolve", response_model=ResolvedExpirationResponse)
async def resolve_expiration(
    calendar: CalendarDep,
    on_date: date | None = None,
    months: int = 0,
) -> ResolvedExpirationResponse:
    """
    Resolve the expiration a number of months forward from a date.

    Raises:
        404: Calendar exhausted
    """
    on_date = on_date or date.today()
    expiration = calendar.resolve_expiration(on_date, months)
    return ResolvedExpirationResponse(on_date=on_date, months=months, expiration=expiration)


@router.get("/strikes", response_model=StrikesResponse)
async def get_strikes(
    settings: Annotated[Settings, Depends(get_settings)],
    price: float,
    levels: int | None = None,
) -> StrikesResponse:
    """
    Get strike spacing, closest strike and strike ladder for a price.

    Example:
        GET /api/strikes?price=151.3&levels=1
        Response: {"price": 151.3, "spacing": 5.0, "closest_strike": 150.0,
                   "strikes": [145.0, 150.0, 155.0]}
    """
    levels = settings.default_levels if levels is None else levels
    return StrikesResponse(
        price=price,
        spacing=strike_spacing(price),
        closest_strike=closest_strike(price),
        strikes=strike_chain(price, levels),
    )


@router.get("/options/{underlying}", response_model=OptionResponse)
async def get_option(
    underlying: str,
    calendar: CalendarDep,
    strike: float,
    option_type: Annotated[OptionType, Query(alias="type")] = OptionType.CALL,
    on_date: date | None = None,
    months: int = 0,
) -> OptionResponse:
    """
    Build a single option from a price or strike.

    Raises:
        400: Invalid argument (negative months, non-positive strike)
        404: Calendar exhausted

    Example:
        GET /api/options/aapl?on_date=2019-01-02&strike=151&type=call
        Response: {"symbol": "AAPL190118C00150000", ...}
    """
    option = make_option(
        underlying, on_date or date.today(), months, option_type, strike, calendar
    )
    return OptionResponse.from_option(option)


@router.get("/chains/{underlying}", response_model=OptionChainResponse)
async def get_option_chain(
    underlying: str,
    calendar: CalendarDep,
    settings: Annotated[Settings, Depends(get_settings)],
    price: float,
    option_type: Annotated[OptionType, Query(alias="type")] = OptionType.CALL,
    on_date: date | None = None,
    months: int = 0,
    levels: int | None = None,
) -> OptionChainResponse:
    """
    Build an option chain around an underlying price.

    Raises:
        400: Invalid argument
        404: Calendar exhausted
    """
    on_date = on_date or date.today()
    levels = settings.default_levels if levels is None else levels
    options = option_chain(underlying, on_date, months, price, option_type, levels, calendar)
    return OptionChainResponse(
        underlying=options[0].underlying,
        expiration=options[0].expiration,
        type=option_type,
        options=[OptionResponse.from_option(o) for o in options],
    )


@router.get("/symbols/{symbol}", response_model=OptionResponse)
async def get_symbol(symbol: str) -> OptionResponse:
    """
    Parse an option symbol into its fields.

    Raises:
        400: Malformed symbol
    """
    parsed = parse_symbol(symbol)
    return OptionResponse(
        symbol=symbol.strip().upper(),
        underlying=parsed.underlying,
        expiration=parsed.expiration,
        type=parsed.type,
        strike=parsed.strike,
    )
