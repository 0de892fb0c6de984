"""
OCC-style option symbols.

Format: {UNDERLYING}{YYMMDD}{C|P}{strike * 1000:08d}
Example: AAPL190118C00150000
"""

from datetime import date
from typing import TYPE_CHECKING, NamedTuple

from ..models.domain import OptionType
from ..utils.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from ..models.domain import Option

STRIKE_DIGITS = 8
SUFFIX_LENGTH = 6 + 1 + STRIKE_DIGITS

_TYPES_BY_LETTER = {t.letter: t for t in OptionType}


class ParsedSymbol(NamedTuple):
    underlying: str     # 'AAPL'
    expiration: date    # 2019-01-18
    type: OptionType    # OptionType.CALL
    strike: float       # 150.0


def to_symbol(option: "Option") -> str:
    """
    Render the canonical symbol for an option.

    Args:
        option: Option to render

    Returns:
        Symbol string, e.g. "AAPL190118C00150000"

    Note:
        The strike is encoded as an integer count of thousandths, zero-padded
        to 8 digits (5 whole-dollar digits, 3 fractional digits).
    """
    thousandths = round(option.strike * 1000)
    return (
        f"{option.underlying.upper()}"
        f"{option.expiration:%y%m%d}"
        f"{option.type.letter}"
        f"{thousandths:0{STRIKE_DIGITS}d}"
    )


def parse_symbol(symbol: str) -> ParsedSymbol:
    """
    Parse a canonical symbol back into its fields.

    Args:
        symbol: Symbol string, e.g. "AAPL190118C00150000"

    Returns:
        ParsedSymbol with underlying, expiration, type and strike

    Raises:
        InvalidArgumentError: If the symbol is malformed

    Note:
        Two-digit years are read as 20YY. The expiration is not checked
        against the calendar.
    """
    text = symbol.strip().upper()
    if len(text) <= SUFFIX_LENGTH:
        raise InvalidArgumentError(f"Symbol '{symbol}' is too short")

    root, suffix = text[:-SUFFIX_LENGTH], text[-SUFFIX_LENGTH:]
    yymmdd, letter, strike_digits = suffix[:6], suffix[6], suffix[7:]

    if not yymmdd.isdigit() or not strike_digits.isdigit():
        raise InvalidArgumentError(f"Symbol '{symbol}' has non-numeric date or strike")
    if letter not in _TYPES_BY_LETTER:
        raise InvalidArgumentError(f"Symbol '{symbol}' has unknown option type '{letter}'")

    try:
        expiration = date(2000 + int(yymmdd[:2]), int(yymmdd[2:4]), int(yymmdd[4:]))
    except ValueError as e:
        raise InvalidArgumentError(f"Symbol '{symbol}' has invalid date '{yymmdd}'") from e

    return ParsedSymbol(
        underlying=root,
        expiration=expiration,
        type=_TYPES_BY_LETTER[letter],
        strike=int(strike_digits) / 1000,
    )
