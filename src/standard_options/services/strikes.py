"""
Strike engine: strike spacing, strike rounding and strike ladders.

Strikes are spaced by underlying price tier:
- price <= 25: 2.5
- 25 < price <= 200: 5.0
- price > 200: 10.0
"""

from ..utils.exceptions import InvalidArgumentError

LOW_TIER_CEILING = 25.0
MID_TIER_CEILING = 200.0


def strike_spacing(price: float) -> float:
    """
    Get the valid strike interval for an underlying price.

    Args:
        price: Underlying stock price

    Returns:
        Strike spacing for the price tier

    Note:
        Zero and negative prices fall in the lowest tier; they are not rejected.
    """
    if price <= LOW_TIER_CEILING:
        return 2.5
    if price <= MID_TIER_CEILING:
        return 5.0
    return 10.0


def closest_strike(price: float) -> float:
    """
    Get the closest valid strike for an underlying price.

    Args:
        price: Underlying stock price (or an already valid strike)

    Returns:
        Nearest multiple of the strike spacing

    Note:
        Ties round half to even on the spacing multiple, so 27.5 -> 30.0 and
        32.5 -> 30.0. Passing a valid strike returns it unchanged.
    """
    spacing = strike_spacing(price)
    return round(price / spacing) * spacing


def strike_chain(price: float, levels: int = 4) -> list[float]:
    """
    Build a ladder of strikes around an underlying price.

    Args:
        price: Underlying stock price
        levels: Number of strikes above and below the closest strike

    Returns:
        Strictly ascending strikes: lows, the closest strike, then highs

    Raises:
        InvalidArgumentError: If levels is negative

    Note:
        Low strikes at or below zero are dropped, so the ladder can be
        shorter than levels * 2 + 1 near zero.
    """
    if levels < 0:
        raise InvalidArgumentError(f"levels must be non-negative, got {levels}")

    spacing = strike_spacing(price)
    center = closest_strike(price)

    lows = [center - i * spacing for i in range(levels, 0, -1)]
    highs = [center + i * spacing for i in range(1, levels + 1)]
    return [low for low in lows if low > 0.0] + [center] + highs
