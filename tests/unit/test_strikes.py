"""
Unit tests for the strike engine.

Tests cover:
- Strike spacing tiers and boundaries
- Closest strike rounding, including pinned tie-breaks
- Strike ladder ordering and the zero floor
"""

import pytest

from standard_options.services.strikes import closest_strike, strike_chain, strike_spacing
from standard_options.utils.exceptions import InvalidArgumentError


class TestStrikeSpacing:
    """Test strike_spacing tiers."""

    @pytest.mark.parametrize(
        "price,expected",
        [
            (20.0, 2.5),
            (25.0, 2.5),
            (25.01, 5.0),
            (200.0, 5.0),
            (200.01, 10.0),
            (1500.0, 10.0),
        ],
    )
    def test_tiers(self, price: float, expected: float) -> None:
        """Test spacing at and around tier boundaries."""
        assert strike_spacing(price) == expected

    def test_nonpositive_price_is_lowest_tier(self) -> None:
        """Test zero and negative prices are not rejected."""
        assert strike_spacing(0.0) == 2.5
        assert strike_spacing(-10.0) == 2.5


class TestClosestStrike:
    """Test closest_strike rounding."""

    @pytest.mark.parametrize(
        "price,expected",
        [
            (151.3, 150.0),
            (153.0, 155.0),
            (22.6, 22.5),
            (11.0, 10.0),
            (212.0, 210.0),
            (25.01, 25.0),
            (201.0, 200.0),
        ],
    )
    def test_rounds_to_nearest(self, price: float, expected: float) -> None:
        """Test rounding to the nearest multiple of the spacing."""
        assert closest_strike(price) == expected

    @pytest.mark.parametrize(
        "price,expected",
        [
            # Ties resolve to the even multiple of the spacing
            (3.75, 5.0),     # 1.5 spacings -> 2
            (6.25, 5.0),     # 2.5 spacings -> 2
            (27.5, 30.0),    # 5.5 spacings -> 6
            (32.5, 30.0),    # 6.5 spacings -> 6
            (215.0, 220.0),  # 21.5 spacings -> 22
            (225.0, 220.0),  # 22.5 spacings -> 22
        ],
    )
    def test_tie_break_half_to_even(self, price: float, expected: float) -> None:
        """Test exact midpoints round half to even."""
        assert closest_strike(price) == expected

    @pytest.mark.parametrize(
        "price", [0.3, 1.3, 3.0, 12.34, 24.99, 25.0, 25.01, 99.99, 199.9, 200.0, 200.01, 987.65]
    )
    def test_idempotent(self, price: float) -> None:
        """Test snapping a snapped strike is a no-op."""
        strike = closest_strike(price)
        assert closest_strike(strike) == strike

    def test_small_price_snaps_to_zero(self) -> None:
        """Test prices under half the lowest spacing snap to zero."""
        assert closest_strike(1.0) == 0.0


class TestStrikeChain:
    """Test strike_chain ladders."""

    def test_symmetric_ladder(self) -> None:
        """Test full ladder around a mid-tier price."""
        assert strike_chain(151.3) == [
            130.0, 135.0, 140.0, 145.0, 150.0, 155.0, 160.0, 165.0, 170.0,
        ]

    def test_levels(self) -> None:
        """Test custom level counts."""
        assert strike_chain(151.3, levels=1) == [145.0, 150.0, 155.0]
        assert strike_chain(151.3, levels=0) == [150.0]

    def test_chain_near_zero_drops_low_strikes(self) -> None:
        """Test low strikes at or below zero are dropped, not clamped."""
        chain = strike_chain(3.0, levels=4)

        assert chain == [2.5, 5.0, 7.5, 10.0, 12.5]
        assert all(strike > 0 for strike in chain)

    def test_zero_low_strike_dropped(self) -> None:
        """Test a low strike of exactly zero is dropped."""
        assert strike_chain(10.0, levels=4) == [2.5, 5.0, 7.5, 10.0, 12.5, 15.0, 17.5, 20.0]

    @pytest.mark.parametrize("price", [0.5, 3.0, 10.0, 24.0, 26.0, 151.3, 199.0, 240.0, 1234.5])
    @pytest.mark.parametrize("levels", [0, 1, 4, 10])
    def test_chain_properties(self, price: float, levels: int) -> None:
        """Test ladders are strictly ascending and contain the closest strike once."""
        chain = strike_chain(price, levels)

        assert all(a < b for a, b in zip(chain, chain[1:]))
        assert chain.count(closest_strike(price)) == 1
        assert len(chain) <= levels * 2 + 1

    def test_negative_levels_rejected(self) -> None:
        """Test negative levels raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            strike_chain(100.0, levels=-1)
