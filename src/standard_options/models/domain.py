"""
Core domain models for standardized options.

These models represent the fundamental business objects:
- OptionType: Call or put
- Option: Immutable option contract keyed by underlying, expiration, type and strike
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.exceptions import InvalidArgumentError


class OptionType(str, Enum):
    """Option type. The uppercased first letter is the symbol type code."""

    CALL = "call"
    PUT = "put"

    @property
    def letter(self) -> str:
        return self.name[0]


class Option(BaseModel):
    """
    Standardized option contract.

    Attributes:
        underlying: Underlying ticker symbol, uppercased (e.g., "AAPL")
        expiration: Monthly expiration date (3rd Friday)
        type: Option type (call or put)
        strike: Strike price, a multiple of the strike spacing

    Raises:
        InvalidArgumentError: If underlying is empty or blank

    Note:
        Instances are frozen. Build them through make_option() so that the
        expiration comes from the calendar and the strike is snapped.
    """

    model_config = ConfigDict(frozen=True)

    underlying: str
    expiration: date
    type: OptionType
    strike: float = Field(gt=0, description="Strike price (must be positive)")

    @field_validator("underlying")
    @classmethod
    def normalize_underlying(cls, v: str) -> str:
        """Uppercase the ticker and reject blank values."""
        symbol = v.strip().upper()
        if not symbol:
            raise InvalidArgumentError("Underlying symbol must not be empty")
        return symbol

    @property
    def symbol(self) -> str:
        """
        Canonical OCC-style symbol for this option.

        Returns:
            Symbol string, e.g. "AAPL190118C00150000"
        """
        from ..services.symbols import to_symbol

        return to_symbol(self)

    def __str__(self) -> str:
        return self.symbol
