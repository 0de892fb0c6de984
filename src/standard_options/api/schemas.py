"""
API request and response schemas.

These Pydantic models define the contract between the API and clients.
"""

from datetime import date

from pydantic import BaseModel, Field

from ..models.domain import Option, OptionType


class ErrorResponse(BaseModel):
    """
    Standardized error response format.

    Attributes:
        error: Human-readable error message
        code: Machine-readable error code (SNAKE_CASE)
        details: Optional additional context
    """

    error: str = Field(description="Human-readable error message")
    code: str = Field(description="Machine-readable error code")
    details: dict[str, str] | None = Field(
        default=None, description="Optional additional error context"
    )


class HealthCheckResponse(BaseModel):
    """
    Health check endpoint response.

    Attributes:
        status: Current service status
        version: API version
    """

    status: str = Field(description="Service status", examples=["healthy"])
    version: str = Field(description="API version", examples=["0.1.0"])


class ExpirationsResponse(BaseModel):
    """
    Expiration calendar listing.

    Attributes:
        count: Number of expirations returned
        expirations: Expiration dates, ascending
    """

    count: int = Field(description="Number of expirations returned")
    expirations: list[date] = Field(description="Expiration dates, ascending")


class ResolvedExpirationResponse(BaseModel):
    """Expiration resolved from a reference date and month offset."""

    on_date: date
    months: int
    expiration: date = Field(description="Resolved expiration", examples=["2019-01-18"])


class StrikesResponse(BaseModel):
    """
    Strike ladder around a price.

    Attributes:
        price: Underlying price
        spacing: Strike spacing for the price tier
        closest_strike: Nearest valid strike
        strikes: Ascending strike ladder
    """

    price: float
    spacing: float = Field(examples=[5.0])
    closest_strike: float = Field(examples=[150.0])
    strikes: list[float]


class OptionResponse(BaseModel):
    """
    Option details with its canonical symbol.

    Attributes:
        symbol: OCC-style option symbol
        underlying: Underlying ticker symbol
        expiration: Expiration date
        type: Option type (call or put)
        strike: Strike price
    """

    symbol: str = Field(description="Option symbol", examples=["AAPL190118C00150000"])
    underlying: str = Field(description="Underlying ticker symbol", examples=["AAPL"])
    expiration: date = Field(description="Expiration date")
    type: OptionType = Field(description="Option type", examples=["call", "put"])
    strike: float = Field(description="Strike price", examples=[150.0])

    @classmethod
    def from_option(cls, option: Option) -> "OptionResponse":
        return cls(
            symbol=option.symbol,
            underlying=option.underlying,
            expiration=option.expiration,
            type=option.type,
            strike=option.strike,
        )


class OptionChainResponse(BaseModel):
    """
    Option chain for one underlying, expiration and type.

    Attributes:
        underlying: Underlying ticker symbol
        expiration: Shared expiration date
        type: Shared option type
        options: Options in ascending strike order
    """

    underlying: str
    expiration: date
    type: OptionType
    options: list[OptionResponse] = Field(default_factory=list)
