"""
Monthly expiration calendar.

Builds and owns the ordered list of standardized monthly expirations
(3rd Friday of each month, no holiday adjustment) over a past/future window
around a reference date.
"""

import logging
from datetime import date, datetime, timedelta
from threading import Lock, RLock
from typing import Iterator

from ..config import Settings, get_settings
from ..utils.exceptions import InvalidArgumentError, OutOfRangeError

logger = logging.getLogger(__name__)

FRIDAY = 4


def third_friday(year: int, month: int) -> date:
    """
    Get the 3rd Friday of a month.

    Args:
        year: Calendar year
        month: Calendar month (1-12)

    Returns:
        Date of the third Friday
    """
    first = date(year, month, 1)
    first_friday = first + timedelta(days=(FRIDAY - first.weekday()) % 7)
    return first_friday + timedelta(weeks=2)


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def _add_months(year: int, month: int, months: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + months
    return index // 12, index % 12 + 1


class ExpirationCalendar:
    """
    Thread-safe calendar of monthly option expirations.

    The expiration list is held as an immutable tuple. A rebuild computes a
    new tuple and swaps it in under the lock, so readers always see either
    the previous or the new calendar in full.

    Example:
        >>> cal = ExpirationCalendar(past_years=0, future_years=1,
        ...                          reference_now=date(2019, 1, 10))
        >>> cal.resolve_expiration(date(2019, 1, 10))
        datetime.date(2019, 1, 18)
    """

    def __init__(
        self,
        past_years: int = 10,
        future_years: int = 1,
        reference_now: date | datetime | None = None,
    ) -> None:
        """
        Initialize and build the calendar.

        Args:
            past_years: Years of history before the reference month
            future_years: Years of future expirations after the reference month
            reference_now: Reference "now"; defaults to today when omitted
        """
        self._lock = RLock()
        self._expirations: tuple[date, ...] = ()
        self.build(past_years, future_years, reference_now)

    def build(
        self,
        past_years: int = 10,
        future_years: int = 1,
        reference_now: date | datetime | None = None,
    ) -> tuple[date, ...]:
        """
        Build (or rebuild) the expiration list.

        Args:
            past_years: Years of history before the reference month
            future_years: Years of future expirations after the reference month
            reference_now: Reference "now"; defaults to today when omitted

        Returns:
            The new expiration tuple

        Raises:
            InvalidArgumentError: If either year count is negative

        Note:
            The window covers every month from the reference month minus
            past_years up to and including the reference month plus
            future_years. The previous list is replaced, not extended.
        """
        if past_years < 0 or future_years < 0:
            raise InvalidArgumentError(
                f"Year offsets must be non-negative (past_years={past_years}, "
                f"future_years={future_years})"
            )

        now = _as_date(reference_now) if reference_now is not None else date.today()
        year, month = now.year - past_years, now.month
        stop = _add_months(now.year + future_years, now.month, 1)

        expirations = []
        while (year, month) < stop:
            expirations.append(third_friday(year, month))
            year, month = _add_months(year, month, 1)

        snapshot = tuple(expirations)
        with self._lock:
            self._expirations = snapshot

        logger.info(
            f"Built expiration calendar: {len(snapshot)} expirations "
            f"from {snapshot[0]} to {snapshot[-1]}"
        )
        return snapshot

    @property
    def expirations(self) -> tuple[date, ...]:
        """Current expiration dates, strictly ascending."""
        with self._lock:
            return self._expirations

    @property
    def first(self) -> date:
        return self.expirations[0]

    @property
    def last(self) -> date:
        return self.expirations[-1]

    def resolve_expiration(
        self, on_date: date | datetime, forward_months: int = 0
    ) -> date:
        """
        Resolve the expiration a number of months forward from a date.

        Args:
            on_date: Reference date; only expirations strictly after it count
            forward_months: Offset into the future expirations (0 = nearest)

        Returns:
            The resolved expiration date

        Raises:
            InvalidArgumentError: If forward_months is negative
            OutOfRangeError: If the calendar has too few future expirations
        """
        if forward_months < 0:
            raise InvalidArgumentError(
                f"forward_months must be non-negative, got {forward_months}"
            )

        day = _as_date(on_date)
        future = [e for e in self.expirations if e > day]

        if forward_months >= len(future):
            logger.debug(
                f"Calendar exhausted: {forward_months} months forward from {day}, "
                f"{len(future)} future expirations available"
            )
            raise OutOfRangeError(
                f"No expiration {forward_months} months forward from {day}: "
                f"calendar ends at {self.last}"
            )

        return future[forward_months]

    def __len__(self) -> int:
        return len(self.expirations)

    def __iter__(self) -> Iterator[date]:
        return iter(self.expirations)

    def __contains__(self, item: object) -> bool:
        return item in self.expirations


# Global calendar instance
_calendar: ExpirationCalendar | None = None
_calendar_lock = Lock()


def get_calendar(settings: Settings | None = None) -> ExpirationCalendar:
    """
    Get or create the process-wide default calendar.

    Args:
        settings: Application settings (defaults to get_settings())

    Returns:
        ExpirationCalendar singleton built from past_years/future_years

    Note:
        Callers that need a fixed reference date should construct their own
        ExpirationCalendar and pass it explicitly.
    """
    global _calendar
    with _calendar_lock:
        if _calendar is None:
            settings = settings or get_settings()
            _calendar = ExpirationCalendar(
                past_years=settings.past_years,
                future_years=settings.future_years,
            )
        return _calendar


def reset_calendar() -> None:
    """Drop the default calendar so the next get_calendar() rebuilds it."""
    global _calendar
    with _calendar_lock:
        _calendar = None
