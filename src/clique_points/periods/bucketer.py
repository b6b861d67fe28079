"""Pure calendar-aware timestamp truncation.

Matches PostgreSQL's DATE_TRUNC on UTC timestamps, so periods computed here
agree with results previously produced by the database query.
"""

from datetime import datetime, timedelta
from typing import Any, Callable, Dict

from ..core import Granularity, InvalidParameterError, ensure_utc


def parse_granularity(token: Any) -> Granularity:
    """
    Parse a period token into a Granularity.

    Tokens are matched case-insensitively with surrounding whitespace ignored.

    Args:
        token: Granularity instance or string such as "day" or "WEEK"

    Returns:
        Granularity

    Raises:
        InvalidParameterError: If the token is not a known unit
    """
    if isinstance(token, Granularity):
        return token
    if isinstance(token, str):
        try:
            return Granularity(token.strip().lower())
        except ValueError:
            pass
    valid = ", ".join(g.value for g in Granularity)
    raise InvalidParameterError(f"Unknown period {token!r}; expected one of: {valid}")


def _year_start(ts: datetime, year: int) -> datetime:
    return ts.replace(year=year, month=1, day=1, hour=0, minute=0, second=0, microsecond=0)


def _trunc_millisecond(ts: datetime) -> datetime:
    return ts.replace(microsecond=ts.microsecond - ts.microsecond % 1000)


def _trunc_week(ts: datetime) -> datetime:
    # ISO weeks start on Monday
    day = ts.replace(hour=0, minute=0, second=0, microsecond=0)
    return day - timedelta(days=day.weekday())


def _trunc_quarter(ts: datetime) -> datetime:
    month = 3 * ((ts.month - 1) // 3) + 1
    return ts.replace(month=month, day=1, hour=0, minute=0, second=0, microsecond=0)


def _trunc_decade(ts: datetime) -> datetime:
    # Year 1-9 would floor to year 0, which datetime cannot represent
    return _year_start(ts, max(1, (ts.year // 10) * 10))


def _trunc_century(ts: datetime) -> datetime:
    # Centuries start on year 1 mod 100: 1901, 2001, ...
    return _year_start(ts, ((ts.year + 99) // 100) * 100 - 99)


def _trunc_millennium(ts: datetime) -> datetime:
    return _year_start(ts, ((ts.year + 999) // 1000) * 1000 - 999)


_TRUNCATORS: Dict[Granularity, Callable[[datetime], datetime]] = {
    Granularity.MICROSECOND: lambda ts: ts,
    Granularity.MILLISECOND: _trunc_millisecond,
    Granularity.SECOND: lambda ts: ts.replace(microsecond=0),
    Granularity.MINUTE: lambda ts: ts.replace(second=0, microsecond=0),
    Granularity.HOUR: lambda ts: ts.replace(minute=0, second=0, microsecond=0),
    Granularity.DAY: lambda ts: ts.replace(hour=0, minute=0, second=0, microsecond=0),
    Granularity.WEEK: _trunc_week,
    Granularity.MONTH: lambda ts: ts.replace(
        day=1, hour=0, minute=0, second=0, microsecond=0
    ),
    Granularity.QUARTER: _trunc_quarter,
    Granularity.YEAR: lambda ts: _year_start(ts, ts.year),
    Granularity.DECADE: _trunc_decade,
    Granularity.CENTURY: _trunc_century,
    Granularity.MILLENNIUM: _trunc_millennium,
}


def truncate(ts: datetime, granularity: Granularity) -> datetime:
    """
    Truncate a timestamp to the start of its containing period.

    Truncation is monotone: for a fixed granularity, a <= b implies
    truncate(a) <= truncate(b).

    Args:
        ts: Timestamp (naive values are assumed UTC)
        granularity: Period unit

    Returns:
        Timezone-aware UTC start of the period
    """
    return _TRUNCATORS[parse_granularity(granularity)](ensure_utc(ts))
