"""Tests for calendar-aware period truncation."""

from datetime import datetime, timedelta, timezone

import pytest

from clique_points.core import Granularity, InvalidParameterError
from clique_points.periods import parse_granularity, truncate


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


class TestTruncate:
    """Truncation matches PostgreSQL DATE_TRUNC on UTC timestamps."""

    @pytest.mark.parametrize(
        "granularity,ts,expected",
        [
            ("microsecond", utc(2024, 1, 17, 10, 37, 12, 345678), utc(2024, 1, 17, 10, 37, 12, 345678)),
            ("millisecond", utc(2024, 1, 17, 10, 37, 12, 345678), utc(2024, 1, 17, 10, 37, 12, 345000)),
            ("second", utc(2024, 1, 17, 10, 37, 12, 345678), utc(2024, 1, 17, 10, 37, 12)),
            ("minute", utc(2024, 1, 17, 10, 37, 12, 345678), utc(2024, 1, 17, 10, 37)),
            ("hour", utc(2024, 1, 17, 10, 37, 12, 345678), utc(2024, 1, 17, 10)),
            ("day", utc(2024, 1, 17, 10, 37, 12, 345678), utc(2024, 1, 17)),
            ("week", utc(2024, 1, 17, 10, 37, 12, 345678), utc(2024, 1, 15)),
            ("week", utc(2021, 1, 2, 23, 59), utc(2020, 12, 28)),
            ("week", utc(2024, 1, 15), utc(2024, 1, 15)),
            ("month", utc(2024, 2, 29, 23, 59), utc(2024, 2, 1)),
            ("quarter", utc(2024, 5, 20, 8), utc(2024, 4, 1)),
            ("quarter", utc(2024, 12, 31, 23, 59), utc(2024, 10, 1)),
            ("year", utc(2024, 7, 4, 12), utc(2024, 1, 1)),
            ("decade", utc(2009, 12, 31), utc(2000, 1, 1)),
            ("decade", utc(2024, 3, 1), utc(2020, 1, 1)),
            ("century", utc(2024, 3, 1), utc(2001, 1, 1)),
            ("century", utc(2000, 6, 1), utc(1901, 1, 1)),
            ("millennium", utc(2024, 3, 1), utc(2001, 1, 1)),
            ("millennium", utc(2000, 6, 1), utc(1001, 1, 1)),
        ],
    )
    def test_matches_date_trunc(self, granularity, ts, expected):
        assert truncate(ts, Granularity(granularity)) == expected

    def test_result_is_utc(self):
        result = truncate(utc(2024, 1, 17, 10), Granularity.DAY)
        assert result.tzinfo is not None
        assert result.utcoffset() == timedelta(0)

    def test_converts_to_utc_before_truncating(self):
        """01:30 at UTC+5 is 20:30 the previous day in UTC."""
        ts = datetime(2024, 1, 15, 1, 30, tzinfo=timezone(timedelta(hours=5)))
        assert truncate(ts, Granularity.DAY) == utc(2024, 1, 14)

    def test_naive_assumed_utc(self):
        assert truncate(datetime(2024, 1, 15, 10, 30), Granularity.HOUR) == utc(2024, 1, 15, 10)

    @pytest.mark.parametrize("granularity", list(Granularity))
    def test_monotonic(self, granularity, chatter):
        """bucket(t1) <= bucket(t2) whenever t1 <= t2."""
        timestamps = sorted(m.timestamp for m in chatter)
        buckets = [truncate(ts, granularity) for ts in timestamps]

        assert buckets == sorted(buckets)
        assert all(b <= ts for b, ts in zip(buckets, timestamps))


class TestParseGranularity:
    """Test period token parsing."""

    @pytest.mark.parametrize("token", ["hour", "HOUR", " Hour ", Granularity.HOUR])
    def test_accepts_known_tokens(self, token):
        assert parse_granularity(token) == Granularity.HOUR

    @pytest.mark.parametrize("token", ["fortnight", "", "days", None, 7])
    def test_rejects_unknown_tokens(self, token):
        with pytest.raises(InvalidParameterError):
            parse_granularity(token)
