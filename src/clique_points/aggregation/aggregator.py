"""Pure sparse aggregation of interaction events into per-period points."""

from collections import Counter, defaultdict
from datetime import datetime
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from ..core import Granularity, PairPoints, PeriodAggregate, require_positive
from ..interactions import CanonicalPair, InteractionEvent, canonicalize
from ..periods import truncate

PointsKey = Tuple[datetime, CanonicalPair]


def tag_events(
    events: Iterable[InteractionEvent],
    granularity: Granularity,
) -> Iterator[PointsKey]:
    """
    Tag each event with its period and canonical pair.

    Args:
        events: Interaction events (self-links already removed)
        granularity: Period unit

    Yields:
        (period start, canonical pair) per event
    """
    for event in events:
        yield truncate(event.timestamp, granularity), canonicalize(event.author, event.counterpart)


def count_points(tagged: Iterable[PointsKey]) -> Counter:
    """
    Count interactions per (period, pair).

    Pairs that never interacted in a period have no entry at all.

    Args:
        tagged: Output of tag_events

    Returns:
        Counter keyed by (period, CanonicalPair)
    """
    return Counter(tagged)


def group_by_period(counts: Dict[PointsKey, int]) -> List[PeriodAggregate]:
    """
    Group pair counts into one aggregate per period.

    Args:
        counts: Mapping of (period, pair) to points

    Returns:
        PeriodAggregates in ascending period order. Rows within a period
        are sorted by pair for stable output; the order has no meaning.
    """
    by_period: Dict[datetime, List[PairPoints]] = defaultdict(list)

    for (period, pair), points in sorted(counts.items(), reverse=True):
        by_period[period].append(
            PairPoints(
                user_1=pair.user_1,
                user_2=pair.user_2,
                points=require_positive("points", points),
            )
        )

    return [
        PeriodAggregate(period=period, data=by_period[period])
        for period in sorted(by_period)
    ]


def aggregate(
    events: Iterable[InteractionEvent],
    granularity: Granularity,
) -> List[PeriodAggregate]:
    """
    Aggregate interaction events into ordered per-period points.

    Args:
        events: Interaction events (self-links already removed)
        granularity: Period unit

    Returns:
        PeriodAggregates in ascending period order
    """
    return group_by_period(count_points(tag_events(events, granularity)))


def total_points(aggregates: Sequence[PeriodAggregate]) -> int:
    """Sum of points across every period and pair."""
    return sum(row.points for agg in aggregates for row in agg.data)
