"""Sparse points aggregation."""

from .aggregator import (
    aggregate,
    count_points,
    group_by_period,
    tag_events,
    total_points,
)

__all__ = [
    "tag_events",
    "count_points",
    "group_by_period",
    "aggregate",
    "total_points",
]
