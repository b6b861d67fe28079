"""Pairwise interaction points between chat users, aggregated per period."""

from .core import (
    Granularity,
    InvalidParameterError,
    InvariantViolationError,
    Message,
    PairPoints,
    PeriodAggregate,
    PointsQuery,
    StoreUnavailableError,
)
from .pipeline import PointsEngine, compute_points, get_points

__version__ = "0.1.0"

__all__ = [
    "Granularity",
    "Message",
    "PairPoints",
    "PeriodAggregate",
    "PointsQuery",
    "InvalidParameterError",
    "InvariantViolationError",
    "StoreUnavailableError",
    "PointsEngine",
    "compute_points",
    "get_points",
]
