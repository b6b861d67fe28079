"""Strict enums for points models."""

from enum import Enum


class Granularity(str, Enum):
    """
    Length of time over which points are aggregated.

    Mirrors the units accepted by PostgreSQL's DATE_TRUNC. Values below
    second or above year are kept for completeness but are rarely useful.
    """

    MICROSECOND = "microsecond"
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"
    DECADE = "decade"
    CENTURY = "century"
    MILLENNIUM = "millennium"


class LinkSource(str, Enum):
    """How an interaction between two users was established."""

    EXPLICIT = "explicit"
    INFERRED = "inferred"
