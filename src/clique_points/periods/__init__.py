"""Period bucketing."""

from .bucketer import parse_granularity, truncate

__all__ = ["parse_granularity", "truncate"]
