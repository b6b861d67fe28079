"""Core models and utilities for points computation."""

from .enums import Granularity, LinkSource
from .errors import (
    CliqueError,
    InvalidParameterError,
    InvariantViolationError,
    StoreUnavailableError,
)
from .ids import MAX_SNOWFLAKE, ChannelID, GuildID, MessageID, UserID
from .models import (
    ErrorBody,
    Message,
    PairPoints,
    PeriodAggregate,
    PointsQuery,
    export_all_schemas,
    export_json_schema,
    serialize_aggregates,
    serialize_to_json,
)
from .time import ensure_utc, parse_timestamp, utc_now
from .validation import require_distinct, require_positive

__all__ = [
    # Enums
    "Granularity",
    "LinkSource",
    # Errors
    "CliqueError",
    "InvalidParameterError",
    "InvariantViolationError",
    "StoreUnavailableError",
    # IDs
    "MessageID",
    "GuildID",
    "UserID",
    "ChannelID",
    "MAX_SNOWFLAKE",
    # Models
    "Message",
    "PairPoints",
    "PeriodAggregate",
    "PointsQuery",
    "ErrorBody",
    # Time utilities
    "utc_now",
    "ensure_utc",
    "parse_timestamp",
    # Helpers
    "serialize_to_json",
    "serialize_aggregates",
    "export_json_schema",
    "export_all_schemas",
    # Validation
    "require_distinct",
    "require_positive",
]
