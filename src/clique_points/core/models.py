"""Pydantic v2 models for messages and points with strict validation."""

from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)

from .enums import Granularity
from .errors import CliqueError, InvalidParameterError
from .ids import MAX_SNOWFLAKE, ChannelID, GuildID, MessageID, UserID
from .time import ensure_utc, parse_timestamp


class Message(BaseModel):
    """A stored chat message, as written by the collector."""

    model_config = ConfigDict(frozen=True)

    id: MessageID = Field(ge=0, le=MAX_SNOWFLAKE, description="Message snowflake")
    guild: GuildID = Field(
        ge=0, le=MAX_SNOWFLAKE, description="Guild the message was sent in"
    )
    author: UserID = Field(ge=0, le=MAX_SNOWFLAKE, description="User who sent the message")
    channel: ChannelID = Field(
        ge=0, le=MAX_SNOWFLAKE, description="Channel the message was sent in"
    )
    reply_to: Optional[UserID] = Field(
        default=None,
        ge=0,
        le=MAX_SNOWFLAKE,
        description="Author of the message replied to, if any",
    )
    timestamp: datetime

    @field_validator("timestamp", mode="before")
    @classmethod
    def validate_timestamp(cls, v: Any) -> Any:
        """Normalize timestamps to timezone-aware UTC."""
        if isinstance(v, (datetime, str)):
            return parse_timestamp(v)
        return v

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return self.model_dump_json(exclude_none=True)

    @classmethod
    def json_schema(cls) -> Dict[str, Any]:
        """Export JSON Schema for this model."""
        return cls.model_json_schema()


class PairPoints(BaseModel):
    """Points for one pair of users within a period."""

    model_config = ConfigDict(frozen=True)

    user_1: UserID = Field(description="Greater user ID of the pair")
    user_2: UserID = Field(description="Lesser user ID of the pair")
    points: int = Field(ge=1, description="Number of interactions in the period")

    @model_validator(mode="after")
    def validate_canonical_order(self) -> "PairPoints":
        """Ensure the pair is stored in canonical order."""
        if self.user_1 <= self.user_2:
            raise ValueError(
                f"user_1 must be greater than user_2, got ({self.user_1}, {self.user_2})"
            )
        return self


class PeriodAggregate(BaseModel):
    """Points per user pair over a single period."""

    period: datetime = Field(description="Start of the period")
    data: List[PairPoints] = Field(min_length=1, description="Points per user pair")

    @field_validator("period", mode="before")
    @classmethod
    def validate_period(cls, v: Any) -> Any:
        """Ensure period is timezone-aware UTC."""
        if isinstance(v, datetime):
            return ensure_utc(v)
        return v

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return self.model_dump_json()

    @classmethod
    def json_schema(cls) -> Dict[str, Any]:
        """Export JSON Schema for this model."""
        return cls.model_json_schema()


class PointsQuery(BaseModel):
    """Parameters of a points query."""

    granularity: Granularity
    guild: Optional[GuildID] = Field(
        default=None, ge=0, le=MAX_SNOWFLAKE, description="Guild to filter by"
    )
    after: Optional[datetime] = Field(default=None, description="Exclusive lower bound")
    before: Optional[datetime] = Field(default=None, description="Exclusive upper bound")

    @field_validator("after", "before", mode="before")
    @classmethod
    def validate_bounds(cls, v: Any) -> Any:
        """Normalize bounds to timezone-aware UTC."""
        if isinstance(v, (datetime, str)):
            return parse_timestamp(v)
        return v

    @classmethod
    def from_params(
        cls,
        granularity: Any,
        guild: Any = None,
        after: Any = None,
        before: Any = None,
    ) -> "PointsQuery":
        """
        Build a query from raw caller input.

        Args:
            granularity: Period token, e.g. "day" or "week"
            guild: Optional guild ID (int or decimal string)
            after: Optional exclusive lower bound (datetime or ISO-8601 string)
            before: Optional exclusive upper bound (datetime or ISO-8601 string)

        Returns:
            Validated PointsQuery

        Raises:
            InvalidParameterError: If any parameter is rejected
        """
        # Import here to avoid circular imports
        from ..periods.bucketer import parse_granularity

        period = parse_granularity(granularity)
        guild_id = _parse_guild(guild)
        after_ts = parse_timestamp(after, "after") if after is not None else None
        before_ts = parse_timestamp(before, "before") if before is not None else None

        try:
            return cls(granularity=period, guild=guild_id, after=after_ts, before=before_ts)
        except ValidationError as e:
            raise InvalidParameterError(str(e)) from e


class ErrorBody(BaseModel):
    """Wire shape of an error returned to a caller."""

    code: str
    message: str

    @classmethod
    def from_exception(cls, exc: Exception) -> "ErrorBody":
        """Build an error body, using the error's code when it has one."""
        code = exc.code if isinstance(exc, CliqueError) else "internal"
        return cls(code=code, message=str(exc))


def _parse_guild(value: Any) -> Optional[GuildID]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidParameterError("guild must be an integer ID")
    if isinstance(value, int):
        guild = value
    elif isinstance(value, str) and value.strip().isdigit():
        guild = int(value.strip())
    else:
        raise InvalidParameterError(f"guild must be an integer ID, got {value!r}")
    if guild < 0:
        raise InvalidParameterError(f"guild must be non-negative, got {guild}")
    if guild > MAX_SNOWFLAKE:
        raise InvalidParameterError(f"guild must fit in an unsigned 64-bit ID, got {guild}")
    return GuildID(guild)


# Helper functions for JSON serialization and schema export

_AGGREGATES_ADAPTER = TypeAdapter(List[PeriodAggregate])


def serialize_to_json(model: BaseModel, indent: Optional[int] = None) -> str:
    """
    Serialize a Pydantic model to JSON string.

    Args:
        model: Pydantic model instance
        indent: Optional indentation for pretty printing

    Returns:
        JSON string representation
    """
    return model.model_dump_json(exclude_none=True, indent=indent)


def serialize_aggregates(
    aggregates: Sequence[PeriodAggregate],
    indent: Optional[int] = None,
) -> str:
    """
    Serialize a points result to a JSON array of {period, data} objects.

    Args:
        aggregates: Result of a points query
        indent: Optional indentation for pretty printing

    Returns:
        JSON string representation
    """
    return _AGGREGATES_ADAPTER.dump_json(list(aggregates), indent=indent).decode("utf-8")


def export_json_schema(model_class: type[BaseModel]) -> Dict[str, Any]:
    """
    Export JSON Schema for a Pydantic model class.

    Args:
        model_class: Pydantic model class

    Returns:
        JSON Schema dictionary
    """
    return model_class.model_json_schema()


def export_all_schemas() -> Dict[str, Dict[str, Any]]:
    """
    Export JSON Schemas for all models.

    Returns:
        Dictionary mapping model names to their JSON Schemas
    """
    return {
        "Message": Message.json_schema(),
        "PairPoints": export_json_schema(PairPoints),
        "PeriodAggregate": PeriodAggregate.json_schema(),
        "PointsQuery": export_json_schema(PointsQuery),
        "ErrorBody": export_json_schema(ErrorBody),
    }
