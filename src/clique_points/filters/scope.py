"""Scope filtering of messages by guild and time range."""

from datetime import datetime
from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, Field, field_validator

from ..core import GuildID, Message, PointsQuery, parse_timestamp


class ScopeFilter(BaseModel):
    """
    Restricts a message set to one guild and/or an open time window.

    Both bounds are exclusive and absent fields impose no constraint. The
    filter runs before reply inference, so excluded messages never act as
    the predecessor of a later message.
    """

    guild: Optional[GuildID] = Field(default=None, description="Guild to keep")
    after: Optional[datetime] = Field(default=None, description="Exclusive lower bound")
    before: Optional[datetime] = Field(default=None, description="Exclusive upper bound")

    @field_validator("after", "before", mode="before")
    @classmethod
    def validate_bounds(cls, v: Any) -> Any:
        """Ensure bounds are timezone-aware UTC."""
        if isinstance(v, (datetime, str)):
            return parse_timestamp(v)
        return v

    @classmethod
    def from_query(cls, query: PointsQuery) -> "ScopeFilter":
        """Build the filter described by a points query."""
        return cls(guild=query.guild, after=query.after, before=query.before)

    @property
    def is_unbounded(self) -> bool:
        """True if the filter lets every message through."""
        return self.guild is None and self.after is None and self.before is None

    def passes(self, message: Message) -> bool:
        """Check whether a message falls inside the scope."""
        if self.guild is not None and message.guild != self.guild:
            return False
        if self.after is not None and not message.timestamp > self.after:
            return False
        if self.before is not None and not message.timestamp < self.before:
            return False
        return True

    def apply(self, messages: Iterable[Message]) -> List[Message]:
        """Return the messages inside the scope, preserving order."""
        return [m for m in messages if self.passes(m)]
