"""ID type definitions."""

from typing import NewType


# Discord snowflakes, stored as unsigned 64-bit integers
MessageID = NewType("MessageID", int)
GuildID = NewType("GuildID", int)
UserID = NewType("UserID", int)
ChannelID = NewType("ChannelID", int)

MAX_SNOWFLAKE = (1 << 64) - 1
