"""Base interface for message stores."""

from datetime import datetime
from typing import List, Optional, Protocol

from ...core import GuildID, Message


class MessageStore(Protocol):
    """
    Protocol for message stores.

    All stores must implement fetch_messages() to return a point-in-time
    snapshot of stored messages.
    """

    def fetch_messages(
        self,
        guild: Optional[GuildID] = None,
        after: Optional[datetime] = None,
        before: Optional[datetime] = None,
    ) -> List[Message]:
        """
        Get messages, optionally scoped to a guild and time window.

        Args:
            guild: Only return messages from this guild, if set
            after: Only return messages sent strictly after this time, if set
            before: Only return messages sent strictly before this time, if set

        Returns:
            List of Message objects read from a single consistent view.
            Stores may return extra messages; callers re-apply the scope.
        """
        ...
