"""In-memory message store."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional

from ...core import GuildID, Message
from ...filters import ScopeFilter
from .base import MessageStore


class InMemoryMessageStore(MessageStore):
    """List-backed store, used for tests and embedding the engine directly."""

    def __init__(self, messages: Optional[Iterable[Message]] = None):
        self._messages: List[Message] = list(messages or [])

    def __len__(self) -> int:
        return len(self._messages)

    def add(self, message: Message) -> None:
        self._messages.append(message)

    def extend(self, messages: Iterable[Message]) -> None:
        self._messages.extend(messages)

    def fetch_messages(
        self,
        guild: Optional[GuildID] = None,
        after: Optional[datetime] = None,
        before: Optional[datetime] = None,
    ) -> List[Message]:
        """Return a scoped copy of the stored messages."""
        scope = ScopeFilter(guild=guild, after=after, before=before)
        return scope.apply(self._messages)
