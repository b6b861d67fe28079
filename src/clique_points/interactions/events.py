"""Derivation of interaction events from explicit and inferred replies."""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List

from ..core import GuildID, LinkSource, Message, MessageID, UserID
from .inference import infer_links


@dataclass(frozen=True)
class InteractionEvent:
    """One user talking to another, attributed to a single message."""

    message_id: MessageID
    guild: GuildID
    author: UserID
    counterpart: UserID
    timestamp: datetime
    source: LinkSource

    @property
    def is_self_link(self) -> bool:
        return self.author == self.counterpart


def explicit_events(messages: Iterable[Message]) -> List[InteractionEvent]:
    """
    Build events for messages that explicitly reply to a user.

    Args:
        messages: Messages in any order

    Returns:
        One event per message with reply_to set, in input order
    """
    return [
        InteractionEvent(
            message_id=m.id,
            guild=m.guild,
            author=m.author,
            counterpart=m.reply_to,
            timestamp=m.timestamp,
            source=LinkSource.EXPLICIT,
        )
        for m in messages
        if m.reply_to is not None
    ]


def derive_events(messages: Iterable[Message]) -> List[InteractionEvent]:
    """
    Derive every interaction event from a message set.

    Explicit replies take precedence; inference only fills in messages
    without one, so each message contributes at most one event. Events
    where a user interacts with themself are dropped.

    Args:
        messages: Already scope-filtered messages

    Returns:
        Explicit events followed by inferred events, self-links excluded
    """
    messages = list(messages)
    events = explicit_events(messages)
    events.extend(
        InteractionEvent(
            message_id=link.message_id,
            guild=link.guild,
            author=link.author,
            counterpart=link.counterpart,
            timestamp=link.timestamp,
            source=LinkSource.INFERRED,
        )
        for link in infer_links(messages)
    )
    return [e for e in events if not e.is_self_link]
