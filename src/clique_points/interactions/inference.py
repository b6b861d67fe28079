"""Reply inference from channel adjacency."""

from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List, Tuple

from ..core import ChannelID, GuildID, Message, MessageID, UserID


@dataclass(frozen=True)
class InferredLink:
    """A reply relationship deduced from the previous message in a channel."""

    message_id: MessageID
    guild: GuildID
    channel: ChannelID
    author: UserID
    counterpart: UserID  # Author of the preceding message
    timestamp: datetime


def order_key(message: Message) -> Tuple[datetime, int]:
    """
    Total order of messages within a channel.

    Messages are ordered by timestamp; equal timestamps fall back to the
    message ID, which increases with ingestion order.
    """
    return (message.timestamp, message.id)


def group_by_channel(messages: Iterable[Message]) -> Dict[ChannelID, List[Message]]:
    """
    Group messages by channel, each group sorted by order_key.

    Args:
        messages: Messages in any order

    Returns:
        Mapping of channel ID to its messages in ascending order
    """
    channels: Dict[ChannelID, List[Message]] = defaultdict(list)
    for message in messages:
        channels[message.channel].append(message)
    for channel_messages in channels.values():
        channel_messages.sort(key=order_key)
    return dict(channels)


def infer_links(messages: Iterable[Message]) -> List[InferredLink]:
    """
    Infer reply targets for messages without an explicit one.

    Each such message links to the author of the immediately preceding
    message in its channel. The first message of a channel has no
    predecessor and yields nothing. Messages with an explicit reply_to are
    skipped, but still serve as the predecessor of the next message.
    Same-author adjacency is reported as-is.

    Args:
        messages: Messages in any order

    Returns:
        Inferred links ordered by channel, then by order_key
    """
    links: List[InferredLink] = []
    channels = group_by_channel(messages)

    for channel in sorted(channels):
        ordered = channels[channel]
        for previous, current in zip(ordered, ordered[1:]):
            if current.reply_to is not None:
                continue
            links.append(
                InferredLink(
                    message_id=current.id,
                    guild=current.guild,
                    channel=current.channel,
                    author=current.author,
                    counterpart=previous.author,
                    timestamp=current.timestamp,
                )
            )

    return links
