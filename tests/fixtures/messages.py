"""Deterministic message fixtures for testing."""

import random
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from clique_points.core import Message


BASE_TS = datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone.utc)


def make_message(
    id: int,
    author: int,
    minutes: float,
    channel: int = 100,
    guild: int = 1,
    reply_to: Optional[int] = None,
) -> Message:
    """Build a message sent `minutes` after BASE_TS."""
    return Message(
        id=id,
        guild=guild,
        author=author,
        channel=channel,
        reply_to=reply_to,
        timestamp=BASE_TS + timedelta(minutes=minutes),
    )


def generate_guild_chatter(
    num_messages: int = 300,
    seed: int = 42,
) -> List[Message]:
    """
    Generate deterministic chatter across several guilds and channels.

    - 3 guilds with 2 channels each, 6 users
    - roughly one message in five is an explicit reply
    - timestamps collide now and then to exercise tie-breaking
    - spread over about ten days

    Args:
        num_messages: Number of messages to generate
        seed: Random seed

    Returns:
        List of Message objects in shuffled (non-chronological) order
    """
    rng = random.Random(seed)
    users = [11, 22, 33, 44, 55, 66]
    channels = {1000: 1, 1001: 1, 2000: 2, 2001: 2, 3000: 3, 3001: 3}

    messages = []
    minutes = 0
    for i in range(num_messages):
        # Occasionally reuse the previous timestamp
        if rng.random() > 0.1:
            minutes += rng.randint(1, 90)
        channel = rng.choice(sorted(channels))
        author = rng.choice(users)
        reply_to = rng.choice(users) if rng.random() < 0.2 else None
        messages.append(
            make_message(
                id=10_000 + i,
                author=author,
                minutes=minutes,
                channel=channel,
                guild=channels[channel],
                reply_to=reply_to,
            )
        )

    rng.shuffle(messages)
    return messages
