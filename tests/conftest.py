"""Pytest fixtures for points computation tests."""

import pytest

from clique_points.io.stores import InMemoryMessageStore
from tests.fixtures.messages import generate_guild_chatter, make_message


@pytest.fixture
def three_message_channel():
    """Users 1, 2, 1 talk in one channel at 10:00, 10:05, 10:10 with no explicit replies."""
    return [
        make_message(id=1, author=1, minutes=0),
        make_message(id=2, author=2, minutes=5),
        make_message(id=3, author=1, minutes=10),
    ]


@pytest.fixture
def three_message_channel_with_reply():
    """Same as three_message_channel, but the 10:10 message explicitly replies to user 2."""
    return [
        make_message(id=1, author=1, minutes=0),
        make_message(id=2, author=2, minutes=5),
        make_message(id=3, author=1, minutes=10, reply_to=2),
    ]


@pytest.fixture
def two_guilds():
    """Two guilds sharing users, with one channel each and an hour of chatter."""
    return [
        make_message(id=1, author=1, minutes=0, channel=100, guild=1),
        make_message(id=2, author=2, minutes=5, channel=100, guild=1),
        make_message(id=3, author=3, minutes=6, channel=200, guild=2),
        make_message(id=4, author=1, minutes=7, channel=200, guild=2),
        make_message(id=5, author=3, minutes=65, channel=100, guild=1, reply_to=1),
        make_message(id=6, author=2, minutes=70, channel=200, guild=2),
    ]


@pytest.fixture
def chatter():
    """Large deterministic message set across three guilds."""
    return generate_guild_chatter()


@pytest.fixture
def chatter_store(chatter):
    """In-memory store holding the chatter fixture."""
    return InMemoryMessageStore(chatter)
