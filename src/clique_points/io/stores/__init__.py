"""Message stores.

The SQLite store is imported from its own module only when selected.
"""

from .base import MessageStore
from .fixtures import FixtureMessageStore
from .memory import InMemoryMessageStore
from .validation import validate_messages

__all__ = [
    "MessageStore",
    "InMemoryMessageStore",
    "FixtureMessageStore",
    "validate_messages",
]
