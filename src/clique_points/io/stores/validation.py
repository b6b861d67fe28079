"""Store-agnostic Message snapshot validation helpers."""

from __future__ import annotations

from typing import List

from ...core import InvariantViolationError, Message


def validate_messages(messages: List[Message]) -> None:
    """
    Validate Message[] snapshot invariants.

    Raises InvariantViolationError if:
    - any Message.timestamp is naive or non-UTC
    - two messages share an ID (the within-channel order would not be total)
    """
    if not isinstance(messages, list):
        raise InvariantViolationError("messages must be a list")

    for i, m in enumerate(messages):
        if m.timestamp.tzinfo is None:
            raise InvariantViolationError(f"message[{i}].timestamp is naive")
        offset = m.timestamp.tzinfo.utcoffset(m.timestamp)
        if offset is None or offset.total_seconds() != 0:
            raise InvariantViolationError(f"message[{i}].timestamp is not UTC")

    ids = [m.id for m in messages]
    if len(ids) != len(set(ids)):
        raise InvariantViolationError("messages contain duplicate IDs")
