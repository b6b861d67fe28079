"""Interaction derivation: reply inference, events and canonical pairs."""

from .events import InteractionEvent, derive_events, explicit_events
from .inference import InferredLink, group_by_channel, infer_links, order_key
from .pairs import CanonicalPair, canonicalize

__all__ = [
    "InferredLink",
    "InteractionEvent",
    "CanonicalPair",
    "order_key",
    "group_by_channel",
    "infer_links",
    "explicit_events",
    "derive_events",
    "canonicalize",
]
