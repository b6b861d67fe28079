"""Canonical, direction-agnostic user pairs."""

from dataclasses import dataclass
from typing import Tuple

from ..core import InvariantViolationError, UserID, require_distinct


@dataclass(frozen=True, order=True)
class CanonicalPair:
    """
    Unordered pair of two distinct users.

    The greater ID is always user_1, so (A, B) and (B, A) share one key.
    Use canonicalize() to build one from a directed pair.
    """

    user_1: UserID
    user_2: UserID

    def __post_init__(self):
        require_distinct("pair", self.user_1, self.user_2)
        if self.user_1 < self.user_2:
            raise InvariantViolationError(
                f"pair ({self.user_1}, {self.user_2}) is not canonical; "
                "user_1 must be the greater ID"
            )

    def as_tuple(self) -> Tuple[UserID, UserID]:
        return (self.user_1, self.user_2)


def canonicalize(a: UserID, b: UserID) -> CanonicalPair:
    """
    Map a directed interaction to its canonical pair.

    Args:
        a: Author of the interaction
        b: User the author talked to

    Returns:
        CanonicalPair(max(a, b), min(a, b))

    Raises:
        InvariantViolationError: If a == b
    """
    require_distinct("pair", a, b)
    return CanonicalPair(user_1=max(a, b), user_2=min(a, b))
