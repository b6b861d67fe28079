"""Invariant enforcement helpers for points computation."""

from .errors import InvariantViolationError


def require_distinct(name: str, a: int, b: int) -> None:
    """
    Require that two participant identifiers differ.

    Args:
        name: Name of the pair for error messages
        a: First identifier
        b: Second identifier

    Raises:
        InvariantViolationError: If the identifiers are equal
    """
    if a == b:
        raise InvariantViolationError(f"{name} must involve two distinct users, got {a} twice")


def require_positive(name: str, n: int) -> int:
    """
    Require that a count is at least one.

    Args:
        name: Name of the value for error messages
        n: Value to check

    Returns:
        The value if positive

    Raises:
        InvariantViolationError: If value is below one
    """
    if n < 1:
        raise InvariantViolationError(f"{name} must be >= 1, got {n}")
    return n
