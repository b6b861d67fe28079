"""Message scope filters."""

from .scope import ScopeFilter

__all__ = ["ScopeFilter"]
