"""Exception types raised by switchyard.

Handler failures are deliberately absent: whatever a handler raises is
propagated to the caller unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable


class SwitchyardError(Exception):
    """Base class for all switchyard errors."""


class HandlerNotFoundError(SwitchyardError, LookupError):
    """Raised when a tag has no handler bound in a ``DispatchRegistry``.

    Attributes
    ----------
    tag : str
        The tag that failed to resolve.
    available : list[str]
        Tags that were bound at the time of the lookup, sorted.
    """

    def __init__(self, tag: str, available: Iterable[str] = ()) -> None:
        self.tag = tag
        self.available = sorted(available)
        known = ", ".join(self.available) if self.available else "none"
        super().__init__(f"No handler registered for tag {tag!r} (registered: {known})")
