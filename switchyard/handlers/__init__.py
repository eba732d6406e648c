"""Handler capability and reference handlers for the dispatch registry.

All handlers implement the ``MessageHandler`` protocol: a ``handler_name``
property and a single ``send(payload=None)`` operation.  The registry only
ever calls ``send``; what a handler does with the message is its own
business.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from switchyard.models.messages import Message


@runtime_checkable
class MessageHandler(Protocol):
    """Protocol that every dispatchable handler must implement.

    Attributes
    ----------
    handler_name : str
        A human-readable identifier for this handler (e.g. ``"email"``).
    """

    @property
    def handler_name(self) -> str:
        """Return the name of this handler."""
        ...

    def send(self, payload: Message | None = None) -> Any:
        """Deliver *payload* through this handler's channel.

        Failures are signalled by raising; the registry forwards them to
        the caller without translation.

        Parameters
        ----------
        payload:
            The message to deliver, or ``None`` when the caller has nothing
            beyond the dispatch itself to convey.
        """
        ...


__all__ = ["MessageHandler"]
