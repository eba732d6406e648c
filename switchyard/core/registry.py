"""DispatchRegistry — routes a message-type tag to a single handler.

Replaces a conditional ladder keyed on type strings with an open mapping.
New handler kinds are added by registration alone; the dispatch logic
never changes.

Invariants
----------
* At most one handler is bound per tag.  Re-registration replaces the
  previous binding (last write wins).
* Tags are matched exactly: no case folding, no partial matches.
* Looking up an unbound tag raises ``HandlerNotFoundError``; it is never
  a silent no-op.
* Handler exceptions reach the caller unchanged.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from switchyard.errors import HandlerNotFoundError

if TYPE_CHECKING:
    from switchyard.handlers import MessageHandler
    from switchyard.models.messages import Message

logger = logging.getLogger(__name__)


class DispatchRegistry:
    """Maps tags to handlers and forwards dispatched payloads to them.

    Writes (``register`` / ``unregister``) are serialized by an internal
    lock.  Each write swaps in a fresh mapping, so ``resolve`` and
    ``dispatch`` always read a stable snapshot and invoke handlers
    outside the lock.

    Usage
    -----
    >>> registry = DispatchRegistry()
    >>> registry.register("EMAIL", email_handler)
    >>> registry.dispatch("EMAIL", Message(body="hello"))
    """

    def __init__(self, handlers: Mapping[str, MessageHandler] | None = None) -> None:
        self._lock = threading.RLock()
        self._handlers: dict[str, MessageHandler] = {}
        for tag, handler in (handlers or {}).items():
            self.register(tag, handler)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, tag: str, handler: MessageHandler) -> None:
        """Bind *tag* to *handler*, replacing any existing binding.

        Callers that need strict uniqueness should check ``has_handler``
        first.
        """
        with self._lock:
            previous = self._handlers.get(tag)
            updated = dict(self._handlers)
            updated[tag] = handler
            self._handlers = updated
        if previous is not None and previous is not handler:
            logger.info(
                "Replaced handler for tag %r: %s -> %s",
                tag,
                _describe(previous),
                _describe(handler),
            )
        else:
            logger.info("Registered handler for tag %r: %s", tag, _describe(handler))

    def unregister(self, tag: str) -> bool:
        """Remove the binding for *tag*.

        Returns ``True`` if a binding was removed, ``False`` if *tag* was
        not bound.
        """
        with self._lock:
            if tag not in self._handlers:
                return False
            updated = dict(self._handlers)
            del updated[tag]
            self._handlers = updated
        logger.info("Unregistered handler for tag %r", tag)
        return True

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def has_handler(self, tag: str) -> bool:
        return tag in self._handlers

    def resolve(self, tag: str) -> MessageHandler:
        """Return the handler bound to *tag*.

        Raises
        ------
        HandlerNotFoundError
            If no handler is bound to *tag*.
        """
        handlers = self._handlers
        try:
            return handlers[tag]
        except KeyError:
            logger.warning("No handler registered for tag %r", tag)
            raise HandlerNotFoundError(tag, handlers.keys()) from None

    @property
    def registered_tags(self) -> list[str]:
        """Return the bound tags, sorted."""
        return sorted(self._handlers)

    def __contains__(self, tag: object) -> bool:
        return tag in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def dispatch(self, tag: str, payload: Message | None = None) -> Any:
        """Resolve *tag* and invoke the handler's ``send`` operation.

        The handler is called with *payload* when one is given and with no
        arguments otherwise.  Its return value is passed back to the caller.

        Raises
        ------
        HandlerNotFoundError
            If *tag* is unbound.  No handler is invoked in that case.
        Exception
            Anything the handler raises, unchanged.
        """
        handler = self.resolve(tag)
        logger.debug("Dispatching tag %r to %s", tag, _describe(handler))
        if payload is None:
            return handler.send()
        return handler.send(payload)


def _describe(handler: Any) -> str:
    name = getattr(handler, "handler_name", None)
    return name if isinstance(name, str) else type(handler).__name__
