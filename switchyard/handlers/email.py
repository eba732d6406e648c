"""Email handler — builds email delivery payloads (stub).

This handler constructs email-compatible payloads from messages.  Actual
SMTP delivery is left to a transport layer; payloads are buffered until
``flush()`` is called.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from switchyard.handlers._formatting import coerce_message, format_subject
from switchyard.models.messages import Message

logger = logging.getLogger(__name__)


class EmailPayload(BaseModel):
    """An email payload ready for SMTP delivery."""

    model_config = ConfigDict(frozen=True)

    recipient: str
    sender: str
    subject: str
    body_text: str
    headers: dict[str, str] = {}


class EmailHandler:
    """Builds email payloads from messages (stub).

    Parameters
    ----------
    recipient:
        The address to send messages to.
    sender:
        The sender address.  Defaults to ``switchyard@localhost``.
    """

    def __init__(self, recipient: str, sender: str = "switchyard@localhost") -> None:
        self._recipient = recipient
        self._sender = sender
        self._pending_payloads: list[EmailPayload] = []

    @property
    def handler_name(self) -> str:
        return "email"

    def send(self, payload: Message | None = None) -> EmailPayload:
        """Build an email payload and append it to the pending buffer."""
        message = coerce_message(payload)
        email = EmailPayload(
            recipient=self._recipient,
            sender=self._sender,
            subject=format_subject(message),
            body_text=message.body,
            headers={"X-Switchyard-Message-Id": message.message_id},
        )
        self._pending_payloads.append(email)
        logger.debug("EmailHandler: queued message %s for %s", message.message_id, self._recipient)
        return email

    def flush(self) -> list[EmailPayload]:
        """Return and clear all pending payloads."""
        payloads = list(self._pending_payloads)
        self._pending_payloads.clear()
        return payloads

    @property
    def pending_count(self) -> int:
        return len(self._pending_payloads)
