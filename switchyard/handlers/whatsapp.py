"""WhatsApp handler — builds Cloud API text message payloads (stub)."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from switchyard.core.builder import ResourceLocatorBuilder
from switchyard.handlers._formatting import coerce_message, format_short_text
from switchyard.models.locator import ResourceLocator
from switchyard.models.messages import Message

logger = logging.getLogger(__name__)

WHATSAPP_API_HOST = "graph.facebook.com"
WHATSAPP_TEXT_LIMIT = 4096


class WhatsAppPayload(BaseModel):
    """A WhatsApp Cloud API text message."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    messaging_product: str = "whatsapp"
    to: str
    message_type: str = Field(default="text", alias="type")
    text: dict[str, str]


class WhatsAppHandler:
    """Builds WhatsApp payloads from messages (stub).

    Parameters
    ----------
    to_number:
        Recipient phone number in international format.
    phone_number_id:
        Sender phone number ID, used only to build the API locator.
    """

    def __init__(self, to_number: str, phone_number_id: str = "") -> None:
        self._to_number = to_number
        self._phone_number_id = phone_number_id
        self._pending_payloads: list[WhatsAppPayload] = []

    @property
    def handler_name(self) -> str:
        return "whatsapp"

    def send(self, payload: Message | None = None) -> WhatsAppPayload:
        message = coerce_message(payload)
        whatsapp = WhatsAppPayload(
            to=self._to_number,
            text={"body": format_short_text(message, WHATSAPP_TEXT_LIMIT)},
        )
        self._pending_payloads.append(whatsapp)
        logger.debug("WhatsAppHandler: queued message %s", message.message_id)
        return whatsapp

    def flush(self) -> list[WhatsAppPayload]:
        payloads = list(self._pending_payloads)
        self._pending_payloads.clear()
        return payloads

    @property
    def pending_count(self) -> int:
        return len(self._pending_payloads)

    def api_locator(self) -> ResourceLocator | None:
        """Return the messages endpoint, or ``None`` without a phone number ID."""
        if not self._phone_number_id:
            return None
        return (
            ResourceLocatorBuilder.create("https", WHATSAPP_API_HOST)
            .with_path(f"/v19.0/{self._phone_number_id}/messages")
            .build()
        )
