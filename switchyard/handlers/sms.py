"""SMS handler — builds single-segment SMS payloads (stub)."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from switchyard.handlers._formatting import coerce_message, format_short_text
from switchyard.models.messages import Message

logger = logging.getLogger(__name__)

SMS_SEGMENT_LIMIT = 160


class SmsPayload(BaseModel):
    """A single SMS segment."""

    model_config = ConfigDict(frozen=True)

    to_number: str
    text: str


class SmsHandler:
    """Builds SMS payloads from messages (stub).

    Text longer than one segment is truncated with a trailing ellipsis.
    """

    def __init__(self, to_number: str) -> None:
        self._to_number = to_number
        self._pending_payloads: list[SmsPayload] = []

    @property
    def handler_name(self) -> str:
        return "sms"

    def send(self, payload: Message | None = None) -> SmsPayload:
        message = coerce_message(payload)
        sms = SmsPayload(
            to_number=self._to_number,
            text=format_short_text(message, SMS_SEGMENT_LIMIT),
        )
        self._pending_payloads.append(sms)
        logger.debug("SmsHandler: queued message %s", message.message_id)
        return sms

    def flush(self) -> list[SmsPayload]:
        payloads = list(self._pending_payloads)
        self._pending_payloads.clear()
        return payloads

    @property
    def pending_count(self) -> int:
        return len(self._pending_payloads)
