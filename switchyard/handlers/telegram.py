"""Telegram handler — builds Telegram Bot API payloads (stub).

This handler constructs ``sendMessage``-compatible payloads.  Actual HTTP
delivery is left to a transport layer; payloads are buffered until
``flush()`` is called.
"""

from __future__ import annotations

import html
import logging

from pydantic import BaseModel, ConfigDict

from switchyard.core.builder import ResourceLocatorBuilder
from switchyard.handlers._formatting import coerce_message
from switchyard.models.locator import ResourceLocator
from switchyard.models.messages import Message

logger = logging.getLogger(__name__)

TELEGRAM_API_HOST = "api.telegram.org"


class TelegramPayload(BaseModel):
    """A Telegram Bot API sendMessage payload."""

    model_config = ConfigDict(frozen=True)

    chat_id: str
    text: str
    parse_mode: str = "HTML"
    disable_web_page_preview: bool = True


class TelegramHandler:
    """Builds Telegram payloads from messages (stub).

    Parameters
    ----------
    chat_id:
        The Telegram chat ID to send messages to.
    bot_token:
        The bot token, used only to build the API locator.
    """

    def __init__(self, chat_id: str, bot_token: str = "") -> None:
        self._chat_id = chat_id
        self._bot_token = bot_token
        self._pending_payloads: list[TelegramPayload] = []

    @property
    def handler_name(self) -> str:
        return "telegram"

    def send(self, payload: Message | None = None) -> TelegramPayload:
        message = coerce_message(payload)
        telegram = TelegramPayload(chat_id=self._chat_id, text=self._format_text(message))
        self._pending_payloads.append(telegram)
        logger.debug("TelegramHandler: queued message %s", message.message_id)
        return telegram

    def flush(self) -> list[TelegramPayload]:
        payloads = list(self._pending_payloads)
        self._pending_payloads.clear()
        return payloads

    @property
    def pending_count(self) -> int:
        return len(self._pending_payloads)

    def api_locator(self) -> ResourceLocator | None:
        """Return the sendMessage endpoint, or ``None`` without a bot token."""
        if not self._bot_token:
            return None
        return (
            ResourceLocatorBuilder.create("https", TELEGRAM_API_HOST)
            .with_path(f"bot{self._bot_token}/sendMessage")
            .build()
        )

    @staticmethod
    def _format_text(message: Message) -> str:
        lines: list[str] = []
        if message.subject:
            lines.append(f"<b>{html.escape(message.subject)}</b>")
        lines.append(html.escape(message.body))
        return "\n".join(lines)
