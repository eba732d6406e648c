"""Default tag bindings for the reference handlers."""

from __future__ import annotations

from switchyard.config import Settings
from switchyard.core.registry import DispatchRegistry
from switchyard.handlers.email import EmailHandler
from switchyard.handlers.sms import SmsHandler
from switchyard.handlers.telegram import TelegramHandler
from switchyard.handlers.whatsapp import WhatsAppHandler

EMAIL = "EMAIL"
SMS = "SMS"
TELEGRAM = "TELEGRAM"
WHATSAPP = "WHATSAPP"


def build_default_registry(config: Settings | None = None) -> DispatchRegistry:
    """Return a registry with one reference handler bound per channel tag.

    Destinations come from *config*, or from a freshly loaded ``Settings``
    when none is given.
    """
    config = config or Settings()
    return DispatchRegistry(
        handlers={
            EMAIL: EmailHandler(config.email_recipient, sender=config.email_sender),
            SMS: SmsHandler(config.sms_number),
            TELEGRAM: TelegramHandler(
                config.telegram_chat_id, bot_token=config.telegram_bot_token
            ),
            WHATSAPP: WhatsAppHandler(
                config.whatsapp_number,
                phone_number_id=config.whatsapp_phone_number_id,
            ),
        }
    )
