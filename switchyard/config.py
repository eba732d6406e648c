"""Runtime configuration — env-driven via pydantic-settings.

Reads from a ``.env`` file and ``SWITCHYARD_*`` environment variables.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export SWITCHYARD_LOG_LEVEL=DEBUG
        export SWITCHYARD_EMAIL_RECIPIENT=ops@example.com
        export SWITCHYARD_TELEGRAM_CHAT_ID=-100123456
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SWITCHYARD_",
        env_file_encoding="utf-8",
    )

    # Logging
    log_level: str = "INFO"

    # Locator defaults
    default_scheme: str = "https"

    # Handler destinations used by the default registry
    email_sender: str = "switchyard@localhost"
    email_recipient: str = "ops@localhost"
    sms_number: str = "+10000000000"
    telegram_chat_id: str = "0"
    telegram_bot_token: str = ""
    whatsapp_number: str = "+10000000000"
    whatsapp_phone_number_id: str = ""
