"""Message payload passed through the dispatch registry."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """An outbound message, opaque to the registry.

    Handlers decide how to turn it into a delivery payload for their
    channel.
    """

    model_config = ConfigDict(frozen=True)

    message_id: str = Field(default_factory=lambda: f"msg-{uuid.uuid4().hex[:12]}")
    body: str = ""
    subject: str = ""
    metadata: dict[str, Any] = {}
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
