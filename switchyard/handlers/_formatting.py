"""Shared formatting helpers for the reference handlers."""

from __future__ import annotations

from switchyard.models.messages import Message

DEFAULT_SUBJECT = "Notification"


def coerce_message(payload: Message | None) -> Message:
    """Return *payload*, or an empty ``Message`` when none was given."""
    return payload if payload is not None else Message()


def format_subject(message: Message) -> str:
    return message.subject or DEFAULT_SUBJECT


def format_short_text(message: Message, limit: int) -> str:
    """Render subject and body on one line, truncated to *limit* characters."""
    text = f"{message.subject}: {message.body}" if message.subject else message.body
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."
