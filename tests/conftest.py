"""Shared test fixtures for switchyard."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from switchyard.config import Settings
from switchyard.core.registry import DispatchRegistry
from switchyard.models.messages import Message


class RecordingHandler:
    """A handler that records every payload it is sent."""

    def __init__(self, name: str = "recording") -> None:
        self._name = name
        self.calls: list[Message | None] = []

    @property
    def handler_name(self) -> str:
        return self._name

    def send(self, payload: Message | None = None) -> str:
        self.calls.append(payload)
        return f"sent-by-{self._name}"


class FailingHandler:
    """A handler whose send always raises."""

    def __init__(self, exc: Exception | None = None) -> None:
        self.exc = exc or RuntimeError("handler failure for testing")

    @property
    def handler_name(self) -> str:
        return "failing"

    def send(self, payload: Message | None = None) -> None:
        raise self.exc


@pytest.fixture
def registry() -> DispatchRegistry:
    """Provide an empty DispatchRegistry."""
    return DispatchRegistry()


@pytest.fixture
def make_handler() -> Callable[..., RecordingHandler]:
    """Factory fixture: build a RecordingHandler with the given name."""

    def _factory(name: str = "recording") -> RecordingHandler:
        return RecordingHandler(name)

    return _factory


@pytest.fixture
def make_failing_handler() -> Callable[..., FailingHandler]:
    """Factory fixture: build a FailingHandler raising the given exception."""

    def _factory(exc: Exception | None = None) -> FailingHandler:
        return FailingHandler(exc)

    return _factory


@pytest.fixture
def make_message() -> Callable[..., Message]:
    """Factory fixture: build a Message with sensible defaults."""

    def _factory(body: str = "hello", **overrides: Any) -> Message:
        return Message(body=body, **overrides)

    return _factory


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the process environment and any .env file."""
    return Settings(
        _env_file=None,
        email_recipient="ops@example.com",
        email_sender="noreply@example.com",
        sms_number="+15550001111",
        telegram_chat_id="-10042",
        telegram_bot_token="123:abc",
        whatsapp_number="+15550002222",
        whatsapp_phone_number_id="987654",
    )
