"""Unit tests for the reference handlers and the default registry."""

from __future__ import annotations

import pytest

from switchyard.handlers import MessageHandler
from switchyard.handlers.defaults import EMAIL, SMS, TELEGRAM, WHATSAPP, build_default_registry
from switchyard.handlers.email import EmailHandler, EmailPayload
from switchyard.handlers.sms import SMS_SEGMENT_LIMIT, SmsHandler
from switchyard.handlers.telegram import TelegramHandler
from switchyard.handlers.whatsapp import WhatsAppHandler
from switchyard.errors import HandlerNotFoundError


class TestProtocolConformance:
    @pytest.mark.parametrize(
        "handler",
        [
            EmailHandler("a@example.com"),
            SmsHandler("+1555"),
            TelegramHandler("42"),
            WhatsAppHandler("+1555"),
        ],
    )
    def test_reference_handlers_satisfy_protocol(self, handler):
        assert isinstance(handler, MessageHandler)


class TestEmailHandler:
    def test_send_builds_payload(self, make_message):
        handler = EmailHandler("ops@example.com", sender="bot@example.com")
        message = make_message("disk full", subject="Alert")

        payload = handler.send(message)

        assert isinstance(payload, EmailPayload)
        assert payload.recipient == "ops@example.com"
        assert payload.sender == "bot@example.com"
        assert payload.subject == "Alert"
        assert payload.body_text == "disk full"
        assert payload.headers["X-Switchyard-Message-Id"] == message.message_id

    def test_send_without_payload_uses_default_subject(self):
        payload = EmailHandler("ops@example.com").send()
        assert payload.subject == "Notification"
        assert payload.body_text == ""

    def test_flush_returns_and_clears(self, make_message):
        handler = EmailHandler("ops@example.com")
        handler.send(make_message("one"))
        handler.send(make_message("two"))
        assert handler.pending_count == 2

        flushed = handler.flush()

        assert [p.body_text for p in flushed] == ["one", "two"]
        assert handler.pending_count == 0


class TestSmsHandler:
    def test_short_text_kept(self, make_message):
        payload = SmsHandler("+1555").send(make_message("ok", subject="CI"))
        assert payload.to_number == "+1555"
        assert payload.text == "CI: ok"

    def test_long_text_truncated(self, make_message):
        payload = SmsHandler("+1555").send(make_message("x" * 500))
        assert len(payload.text) == SMS_SEGMENT_LIMIT
        assert payload.text.endswith("...")


class TestTelegramHandler:
    def test_text_is_html_escaped(self, make_message):
        payload = TelegramHandler("42").send(make_message("a < b", subject="R&D"))
        assert payload.chat_id == "42"
        assert payload.text == "<b>R&amp;D</b>\na &lt; b"
        assert payload.parse_mode == "HTML"

    def test_api_locator_requires_token(self):
        assert TelegramHandler("42").api_locator() is None

    def test_api_locator_renders_endpoint(self):
        locator = TelegramHandler("42", bot_token="123:abc").api_locator()
        assert locator is not None
        assert locator.render() == "https://api.telegram.org/bot123:abc/sendMessage"


class TestWhatsAppHandler:
    def test_payload_shape(self, make_message):
        payload = WhatsAppHandler("+1555").send(make_message("hi"))
        data = payload.model_dump(by_alias=True)
        assert data == {
            "messaging_product": "whatsapp",
            "to": "+1555",
            "type": "text",
            "text": {"body": "hi"},
        }

    def test_api_locator(self):
        assert WhatsAppHandler("+1555").api_locator() is None
        locator = WhatsAppHandler("+1555", phone_number_id="77").api_locator()
        assert str(locator) == "https://graph.facebook.com/v19.0/77/messages"


class TestDefaultRegistry:
    def test_binds_every_channel(self, test_settings):
        registry = build_default_registry(test_settings)
        assert registry.registered_tags == sorted([EMAIL, SMS, TELEGRAM, WHATSAPP])

    def test_email_dispatch_uses_settings(self, test_settings, make_message):
        registry = build_default_registry(test_settings)
        payload = registry.dispatch(EMAIL, make_message("hello"))

        assert payload.recipient == "ops@example.com"
        assert payload.sender == "noreply@example.com"
        assert registry.resolve(EMAIL).pending_count == 1

    def test_email_dispatch_touches_no_other_handler(self, test_settings):
        registry = build_default_registry(test_settings)
        registry.dispatch(EMAIL)

        assert registry.resolve(EMAIL).pending_count == 1
        for tag in (SMS, TELEGRAM, WHATSAPP):
            assert registry.resolve(tag).pending_count == 0

    def test_unknown_channel_fails(self, test_settings):
        registry = build_default_registry(test_settings)
        with pytest.raises(HandlerNotFoundError):
            registry.dispatch("FAX")

    def test_new_channel_added_by_registration_only(self, test_settings, make_handler):
        registry = build_default_registry(test_settings)
        fax = make_handler("fax")
        registry.register("FAX", fax)

        registry.dispatch("FAX")

        assert fax.calls == [None]
