# ABOUTME: Tests for replaying recorded chat events into the plugin
# ABOUTME: Covers event parsing from JSON lines and the replay chat source

import json
import logging
from unittest.mock import MagicMock

from chatter.chat.chat_type import ChatType
from chatter.chat_string import AutoTranslatePayload, PlayerPayload, TextPayload
from chatter.replay import ChatEvent, ReplayChatSource, read_events

SAY_EVENT = {
    "chat_type": "Say",
    "sender_id": 7,
    "sender": [
        {"type": "player", "player_name": "Robert Jones", "world": "Zalera"},
        {"type": "text", "text": "Robert Jones"},
    ],
    "body": [
        {"type": "text", "text": "Hello "},
        {"type": "auto_translate", "text": "Nice to meet you."},
    ],
}


class TestChatEvent:
    """Tests for the ChatEvent model."""

    def test_parse_named_chat_type(self):
        event = ChatEvent.model_validate(SAY_EVENT)

        assert event.chat_type == ChatType.SAY
        assert event.sender_id == 7

    def test_numeric_chat_type_passes_through(self):
        event = ChatEvent.model_validate({"chat_type": 999})
        assert event.chat_type == 999

    def test_payload_conversion(self):
        event = ChatEvent.model_validate(SAY_EVENT)

        assert event.sender_payloads() == [
            PlayerPayload("Robert Jones", "Zalera"),
            TextPayload("Robert Jones"),
        ]
        assert event.body_payloads() == [
            TextPayload("Hello "),
            AutoTranslatePayload("Nice to meet you."),
        ]


class TestReadEvents:
    """Tests for parsing JSON lines."""

    def test_reads_all_lines(self):
        lines = [json.dumps(SAY_EVENT), "", json.dumps({"chat_type": 30, "body": []})]

        events = list(read_events(lines))

        assert [event.chat_type for event in events] == [ChatType.SAY, ChatType.YELL]

    def test_skips_invalid_lines(self, caplog):
        lines = [
            "not json",
            json.dumps({"chat_type": "Whisper"}),
            json.dumps({"chat_type": "Say", "body": [{"type": "icon"}]}),
            json.dumps(SAY_EVENT),
        ]

        with caplog.at_level(logging.WARNING):
            events = list(read_events(lines))

        assert len(events) == 1
        assert "line 1" in caplog.text
        assert "line 2" in caplog.text
        assert "line 3" in caplog.text


class TestReplayChatSource:
    """Tests for the replay chat source."""

    def test_subscribe_and_replay(self):
        source = ReplayChatSource()
        handler = MagicMock(return_value=False)
        source.subscribe(handler)

        count = source.replay(read_events([json.dumps(SAY_EVENT)]))

        assert count == 1
        handler.assert_called_once()
        chat_type, sender_id, sender, body = handler.call_args.args
        assert chat_type == ChatType.SAY
        assert sender_id == 7
        assert sender[0] == PlayerPayload("Robert Jones", "Zalera")
        assert body[1] == AutoTranslatePayload("Nice to meet you.")

    def test_unsubscribe(self):
        source = ReplayChatSource()
        handler = MagicMock()
        source.subscribe(handler)

        source.unsubscribe(handler)
        source.unsubscribe(handler)
        source.replay([ChatEvent.model_validate(SAY_EVENT)])

        assert source.handler_count == 0
        handler.assert_not_called()
