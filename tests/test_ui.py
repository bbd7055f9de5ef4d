"""Tests for the Textual UI module."""
from datetime import datetime

import pytest

from conftest import ScriptedClient
from gemrest.conversation import Message, MessageRole
from gemrest.llm import RemoteError
from gemrest.ui import (
    ChatHistoryWidget,
    ChatInputBar,
    DebugLogRouter,
    GeminiChatApp,
    LogLevel,
    StatusPanel,
)
from gemrest.ui.formatting import (
    ContentKind,
    content_kind,
    css_class_for,
    format_time,
    message_header,
)


def _message(role: MessageRole, content: str) -> Message:
    return Message(role=role, content=content, timestamp=datetime(2024, 5, 1, 9, 7, 30))


class TestFormatting:
    """Tests for message labels and render decisions."""

    def test_time_is_hours_and_minutes(self):
        assert format_time(_message(MessageRole.USER, "hi")) == "09:07"

    @pytest.mark.parametrize(
        ("role", "header"),
        [
            (MessageRole.USER, "> You [09:07]"),
            (MessageRole.ASSISTANT, "< Gemini [09:07]"),
            (MessageRole.ERROR, "! Error [09:07]"),
        ],
    )
    def test_header_per_role(self, role, header):
        assert message_header(_message(role, "x")) == header

    def test_css_class_per_role(self):
        assert css_class_for(_message(MessageRole.ERROR, "x")) == "error-message"

    def test_user_and_error_content_is_plain(self):
        """Test that only assistant replies are interpreted as Markdown."""
        assert content_kind(_message(MessageRole.USER, "# not a heading")) is ContentKind.PLAIN
        assert content_kind(_message(MessageRole.ERROR, "**boom**")) is ContentKind.PLAIN

    @pytest.mark.parametrize(
        "reply",
        [
            "**bold**",
            "**Title**\n\n- one\n- two",
            "for most people, yes.\nBut it depends.",
            "Here:\n```python\nx = 1\n```",
        ],
    )
    def test_assistant_replies_are_markdown(self, reply):
        """Test that every assistant reply, single or multi-line, renders as Markdown."""
        assert content_kind(_message(MessageRole.ASSISTANT, reply)) is ContentKind.MARKDOWN


class FakePanel:
    def __init__(self) -> None:
        self.entries: list[tuple[str, str, int]] = []

    def log_entry(self, component: str, message: str, level: int) -> None:
        self.entries.append((component, message, level))


class TestDebugLogRouter:
    def test_maps_level_names(self):
        panel = FakePanel()
        router = DebugLogRouter(panel)  # type: ignore[arg-type]

        router("warning", "Store", "careful")
        router("error", "LLM", "failed")

        assert panel.entries == [
            ("Store", "careful", LogLevel.WARNING),
            ("LLM", "failed", LogLevel.ERROR),
        ]

    def test_log_level_from_string(self):
        assert LogLevel.from_string("INFO") == LogLevel.INFO
        assert LogLevel.from_string("nonsense") == LogLevel.DEBUG


class TestGeminiChatApp:
    """Pilot-driven tests for the chat application."""

    async def test_submit_renders_reply(self):
        client = ScriptedClient(["hi there"])
        app = GeminiChatApp(client)

        async with app.run_test() as pilot:
            await pilot.press("h", "e", "l", "l", "o", "enter")
            await app.workers.wait_for_complete()
            await pilot.pause()

            assert [(m.role, m.content) for m in app.store.messages] == [
                (MessageRole.USER, "hello"),
                (MessageRole.ASSISTANT, "hi there"),
            ]
            chat = app.query_one("#chat-history", ChatHistoryWidget)
            assert len(chat.query(".chat-message")) == 2
            assert len(chat.query(".assistant-message Markdown")) == 1
            assert not app.query_one("#empty-state").display
            assert not app.query_one("#chat-input-bar", ChatInputBar).busy

    async def test_status_line_reports_last_call(self):
        client = ScriptedClient(["hi there"])
        app = GeminiChatApp(client)

        async with app.run_test() as pilot:
            await pilot.press("h", "i", "enter")
            await app.workers.wait_for_complete()
            await pilot.pause()

            text = app.query_one("#status", StatusPanel).get_plain_text()
            assert "Model: scripted-model" in text
            assert "Messages: 2" in text
            assert "Status: Ready" in text
            assert "Last call: " in text

    async def test_maximize_chat_toggles_bottom_bar(self):
        app = GeminiChatApp(ScriptedClient([]))

        async with app.run_test() as pilot:
            chat = app.query_one("#chat-history", ChatHistoryWidget)
            bottom = app.query_one("#bottom-bar")

            await pilot.press("ctrl+b")
            assert chat.has_class("-maximized")
            assert not bottom.display

            await pilot.press("ctrl+b")
            assert not chat.has_class("-maximized")
            assert bottom.display

    async def test_failure_renders_error_message(self):
        client = ScriptedClient([RemoteError(429, "quota exceeded")])
        app = GeminiChatApp(client)

        async with app.run_test() as pilot:
            await pilot.press("h", "i", "enter")
            await app.workers.wait_for_complete()
            await pilot.pause()

            assert app.store.messages[-1].role is MessageRole.ERROR
            assert len(app.query(".error-message")) == 1

    async def test_blank_input_sends_nothing(self):
        client = ScriptedClient([])
        app = GeminiChatApp(client)

        async with app.run_test() as pilot:
            await pilot.press("space", "enter")
            await pilot.pause()

            assert len(app.store) == 0
            assert client.prompts == []
            assert app.query_one("#empty-state").display
