"""Text formatting utilities for the TUI.

Hides how messages are labelled and whether a body is rendered as
Markdown or verbatim text.
"""

from enum import Enum

from ..conversation import Message, MessageRole
from .config import MESSAGE_TIME_FORMAT

_ROLE_LABELS = {
    MessageRole.USER: ("You", ">"),
    MessageRole.ASSISTANT: ("Gemini", "<"),
    MessageRole.ERROR: ("Error", "!"),
}


class ContentKind(str, Enum):
    """How a message body should be rendered."""

    PLAIN = "plain"
    MARKDOWN = "markdown"


def format_time(message: Message) -> str:
    """Format the message timestamp as HH:MM."""
    return message.timestamp.strftime(MESSAGE_TIME_FORMAT)


def message_header(message: Message) -> str:
    """Build the header line, e.g. '> You [14:05]'."""
    label, icon = _ROLE_LABELS[message.role]
    return f"{icon} {label} [{format_time(message)}]"


def css_class_for(message: Message) -> str:
    return f"{message.role.value}-message"


def content_kind(message: Message) -> ContentKind:
    """Assistant replies are Markdown; user input and errors are shown verbatim."""
    if message.role is MessageRole.ASSISTANT:
        return ContentKind.MARKDOWN
    return ContentKind.PLAIN
