"""Terminal UI module for gemrest.

Provides a Textual-based TUI over a ConversationStore.

Module structure (Parnas principle - each module hides a design decision):
- formatting.py: Message labels and body rendering choice
- widgets.py: Custom widgets (input bar, chat history, typing indicator, log)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette
- callbacks.py: How debug traces reach the log panel
- app.py: Application orchestration (user interaction flow)
"""

from .app import GeminiChatApp, run_textual_tui
from .callbacks import DebugLogRouter
from .config import LogLevel
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, StatusPanel

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugLogRouter",
    "DebugPanel",
    "GeminiChatApp",
    "LogLevel",
    "StatusPanel",
    "run_textual_tui",
]
