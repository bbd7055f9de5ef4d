"""Main Textual TUI application.

Orchestrates the UI components and renders the conversation store.
"""

import asyncio
import time

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header

from ..conversation import ConversationStore, StoreChange
from ..llm import CompletionClient
from .callbacks import DebugLogRouter
from .config import APP_TAGLINE, APP_TITLE, INPUT_PLACEHOLDER
from .styles import APP_CSS
from .themes import SLATE_NIGHT
from .widgets import (
    ChatHistoryWidget,
    ChatInputBar,
    DebugPanel,
    LogLevel,
    StatusPanel,
)


class GeminiChatApp(App):
    """Textual TUI for chatting with a completion client."""

    CSS = APP_CSS
    TITLE = APP_TITLE

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+r", "copy_last_response", "Copy Response", priority=True),
        Binding("ctrl+y", "copy_status", "Copy Status", priority=True),
        Binding("ctrl+b", "toggle_maximize_chat", "Max Chat", priority=True),
        Binding("ctrl+d", "toggle_debug", "Log", priority=True),
    ]

    def __init__(
        self,
        client: CompletionClient,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._client = client
        self._log_level = log_level
        self._store = ConversationStore(client)
        self._unsubscribe = None

    @property
    def store(self) -> ConversationStore:
        return self._store

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ChatHistoryWidget(id="chat-history")
        yield DebugPanel(id="debug-panel")

        with Vertical(id="bottom-bar"):
            yield StatusPanel(id="status", model=self._client.model)
            yield ChatInputBar(id="chat-input-bar", placeholder=INPUT_PLACEHOLDER)

        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(SLATE_NIGHT)
        self.theme = SLATE_NIGHT.name
        self.sub_title = f"{APP_TAGLINE} | Model: {self._client.model}"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        router = DebugLogRouter(log_panel, app=self)
        self._client.set_debug_callback(router)
        self._store.set_debug_callback(router)
        self._unsubscribe = self._store.subscribe(self._on_store_change)

        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._client.set_debug_callback(None)

    def _on_store_change(self, change: StoreChange) -> None:
        """Render one store mutation."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        chat.add_message(change.message, len(self._store))
        chat.set_busy(change.busy)
        self.query_one("#chat-input-bar", ChatInputBar).set_busy(change.busy)
        self.query_one("#status", StatusPanel).update_status(
            message_count=len(self._store), busy=change.busy
        )

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        if self._store.busy:
            return
        self._run_submission(event.value)

    @work(group="completion")
    async def _run_submission(self, user_input: str) -> None:
        """Drive one store submission as a background async worker."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        log_panel.debug("TUI", f"Submitting: '{user_input[:50]}'")

        started = time.monotonic()
        outcome = await self._store.submit(user_input)
        if outcome is None:
            return

        self.query_one("#status", StatusPanel).update_status(
            last_call=time.monotonic() - started
        )
        if outcome.is_error:
            self.notify(outcome.content[:80], severity="error", timeout=5)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_toggle_maximize_chat(self) -> None:
        """Toggle maximize for chat panel."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        bottom = self.query_one("#bottom-bar", Vertical)
        if chat.has_class("-maximized"):
            chat.remove_class("-maximized")
            bottom.display = True
            self.query_one("#chat-input-bar", ChatInputBar).focus_input()
        else:
            chat.add_class("-maximized")
            bottom.display = False

    def action_copy_status(self) -> None:
        """Copy status line to clipboard."""
        status = self.query_one("#status", StatusPanel)
        self.copy_to_clipboard(status.get_plain_text())
        self.notify("Status copied")

    def action_copy_last_response(self) -> None:
        """Copy last assistant response to clipboard."""
        response = self._store.last_reply()
        if response:
            self.copy_to_clipboard(response)
            self.notify("Response copied")
        else:
            self.notify("No response to copy", severity="warning")


async def run_textual_tui(
    client: CompletionClient,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        client: Completion client the conversation talks to
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = GeminiChatApp(client=client, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
