"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Input history and submit gating
- Chat message rendering per role
- Typing indicator animation
- Status and log rendering
"""

from datetime import datetime

from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click, Key
from textual.message import Message as TextualMessage
from textual.widgets import Button, Markdown, RichLog, Static, TextArea

from ..conversation import Message
from .config import (
    EMPTY_STATE_HINT,
    EMPTY_STATE_TITLE,
    INPUT_HISTORY_MAX_SIZE,
    LOG_TIMESTAMP_FORMAT,
    TYPING_FRAME_INTERVAL,
    LogLevel,
)
from .formatting import ContentKind, content_kind, css_class_for, message_header


def copy_text(widget: Static | Vertical | RichLog, text: str, what: str) -> None:
    """Copy text to the system clipboard, falling back to OSC 52."""
    try:
        import pyperclip
        pyperclip.copy(text)
        widget.app.notify(f"{what} copied", timeout=2)
    except Exception:
        widget.app.copy_to_clipboard(text)
        widget.app.notify(f"{what} copied (terminal)", timeout=2)


class ClickableMessage(Vertical):
    """A chat message container that copies content when clicked."""

    def __init__(self, content: str, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._content = content

    def on_click(self, event: Click) -> None:
        event.stop()
        copy_text(self, self._content, "Message")


class PromptArea(TextArea):
    """TextArea that turns Enter into a submit request.

    Terminals rarely report shift+enter, so newlines are inserted with
    ctrl+n instead. Up/Down at the edges of the text walk input history.
    """

    SUBMIT_KEYS = ("enter", "ctrl+j")

    class SubmitRequested(TextualMessage):
        """Posted when the user presses a submit key."""

    class HistoryRequested(TextualMessage):
        """Posted when the user walks input history."""

        def __init__(self, direction: int) -> None:
            super().__init__()
            self.direction = direction

    async def _on_key(self, event: Key) -> None:
        if event.key in self.SUBMIT_KEYS:
            self._consume(event)
            self.post_message(self.SubmitRequested())
        elif event.key == "ctrl+n":
            self._consume(event)
            self.insert("\n")
        elif event.key == "up" and self.cursor_location == (0, 0):
            self._consume(event)
            self.post_message(self.HistoryRequested(-1))
        elif event.key == "down" and self.cursor_location == self.document.end:
            self._consume(event)
            self.post_message(self.HistoryRequested(1))
        else:
            await super()._on_key(event)

    @staticmethod
    def _consume(event: Key) -> None:
        event.prevent_default()
        event.stop()


class ChatInputBar(Horizontal):
    """Chat input bar with a prompt area and Send button.

    The Send button is disabled while the input is blank or a reply is
    pending; submissions in that state are dropped and the typed text is kept.
    """

    class Submitted(TextualMessage):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, *args, placeholder: str = "", **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._placeholder = placeholder
        self._history: list[str] = []
        self._history_index: int = -1
        self._busy = False

    def compose(self):
        text_area = PromptArea(id="chat-input", show_line_numbers=False)
        text_area.cursor_blink = False
        if self._placeholder:
            text_area.placeholder = self._placeholder
        yield text_area
        yield Button("Send", id="send-btn", variant="success", disabled=True).with_tooltip(
            "Send message (Enter)"
        )

    def on_mount(self) -> None:
        text_area = self.query_one("#chat-input", PromptArea)
        text_area.focus()
        text_area.highlight_cursor_line = False

    @property
    def busy(self) -> bool:
        return self._busy

    def set_busy(self, busy: bool) -> None:
        """Reflect whether a reply is pending."""
        self._busy = busy
        self._refresh_send_button()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            self._submit()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self._refresh_send_button()

    def on_prompt_area_submit_requested(self, event: PromptArea.SubmitRequested) -> None:
        event.stop()
        self._submit()

    def on_prompt_area_history_requested(self, event: PromptArea.HistoryRequested) -> None:
        event.stop()
        self._navigate_history(event.direction)

    def _refresh_send_button(self) -> None:
        text_area = self.query_one("#chat-input", PromptArea)
        button = self.query_one("#send-btn", Button)
        button.disabled = self._busy or not text_area.text.strip()

    def _navigate_history(self, direction: int) -> None:
        if not self._history:
            return
        text_area = self.query_one("#chat-input", TextArea)
        if direction < 0:  # Up
            if self._history_index == -1:
                self._history_index = len(self._history) - 1
            elif self._history_index > 0:
                self._history_index -= 1
        else:  # Down
            if self._history_index < len(self._history) - 1:
                self._history_index += 1
            else:
                self._history_index = -1
                text_area.text = ""
                return
        text_area.text = self._history[self._history_index]
        text_area.move_cursor(text_area.document.end)

    def _submit(self) -> None:
        text_area = self.query_one("#chat-input", TextArea)
        value = text_area.text.strip()
        if not value or self._busy:
            return
        if not self._history or self._history[-1] != value:
            self._history.append(value)
            del self._history[:-INPUT_HISTORY_MAX_SIZE]
        self._history_index = -1
        text_area.text = ""
        self.post_message(self.Submitted(value))

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", TextArea).focus()


class TypingIndicator(Static):
    """Animated 'typing' bubble shown while a reply is pending."""

    FRAMES = ("*  ", " * ", "  *", " * ")

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._frame = 0
        self._timer = None

    def on_mount(self) -> None:
        self.display = False
        self._timer = self.set_interval(TYPING_FRAME_INTERVAL, self._advance, pause=True)

    def _advance(self) -> None:
        self._frame = (self._frame + 1) % len(self.FRAMES)
        self.update(f"Gemini is typing {self.FRAMES[self._frame]}")

    def start(self) -> None:
        self._frame = 0
        self.update(f"Gemini is typing {self.FRAMES[0]}")
        self.display = True
        if self._timer is not None:
            self._timer.resume()

    def stop(self) -> None:
        self.display = False
        if self._timer is not None:
            self._timer.pause()


class StatusPanel(Static):
    """One-line status: model, message count, pending state, last call time."""

    def __init__(self, *args, model: str = "", **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._model = model
        self._message_count = 0
        self._busy = False
        self._last_call: float | None = None

    def on_mount(self) -> None:
        self._update_display()

    def update_status(
        self,
        message_count: int | None = None,
        busy: bool | None = None,
        last_call: float | None = None,
    ) -> None:
        """Update any subset of the displayed fields."""
        if message_count is not None:
            self._message_count = message_count
        if busy is not None:
            self._busy = busy
        if last_call is not None:
            self._last_call = last_call
        self._update_display()

    def _update_display(self) -> None:
        state = "[bold yellow]Waiting[/]" if self._busy else "[bold green]Ready[/]"
        parts = [
            f"[bold cyan]Model:[/] {self._model}",
            f"[bold magenta]Messages:[/] {self._message_count}",
            f"[bold]Status:[/] {state}",
        ]
        if self._last_call is not None:
            parts.append(f"[bold yellow]Last call:[/] {self._last_call:.2f}s")
        self.update("  ".join(parts))

    def get_plain_text(self) -> str:
        text = (
            f"Model: {self._model}  Messages: {self._message_count}  "
            f"Status: {'Waiting' if self._busy else 'Ready'}"
        )
        if self._last_call is not None:
            text += f"  Last call: {self._last_call:.2f}s"
        return text


class DebugPanel(RichLog):
    """Log panel for request tracing with level filtering.

    Shows timestamped messages from the store and the completion client.
    Hidden by default, shown with --log-level or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "Store": "green",
        "LLM": "magenta",
    }

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def log_entry(self, component: str, message: str, level: int = LogLevel.DEBUG) -> None:
        """Add a log entry if it meets the current level threshold."""
        if level < self._log_level:
            return

        from rich.markup import escape

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{LogLevel.name(level):<5}[/] "
            f"[{comp_color}]\\[{component}][/] {escape(message)}"
        )

    def debug(self, component: str, message: str) -> None:
        self.log_entry(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.log_entry(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.log_entry(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.log_entry(component, message, LogLevel.ERROR)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True


class ChatHistoryWidget(VerticalScroll):
    """Scrollable chat history; one bubble per conversation message."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation history"

    def compose(self):
        with Vertical(id="empty-state"):
            yield Static(EMPTY_STATE_TITLE, id="empty-title")
            yield Static(EMPTY_STATE_HINT, id="empty-hint")
        yield TypingIndicator(id="typing-indicator")

    def add_message(self, message: Message, count: int) -> None:
        """Render a message above the typing indicator and scroll to it."""
        self.query_one("#empty-state").display = False
        container = self._render_message(message)
        self.mount(container, before="#typing-indicator")
        self.border_subtitle = f"{count} messages"
        self.call_after_refresh(self.scroll_end, animate=False)

    def set_busy(self, busy: bool) -> None:
        indicator = self.query_one("#typing-indicator", TypingIndicator)
        if busy:
            indicator.start()
            self.call_after_refresh(self.scroll_end, animate=False)
        else:
            indicator.stop()

    def _render_message(self, message: Message) -> ClickableMessage:
        container = ClickableMessage(
            content=message.content,
            classes=f"chat-message {css_class_for(message)}",
        )
        container.compose_add_child(Static(message_header(message), classes="message-header"))

        if content_kind(message) is ContentKind.MARKDOWN:
            body = Markdown(message.content, classes="message-content")
        else:
            body = Static(message.content, markup=False, classes="message-content")
        container.compose_add_child(body)
        return container
