"""Callback wiring between the conversation core and the TUI.

Hides the details of how the TUI receives debug traces and store changes.
Uses call_from_thread when a callback fires off the app's thread.
"""

import threading
from typing import TYPE_CHECKING, Any

from .config import LogLevel

if TYPE_CHECKING:
    from textual.app import App

    from .widgets import DebugPanel


class DebugLogRouter:
    """Debug callback that forwards (level, component, message) to the log panel.

    Pass an instance wherever a DebugCallback is accepted.
    """

    def __init__(self, panel: "DebugPanel", app: "App | None" = None) -> None:
        self.panel = panel
        self.app = app

    def __call__(self, level: str, component: str, message: str) -> None:
        self._call_thread_safe(
            self.panel.log_entry, component, message, LogLevel.from_string(level)
        )

    def _call_thread_safe(self, func: Any, *args: Any) -> None:
        if self.app is not None and self.app._thread_id != threading.get_ident():
            self.app.call_from_thread(func, *args)
        else:
            func(*args)
