"""Client factory functions for CLI.

Centralizes creation of the completion client from environment variables.
Hides configuration details from command implementations.
"""

from rich.console import Console
from rich.markup import escape

from ..config import (
    API_KEY_ENV,
    env_credential,
    get_base_url,
    get_model,
    get_timeout,
)
from ..llm import CompletionClient, create_completion_client

# Default console for output
_console = Console()


def get_client(model: str | None = None, console: Console | None = None) -> CompletionClient:
    """Create the Gemini completion client from environment variables.

    The credential is not checked here: it is read on every call, so a
    missing key shows up as an error message in the conversation.

    Args:
        model: Model override (default: GEMINI_MODEL or the built-in default)
        console: Optional Rich console for output

    Returns:
        Completion client instance

    Environment variables:
        GEMINI_API_KEY: API key, read per call (API_KEY is accepted as fallback)
        GEMINI_MODEL: Model identifier (default: gemini-3-flash-preview)
        GEMINI_BASE_URL: API root (default: Generative Language API v1beta)
        GEMREST_TIMEOUT: Transport timeout in seconds (default: 60)
    """
    con = console or _console
    credential = env_credential()
    if not credential():
        con.print(f"[yellow]Warning: {API_KEY_ENV} not set, requests will fail[/yellow]")

    return create_completion_client(
        "gemini",
        credential=credential,
        model=model or get_model(),
        base_url=get_base_url(),
        timeout=get_timeout(),
    )


def console_debug_callback(console: Console | None = None):
    """Build a debug callback that prints traces to the console."""
    con = console or _console
    level_styles = {"debug": "dim", "info": "cyan", "warning": "yellow", "error": "red"}

    def _print(level: str, component: str, message: str) -> None:
        style = level_styles.get(level, "white")
        con.print(f"[{style}]{level.upper():<7}[/] [dim]\\[{component}][/] {escape(message)}", highlight=False)

    return _print
