from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

DebugCallback = Callable[[str, str, str], None]


class CompletionClient(ABC):
    """Abstract base class for completion clients.

    This module hides the design decision of which generative-language
    service answers a prompt. Implementations must handle:
    - Credential lookup (at call time, never cached)
    - Request construction and response extraction
    - Classifying every failure as a ClientError subclass

    Supports async context manager protocol for proper resource cleanup:
        async with client:
            text = await client.complete("hello")
        # Automatically cleaned up
    """

    _debug_callback: DebugCallback | None = None

    @property
    @abstractmethod
    def model(self) -> str:
        """Model identifier the client sends prompts to."""

    @abstractmethod
    async def complete(self, prompt: str) -> str:
        """Send a single prompt and return the generated text.

        Each call is stateless: only this prompt is sent.

        Args:
            prompt: Trimmed, non-empty user prompt

        Returns:
            The generated text exactly as the service returned it

        Raises:
            ClientError: One of MissingCredentialError, TransportFailureError,
                RemoteError or MalformedResponseError
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the debug callback for request tracing.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "LLM", message)

    async def __aenter__(self) -> "CompletionClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
