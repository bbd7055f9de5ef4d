from typing import Any

from .base import CompletionClient
from .providers import GeminiRestClient


def create_completion_client(provider: str, **config: Any) -> CompletionClient:
    """Create a completion client instance.

    This factory function hides the instantiation logic for different services.

    Args:
        provider: Provider type ('gemini')
        **config: Provider-specific configuration
            For Gemini:
                - credential: Callable[[], str | None] (default: GEMINI_API_KEY)
                - model: str (default: 'gemini-3-flash-preview')
                - base_url: str (default: Generative Language API v1beta)
                - timeout: float | None (default: 60.0)
                - http_client: httpx.AsyncClient | None

    Returns:
        Initialized completion client instance

    Raises:
        ValueError: If provider type is not supported

    Examples:
        >>> client = create_completion_client(
        ...     "gemini",
        ...     model="gemini-3-flash-preview"
        ... )
    """
    provider_lower = provider.lower()

    if provider_lower in ("gemini", "google"):
        return GeminiRestClient(**config)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'gemini'"
    )
