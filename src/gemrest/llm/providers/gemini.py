"""Google Gemini completion client over the plain REST API.

Talks to the generateContent resource directly with httpx instead of the
GenAI SDK, so the request body and every failure mode stay visible.
Reference: https://ai.google.dev/api/generate-content
"""

from typing import Any

import httpx

from ...config import (
    API_KEY_ENV,
    DEFAULT_BASE_URL,
    DEFAULT_MODEL,
    DEFAULT_TIMEOUT,
    CredentialSource,
    env_credential,
)
from ..base import CompletionClient
from ..errors import (
    MalformedResponseError,
    MissingCredentialError,
    RemoteError,
    TransportFailureError,
)
from ..models import (
    GenerateContentRequest,
    GenerationConfig,
    extract_candidate_text,
    extract_error_message,
)


class GeminiRestClient(CompletionClient):
    """Gemini completion client implementation.

    Hidden design decisions:
    - Endpoint URL layout and key-as-query-parameter authentication
    - Request body construction with fixed generation parameters
    - Defensive extraction of candidates[0].content.parts[0].text
    - Mapping of httpx and HTTP status failures onto the ClientError taxonomy
    """

    def __init__(
        self,
        credential: CredentialSource | None = None,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        generation_config: GenerationConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = DEFAULT_TIMEOUT,
        credential_name: str = API_KEY_ENV,
        **client_kwargs: Any
    ):
        """Initialize Gemini client.

        Args:
            credential: Zero-argument callable returning the API key; read on
                every call (default: GEMINI_API_KEY from the environment)
            model: Model identifier placed in the URL
            base_url: API root, without trailing slash
            generation_config: Sampling parameters (default: fixed constants)
            http_client: Pre-built httpx client; not closed by close()
            timeout: Transport timeout in seconds for the owned client
            credential_name: Name reported when the credential is missing
            **client_kwargs: Additional kwargs for httpx.AsyncClient
        """
        self._credential = credential or env_credential()
        self._credential_name = credential_name
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._generation_config = generation_config or GenerationConfig()
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout, **client_kwargs)

    @property
    def model(self) -> str:
        """Get the model name."""
        return self._model

    @property
    def endpoint(self) -> str:
        """generateContent URL for the configured model, without the key."""
        return f"{self._base_url}/models/{self._model}:generateContent"

    def build_request(self, prompt: str) -> GenerateContentRequest:
        """Build the request body for one prompt."""
        return GenerateContentRequest.for_prompt(prompt, self._generation_config)

    async def complete(self, prompt: str) -> str:
        """Generate text for a single prompt using Gemini.

        Args:
            prompt: User prompt

        Returns:
            Generated text, unmodified

        Raises:
            MissingCredentialError: No API key configured; nothing was sent
            TransportFailureError: The request could not be completed
            RemoteError: Non-2xx response
            MalformedResponseError: 2xx response without the expected text
        """
        api_key = self._credential()
        if not api_key:
            self._debug("error", f"{self._credential_name} is not set")
            raise MissingCredentialError(self._credential_name)

        payload = self.build_request(prompt).to_payload()
        self._debug("info", f"POST {self.endpoint} ({len(prompt)} chars)")

        try:
            response = await self._client.post(
                self.endpoint,
                params={"key": api_key},
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.DecodingError as e:
            self._debug("error", f"Response body could not be decoded: {e!r}")
            raise MalformedResponseError() from e
        except httpx.RequestError as e:
            self._debug("error", f"Transport failure: {e!r}")
            raise TransportFailureError(str(e) or e.__class__.__name__) from e

        self._debug("debug", f"Response status {response.status_code}")

        if not response.is_success:
            raise self._remote_error(response)

        try:
            data = response.json()
        except ValueError as e:
            self._debug("error", "Response body is not JSON")
            raise MalformedResponseError() from e

        text = extract_candidate_text(data)
        if text is None:
            self._debug("error", "Response has no candidates[0].content.parts[0].text")
            raise MalformedResponseError()

        self._debug("info", f"Response received ({len(text)} chars)")
        return text

    def _remote_error(self, response: httpx.Response) -> RemoteError:
        """Classify a non-success response, preferring the body's error message."""
        try:
            message = extract_error_message(response.json())
        except ValueError:
            message = None
        if message is None:
            message = response.reason_phrase or f"HTTP {response.status_code}"
        self._debug("error", f"Remote error {response.status_code}: {message}")
        return RemoteError(response.status_code, message)

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
