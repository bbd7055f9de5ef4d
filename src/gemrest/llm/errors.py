"""Failure taxonomy for completion calls.

Every failure a CompletionClient reports is a ClientError subclass. The
string form of each error is the human-readable description shown in the
conversation.
"""


class ClientError(Exception):
    """Base class for classified completion failures."""


class MissingCredentialError(ClientError):
    """The configured credential is absent or empty. No request was sent."""

    def __init__(self, variable: str = "GEMINI_API_KEY") -> None:
        self.variable = variable
        super().__init__(f"API Key is missing. Ensure {variable} is configured.")


class TransportFailureError(ClientError):
    """The HTTP call could not be completed (connectivity, transport timeout)."""


class RemoteError(ClientError):
    """The service answered with a non-success status."""

    def __init__(self, status: int, message: str) -> None:
        self.status = status
        self.message = message
        super().__init__(f"Gemini API Error ({status}): {message}")

    def __repr__(self) -> str:
        return f"RemoteError(status={self.status!r}, message={self.message!r})"


class MalformedResponseError(ClientError):
    """A success response did not contain the expected text field."""

    def __init__(self, message: str = "Malformed response received from Gemini API") -> None:
        super().__init__(message)
