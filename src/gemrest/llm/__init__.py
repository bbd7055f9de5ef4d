from .base import CompletionClient, DebugCallback
from .errors import (
    ClientError,
    MalformedResponseError,
    MissingCredentialError,
    RemoteError,
    TransportFailureError,
)
from .factory import create_completion_client
from .models import GenerateContentRequest, GenerationConfig
from .providers import GeminiRestClient

__all__ = [
    "CompletionClient",
    "DebugCallback",
    "create_completion_client",
    "ClientError",
    "MalformedResponseError",
    "MissingCredentialError",
    "RemoteError",
    "TransportFailureError",
    "GenerateContentRequest",
    "GenerationConfig",
    "GeminiRestClient",
]
