"""
gemrest: a small chat front-end for the Gemini generateContent REST API.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .conversation import ConversationStore, Message, MessageRole
from .llm import (
    ClientError,
    CompletionClient,
    GeminiRestClient,
    MalformedResponseError,
    MissingCredentialError,
    RemoteError,
    TransportFailureError,
    create_completion_client,
)

__all__ = [
    "ClientError",
    "CompletionClient",
    "ConversationStore",
    "GeminiRestClient",
    "MalformedResponseError",
    "Message",
    "MessageRole",
    "MissingCredentialError",
    "RemoteError",
    "TransportFailureError",
    "create_completion_client",
]
