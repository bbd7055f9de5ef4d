"""Conversation state.

- models.py: Message, MessageRole and the StoreChange notification
- store.py: ConversationStore, the append-only record plus busy flag
"""

from .models import Message, MessageRole, StoreChange
from .store import GENERIC_FAILURE, ConversationStateError, ConversationStore

__all__ = [
    "ConversationStateError",
    "ConversationStore",
    "GENERIC_FAILURE",
    "Message",
    "MessageRole",
    "StoreChange",
]
