"""Conversation state machine for glasschat.

Owns the message log and the transitions between user input and assistant
reply. Front ends observe it through subscriptions.
"""

from .capabilities import NullCapabilities, PlatformCapabilities
from .config import FALLBACK_REPLY
from .controller import ConversationController, PendingEdit, quote
from .models import Author, ConversationState, Message
from .scheduler import DelayedTasks

__all__ = [
    "Author",
    "ConversationController",
    "ConversationState",
    "DelayedTasks",
    "FALLBACK_REPLY",
    "Message",
    "NullCapabilities",
    "PendingEdit",
    "PlatformCapabilities",
    "quote",
]
