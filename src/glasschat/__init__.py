"""
glasschat: a small chat client for hosted text-generation models.

Each subpackage hides one design decision: ``inference`` hides which model
answers and how, ``conversation`` hides the message-exchange state machine,
``ui`` hides how it is presented.
"""

__version__ = "0.1.0"

from .conversation import (
    Author,
    ConversationController,
    ConversationState,
    Message,
    PlatformCapabilities,
)
from .inference import InferenceClient, InferenceResult, create_inference_client

__all__ = [
    "Author",
    "ConversationController",
    "ConversationState",
    "InferenceClient",
    "InferenceResult",
    "Message",
    "PlatformCapabilities",
    "create_inference_client",
]
