"""Terminal UI module for glasschat.

Provides a Textual-based TUI over a ConversationController.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (message bubbles, typing indicator, input bar, log)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- screens.py: Modal dialogs (undo confirmation, share)
- speech.py: Text-to-speech playback
- capabilities.py: Platform services as seen from a terminal
- app.py: Application orchestration (user interaction flow)
"""

from .app import GlassChatApp, run_textual_tui
from .capabilities import TextualCapabilities
from .config import LogLevel
from .speech import Speaker
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, MessageBubble, TypingIndicator

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "GlassChatApp",
    "LogLevel",
    "MessageBubble",
    "Speaker",
    "TextualCapabilities",
    "TypingIndicator",
    "run_textual_tui",
]
