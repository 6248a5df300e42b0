"""Platform capabilities backed by the Textual app.

Hides how clipboard, share, speech, haptics and undo confirmation are
presented in a terminal.
"""

from typing import TYPE_CHECKING

from ..conversation import Message, PlatformCapabilities
from .screens import ShareScreen, UndoScreen
from .speech import Speaker

if TYPE_CHECKING:
    from .app import GlassChatApp


class TextualCapabilities(PlatformCapabilities):
    """PlatformCapabilities implementation for the terminal UI."""

    def __init__(self, app: "GlassChatApp", speaker: Speaker | None = None) -> None:
        self.app = app
        self.speaker = speaker or Speaker()

    def copy_to_clipboard(self, text: str) -> None:
        self.app.copy_to_clipboard(text)

    def present_share(self, text: str) -> None:
        self.app.push_screen(ShareScreen(text))

    def speak(self, text: str) -> None:
        if not self.speaker.speak(text):
            self.app.notify("Speech is not available", severity="warning", timeout=3)

    def notify_success(self) -> None:
        # The terminal bell is the closest thing to a haptic tap
        self.app.bell()
        self.app.notify("Copied to clipboard", timeout=2)

    def confirm_undo(self, message: Message) -> None:
        controller = self.app.controller

        def on_dismiss(undo: bool | None) -> None:
            if undo and not controller.undo(message.id):
                self.app.notify("Too late to undo", severity="warning", timeout=2)

        self.app.push_screen(UndoScreen(message.text), callback=on_dismiss)
