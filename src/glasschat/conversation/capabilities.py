"""Platform capability interface.

Hides how side effects that have nothing to do with conversation state
(clipboard, share sheet, speech, haptics, confirmation dialogs) are carried
out on a given front end. The controller only issues requests; none of these
calls return a result.
"""

from abc import ABC, abstractmethod

from .models import Message


class PlatformCapabilities(ABC):
    """Fire-and-forget platform services consumed by the controller."""

    @abstractmethod
    def copy_to_clipboard(self, text: str) -> None:
        """Write text to the system clipboard."""

    @abstractmethod
    def present_share(self, text: str) -> None:
        """Present a share dialog for the given text."""

    @abstractmethod
    def speak(self, text: str) -> None:
        """Read text aloud, stopping any utterance already playing."""

    @abstractmethod
    def notify_success(self) -> None:
        """Trigger a short success notification (haptic or equivalent)."""

    @abstractmethod
    def confirm_undo(self, message: Message) -> None:
        """Offer the user a chance to undo the deletion of a message.

        Implementations call ``ConversationController.undo(message.id)``
        if the user accepts.
        """


class NullCapabilities(PlatformCapabilities):
    """Capabilities that do nothing. Used for headless sessions."""

    def copy_to_clipboard(self, text: str) -> None:
        pass

    def present_share(self, text: str) -> None:
        pass

    def speak(self, text: str) -> None:
        pass

    def notify_success(self) -> None:
        pass

    def confirm_undo(self, message: Message) -> None:
        pass
