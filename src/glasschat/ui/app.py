"""Main Textual TUI application.

Binds the widgets to a ConversationController: user events become
controller calls, and every state change is rendered back through a
subscription. Runs entirely on Textual's event loop.
"""

import asyncio
import contextlib

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from ..conversation import Author, ConversationController, ConversationState
from ..inference import InferenceClient
from .capabilities import TextualCapabilities
from .config import LogLevel
from .styles import APP_CSS
from .themes import GLASS_DUSK
from .widgets import (
    ChatHistoryWidget,
    ChatInputBar,
    DebugPanel,
    EmptyChatPlaceholder,
    MessageBubble,
    ReplyBanner,
    TypingIndicator,
)


class GlassChatApp(App):
    """Textual chat front end."""

    CSS = APP_CSS
    TITLE = "glasschat"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+r", "copy_last_reply", "Copy Reply"),
        Binding("ctrl+d", "toggle_debug", "Debug"),
        Binding("escape", "cancel_compose", "Cancel"),
    ]

    def __init__(
        self,
        client: InferenceClient,
        log_level: str | None = None,
        model_name: str = "",
    ) -> None:
        super().__init__()
        self._client = client
        self._log_level = log_level
        self._model_name = model_name
        self._controller = ConversationController(client)
        self._capabilities = TextualCapabilities(self)
        self._controller.capabilities = self._capabilities
        self._unsubscribe = None
        # True while the draft is being updated from the input widget itself
        self._draft_from_input = False

    @property
    def controller(self) -> ConversationController:
        return self._controller

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield EmptyChatPlaceholder(id="empty-placeholder")
        yield ChatHistoryWidget(id="chat-history")
        yield TypingIndicator(id="typing-indicator")
        yield ReplyBanner(id="reply-banner")
        yield ChatInputBar(id="chat-input-bar")
        yield DebugPanel(id="debug-panel")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(GLASS_DUSK)
        self.theme = "glass-dusk"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        def debug_callback(level: str, component: str, message: str) -> None:
            """Route debug messages to the log panel."""
            log_panel.add_entry(component, message, LogLevel.from_string(level))

        self._controller.set_debug_callback(debug_callback)
        self._capabilities.speaker.set_debug_callback(debug_callback)
        self._unsubscribe = self._controller.subscribe(self._render_state)

        if self._model_name:
            self.sub_title = self._model_name
        self._render_state(self._controller.state)
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def on_unmount(self) -> None:
        """Clean up resources when app exits."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._capabilities.speaker.stop()

    def _render_state(self, state: ConversationState) -> None:
        """Bring every widget in line with the conversation state."""
        history = self.query_one("#chat-history", ChatHistoryWidget)
        history.sync(state.messages)
        history.display = bool(state.messages)
        self.query_one("#empty-placeholder", EmptyChatPlaceholder).display = not state.messages
        self.query_one("#typing-indicator", TypingIndicator).active = state.is_awaiting_reply
        if not self._draft_from_input:
            self.query_one("#chat-input-bar", ChatInputBar).set_text(state.draft_text)

        target = state.find(state.reply_target) if state.reply_target else None
        self.query_one("#reply-banner", ReplyBanner).show_target(target)

    def on_chat_input_bar_changed(self, event: ChatInputBar.Changed) -> None:
        self._draft_from_input = True
        try:
            self._controller.set_draft(event.value)
        finally:
            self._draft_from_input = False

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        self._controller.submit(event.value)

    def on_message_bubble_action_requested(self, event: MessageBubble.ActionRequested) -> None:
        """Dispatch a per-message action to the controller."""
        controller = self._controller
        message = controller.state.find(event.message_id)
        if message is None:
            return

        if event.action == "copy":
            controller.copy(message.id)
        elif event.action == "delete":
            controller.delete(message.id)
            self.query_one("#chat-input-bar", ChatInputBar).focus_input()
        elif event.action == "edit":
            if message.author != Author.USER:
                self.notify("Only your own messages can be edited", severity="warning", timeout=2)
                return
            controller.edit(message.id)
            self.query_one("#chat-input-bar", ChatInputBar).focus_input()
        elif event.action == "reply":
            controller.reply(message.id)
            self.query_one("#chat-input-bar", ChatInputBar).focus_input()
        elif event.action == "speak":
            controller.speak(message.id)
        elif event.action == "share":
            controller.share(message.text)

    def action_cancel_compose(self) -> None:
        """Drop a pending edit or reply target."""
        if self._controller.cancel_edit():
            self.notify("Edit cancelled", timeout=2)
        elif self._controller.state.reply_target is not None:
            self._controller.clear_reply()
            self._controller.set_draft("")

    def action_copy_last_reply(self) -> None:
        """Copy last assistant reply to clipboard."""
        for message in reversed(self._controller.state.messages):
            if message.author == Author.ASSISTANT:
                self._controller.copy(message.id)
                return
        self.notify("No reply to copy", severity="warning")

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)


async def run_textual_tui(
    client: InferenceClient,
    log_level: str | None = None,
    model_name: str = "",
) -> None:
    """Run the Textual TUI.

    Args:
        client: Inference client used for replies
        log_level: Log level for panel (debug/info/warning/error), None to hide
        model_name: Shown as the header subtitle
    """
    app = GlassChatApp(client=client, log_level=log_level, model_name=model_name)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        await app.controller.aclose()
        with contextlib.suppress(RuntimeError):
            await client.close()
