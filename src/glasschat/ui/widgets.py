"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Message bubble rendering and per-message key actions
- Incremental syncing of the message log into mounted widgets
- Typing indicator animation
- Input history management
- Log rendering and level filtering
"""

from datetime import datetime
from uuid import UUID

from rich.text import Text
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.events import Click
from textual.message import Message as TextualMessage
from textual.widgets import Button, RichLog, Static, TextArea

from ..conversation import Message
from .config import (
    EMPTY_CHAT_TEXT,
    INPUT_HISTORY_MAX_SIZE,
    LOG_TIMESTAMP_FORMAT,
    REPLY_PREVIEW_LENGTH,
    TYPING_FRAME_INTERVAL,
    TYPING_FRAMES,
    LogLevel,
)


class MessageBubble(Static):
    """A single chat message.

    Focus a bubble (click or Tab) and use its key bindings to act on it.
    """

    can_focus = True

    BINDINGS = [
        Binding("c", "request('copy')", "Copy"),
        Binding("d", "request('delete')", "Delete"),
        Binding("e", "request('edit')", "Edit"),
        Binding("r", "request('reply')", "Reply"),
        Binding("s", "request('speak')", "Speak"),
        Binding("x", "request('share')", "Share"),
    ]

    class ActionRequested(TextualMessage):
        """Posted when the user asks to act on a message."""

        def __init__(self, message_id: UUID, action: str) -> None:
            super().__init__()
            self.message_id = message_id
            self.action = action

    def __init__(self, message: Message, *args, **kwargs) -> None:
        author_class = "user" if message.is_user else "assistant"
        super().__init__(Text(message.text), *args, classes=author_class, **kwargs)
        self.message = message
        speaker = "You" if message.is_user else "AI"
        self.border_title = f"{speaker} {message.created_at.strftime('%H:%M')}"
        self.tooltip = f"{speaker}: {message.text}"

    def action_request(self, action: str) -> None:
        self.post_message(self.ActionRequested(self.message.id, action))


class ChatHistoryWidget(VerticalScroll):
    """Scrollable message log that mirrors the conversation state."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._rows: dict[UUID, Horizontal] = {}

    @property
    def message_ids(self) -> list[UUID]:
        return list(self._rows)

    def sync(self, messages: list[Message]) -> None:
        """Mount and remove bubbles so the display matches ``messages``.

        The log is never reordered, so surviving rows keep their relative
        order and only new rows need positioning.
        """
        wanted = {message.id for message in messages}
        for message_id in [mid for mid in self._rows if mid not in wanted]:
            self._rows.pop(message_id).remove()

        previous: Horizontal | None = None
        appended = False
        for message in messages:
            row = self._rows.get(message.id)
            if row is None:
                row = self._build_row(message)
                if previous is not None:
                    self.mount(row, after=previous)
                elif self._rows:
                    self.mount(row, before=0)
                else:
                    self.mount(row)
                self._rows[message.id] = row
                appended = message is messages[-1]
            previous = row

        self.border_subtitle = f"{len(messages)} messages"
        if appended:
            self.scroll_end(animate=False)

    @staticmethod
    def _build_row(message: Message) -> Horizontal:
        author_class = "user" if message.is_user else "assistant"
        return Horizontal(MessageBubble(message), classes=f"bubble-row {author_class}")

    def focus_message(self, message_id: UUID) -> None:
        row = self._rows.get(message_id)
        if row is not None:
            row.query_one(MessageBubble).focus()


class EmptyChatPlaceholder(Static):
    """Shown in place of the history while there are no messages."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(f"💬\n\n{EMPTY_CHAT_TEXT}", *args, **kwargs)


class TypingIndicator(Static):
    """Three animated dots shown while a reply is pending."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__("", *args, **kwargs)
        self._frame = 0
        self._active = False

    def on_mount(self) -> None:
        self.display = False
        self.set_interval(TYPING_FRAME_INTERVAL, self._advance)

    @property
    def active(self) -> bool:
        return self._active

    @active.setter
    def active(self, value: bool) -> None:
        self._active = value
        self.display = value
        if not value:
            self._frame = 0

    def _advance(self) -> None:
        if not self._active:
            return
        self._frame = (self._frame + 1) % len(TYPING_FRAMES)
        self.update(TYPING_FRAMES[self._frame])


class ReplyBanner(Static):
    """One-line preview of the message the draft replies to."""

    def on_mount(self) -> None:
        self.display = False

    def show_target(self, message: Message | None) -> None:
        if message is None:
            self.display = False
            return
        preview = " ".join(message.text.split())
        if len(preview) > REPLY_PREVIEW_LENGTH:
            preview = preview[:REPLY_PREVIEW_LENGTH] + "..."
        self.update(Text(f"Replying to: {preview}  (Esc to cancel)"))
        self.display = True


class ChatInputBar(Horizontal):
    """Chat input bar with TextArea and Send button."""

    class Changed(TextualMessage):
        """Message sent when the draft text changes."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class Submitted(TextualMessage):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []
        self._history_index: int = -1

    def compose(self):
        text_area = TextArea(id="chat-input", show_line_numbers=False)
        text_area.cursor_blink = False
        yield text_area
        yield Button("Send", id="send-btn", variant="primary", disabled=True).with_tooltip(
            "Send message (Ctrl+J)"
        )

    def on_mount(self) -> None:
        text_area = self.query_one("#chat-input", TextArea)
        text_area.highlight_cursor_line = False
        text_area.focus()

    @property
    def text(self) -> str:
        return self.query_one("#chat-input", TextArea).text

    def set_text(self, value: str) -> None:
        """Replace the input text, leaving the cursor at the end."""
        text_area = self.query_one("#chat-input", TextArea)
        if text_area.text == value:
            return
        text_area.text = value
        text_area.move_cursor(text_area.document.end)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            self._submit()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        value = event.text_area.text
        self.query_one("#send-btn", Button).disabled = not value.strip()
        self.post_message(self.Changed(value))

    def on_key(self, event) -> None:
        """Handle keyboard shortcuts.

        Note: ctrl+enter cannot work in terminals (terminal doesn't pass
        ctrl/shift modifiers with Enter). Use ctrl+j as the submit shortcut.
        """
        if event.key == "ctrl+j":
            self._submit()
            event.prevent_default()
            event.stop()
        elif event.key == "up" and self._is_cursor_at_start():
            self._navigate_history(-1)
            event.prevent_default()
            event.stop()
        elif event.key == "down" and self._is_cursor_at_end():
            self._navigate_history(1)
            event.prevent_default()
            event.stop()

    def _is_cursor_at_start(self) -> bool:
        text_area = self.query_one("#chat-input", TextArea)
        return text_area.cursor_location == (0, 0)

    def _is_cursor_at_end(self) -> bool:
        text_area = self.query_one("#chat-input", TextArea)
        return text_area.cursor_location == text_area.document.end

    def _navigate_history(self, direction: int) -> None:
        if not self._history:
            return
        if direction < 0:
            if self._history_index == -1:
                self._history_index = len(self._history) - 1
            elif self._history_index > 0:
                self._history_index -= 1
        else:
            if self._history_index < len(self._history) - 1:
                self._history_index += 1
            else:
                self._history_index = -1
                self.set_text("")
                return
        self.set_text(self._history[self._history_index])

    def _submit(self) -> None:
        value = self.text
        if not value.strip():
            return
        if not self._history or self._history[-1] != value:
            self._history.append(value)
            del self._history[:-INPUT_HISTORY_MAX_SIZE]
        self._history_index = -1
        self.post_message(self.Submitted(value))

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", TextArea).focus()


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "Chat": "green",
        "LLM": "magenta",
        "Speech": "blue",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def add_entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Chat, LLM, Speech)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")

        line = Text.from_markup(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{LogLevel.name(level):<5}[/] "
            f"[{comp_color}]\\[{component}][/] "
        )
        line.append(message)
        self.write(line)

    def debug(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.ERROR)

    def show(self) -> None:
        """Show the log panel."""
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        """Hide the log panel."""
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True

    def on_click(self, event: Click) -> None:
        """Copy log content to clipboard when clicked."""
        event.stop()
        text = "\n".join(line.text for line in self.lines)
        if not text.strip():
            self.app.notify("Log is empty", timeout=2)
            return
        self.app.copy_to_clipboard(text)
        self.app.notify("Log copied", timeout=2)
