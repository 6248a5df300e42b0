"""Modal screens for the TUI.

This module hides the design decisions about:
- Confirmation and share dialog appearance (CSS, layout)
- Button styling and variants
- Keyboard shortcuts for dialogs

To change how dialogs look, modify only this file.
"""

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static

DIALOG_CSS = """
{name} {{
    align: center middle;
    background: $background 70%;
}}

.dialog {{
    width: 60;
    height: auto;
    max-height: 24;
    border: tall $accent;
    background: $surface;
    padding: 1 2;
}}

.dialog-title {{
    width: 100%;
    text-align: center;
    text-style: bold;
    color: $accent;
    padding: 0 0 1 0;
    border-bottom: solid $border;
    margin-bottom: 1;
}}

.dialog-body {{
    width: 100%;
    height: auto;
    max-height: 12;
    padding: 1 2;
    background: $panel;
    border: round $border;
    color: $foreground;
    margin-bottom: 1;
}}

.dialog-buttons {{
    width: 100%;
    height: 3;
    align: center middle;
}}

.dialog-buttons Button {{
    margin: 0 1;
    min-width: 10;
}}
"""


class UndoScreen(ModalScreen[bool]):
    """Asks whether a just-deleted message should be restored.

    Dismisses with True when the user chooses to undo.
    """

    CSS = DIALOG_CSS.format(name="UndoScreen")

    BINDINGS = [
        Binding("u", "undo", "Undo", show=False),
        Binding("y", "undo", "Undo", show=False),
        Binding("n", "keep", "Keep deleted", show=False),
        Binding("escape", "keep", "Keep deleted", show=False),
    ]

    def __init__(self, preview: str) -> None:
        super().__init__()
        self._preview = preview

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Static("Message deleted", classes="dialog-title")
            yield Static(Text(self._preview), classes="dialog-body")
            with Horizontal(classes="dialog-buttons"):
                yield Button("Undo", id="btn-undo", variant="warning")
                yield Button("OK", id="btn-keep", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "btn-undo")

    def action_undo(self) -> None:
        self.dismiss(True)

    def action_keep(self) -> None:
        self.dismiss(False)


class ShareScreen(ModalScreen[None]):
    """Terminal stand-in for a share sheet: shows the text with a copy button."""

    CSS = DIALOG_CSS.format(name="ShareScreen")

    BINDINGS = [
        Binding("c", "copy", "Copy", show=False),
        Binding("escape", "close", "Close", show=False),
    ]

    def __init__(self, text: str) -> None:
        super().__init__()
        self._text = text

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Static("Share", classes="dialog-title")
            yield Static(Text(self._text), classes="dialog-body")
            with Horizontal(classes="dialog-buttons"):
                yield Button("Copy", id="btn-copy", variant="success")
                yield Button("Close", id="btn-close", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-copy":
            self.action_copy()
        else:
            self.action_close()

    def action_copy(self) -> None:
        self.app.copy_to_clipboard(self._text)
        self.app.notify("Copied to clipboard", timeout=2)
        self.dismiss(None)

    def action_close(self) -> None:
        self.dismiss(None)
