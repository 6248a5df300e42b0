"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
User bubbles sit on the right in the primary color, assistant bubbles on
the left on the glass surface.
"""

APP_CSS = """
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Chat History Panel
   ============================================ */
#chat-history {
    height: 1fr;
    background: $surface 60%;
    border: round $secondary 50%;
    border-title-color: $secondary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $secondary;
    }
}

#empty-placeholder {
    height: 1fr;
    width: 100%;
    content-align: center middle;
    text-align: center;
    color: $text-muted;
    text-style: bold;
    background: $surface 60%;
    border: round $secondary 30%;
}

/* ============================================
   Message Bubbles
   ============================================ */
MessageBubble {
    width: auto;
    max-width: 70%;
    height: auto;
    padding: 0 1;
    margin: 1 0 0 0;
    border-title-color: $text-muted;
    border-title-align: left;

    &.user {
        background: $primary;
        color: $text;
        border: round $primary;
        margin-left: 0;
    }

    &.assistant {
        background: $panel;
        color: $foreground;
        border: round $border;
    }

    &:focus {
        text-style: bold;
        border: round $accent;
    }
}

.bubble-row {
    height: auto;
    width: 100%;

    &.user {
        align-horizontal: right;
    }

    &.assistant {
        align-horizontal: left;
    }
}

/* ============================================
   Typing Indicator and Reply Banner
   ============================================ */
TypingIndicator {
    height: 1;
    padding: 0 2;
    color: $text-muted;
}

ReplyBanner {
    height: 1;
    padding: 0 2;
    color: $accent;
    background: $panel;
}

/* ============================================
   Chat Input Bar - Text Entry + Send
   ============================================ */
ChatInputBar {
    height: 5;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: none;
    padding: 0 1;
    background: transparent;
}

#send-btn {
    width: 10;
    height: 100%;
    margin: 0 1;

    &:disabled {
        opacity: 50%;
    }
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    scrollbar-gutter: stable;
}
"""
