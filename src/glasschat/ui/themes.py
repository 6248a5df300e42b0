"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Frosted glass over a red/purple glow
GLASS_DUSK = Theme(
    name="glass-dusk",
    primary="#4f8ef7",      # Blue - user bubbles and send button
    secondary="#b07cf2",    # Purple - glow accent
    accent="#f26d8f",       # Red/pink - highlights
    foreground="#e6e1f0",   # Light text
    background="#140f1f",   # Deep violet backdrop
    success="#7fd88f",
    warning="#f5b36b",
    error="#f26d6d",
    surface="#211a30",      # Glass pane
    panel="#1a1427",        # Panel backgrounds
    dark=True,
    variables={
        "block-cursor-foreground": "#140f1f",
        "block-cursor-background": "#e6e1f0",
        "block-cursor-text-style": "bold",
        "block-hover-background": "#3a2f52 20%",

        "input-cursor-background": "#e6e1f0",
        "input-cursor-foreground": "#140f1f",
        "input-selection-background": "#4f8ef7 30%",

        "border": "#4a3d66",
        "border-blurred": "#332a48",

        "scrollbar": "#332a48",
        "scrollbar-hover": "#4a3d66",
        "scrollbar-active": "#b07cf2",
        "scrollbar-background": "#1a1427",
        "scrollbar-corner-color": "#1a1427",

        "footer-foreground": "#c9c0dc",
        "footer-background": "#140f1f",
        "footer-key-foreground": "#f26d8f",
        "footer-key-background": "#332a48",
        "footer-description-foreground": "#a89fbd",

        "text-muted": "#7d7396",
        "text-disabled": "#4a3d66",

        "button-foreground": "#e6e1f0",
        "button-color-foreground": "#140f1f",
        "button-focus-text-style": "bold reverse",
    },
)
