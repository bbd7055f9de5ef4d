"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Slate night: dark slate surfaces, blue user bubbles, violet accents, red errors
SLATE_NIGHT = Theme(
    name="slate-night",
    primary="#3b82f6",      # Blue 500 - user messages, focus
    secondary="#a855f7",    # Purple 500 - assistant accent
    accent="#60a5fa",       # Blue 400 - highlights
    foreground="#f1f5f9",   # Slate 100 - text
    background="#0f172a",   # Slate 900 - deepest background
    success="#2563eb",      # Blue 600 - send button
    warning="#fbbf24",      # Amber 400 - pending state
    error="#f87171",        # Red 400 - error messages
    surface="#1e293b",      # Slate 800 - bubbles
    panel="#111827",        # Gray 900 - panel backgrounds
    dark=True,
    variables={
        "block-cursor-foreground": "#0f172a",
        "block-cursor-background": "#93c5fd",
        "block-cursor-text-style": "bold",
        "block-cursor-blurred-background": "#334155",

        "input-cursor-background": "#f1f5f9",
        "input-cursor-foreground": "#0f172a",
        "input-selection-background": "#3b82f6 30%",

        "border": "#334155",
        "border-blurred": "#1e293b",

        "scrollbar": "#1e293b",
        "scrollbar-hover": "#334155",
        "scrollbar-active": "#3b82f6",
        "scrollbar-background": "#0f172a",
        "scrollbar-corner-color": "#0f172a",

        "footer-foreground": "#94a3b8",
        "footer-background": "#0f172a",
        "footer-key-foreground": "#60a5fa",
        "footer-key-background": "#1e293b",
        "footer-description-foreground": "#94a3b8",

        "text-muted": "#64748b",
        "text-disabled": "#334155",
        "text-error": "#f87171",
        "text-primary": "#3b82f6",
        "text-secondary": "#a855f7",

        "button-foreground": "#f1f5f9",
        "button-color-foreground": "#f8fafc",
        "button-focus-text-style": "bold reverse",
    },
)
