"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Layout: a single column with the chat filling the screen, an optional log
panel, and the status line plus input bar docked at the bottom.
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
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

#chat-history.-maximized {
    height: 1fr;
}

/* Empty state placeholder */
#empty-state {
    height: 1fr;
    width: 100%;
    align: center middle;
    content-align: center middle;
}

#empty-title {
    width: 100%;
    text-align: center;
    text-style: bold;
    color: $text-muted;
}

#empty-hint {
    width: 100%;
    text-align: center;
    color: $text-muted 70%;
}

/* ============================================
   Chat Messages
   ============================================ */
.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 1 2;
    border: none;
    background: transparent;
}

.user-message {
    border-right: tall $primary;
    background: $primary 15%;

    & .message-header {
        color: $primary;
        text-style: bold;
        text-align: right;
    }

    &:hover {
        background: $primary 22%;
    }
}

.assistant-message {
    border-left: tall $secondary;
    background: $surface;

    & .message-header {
        color: $secondary;
        text-style: bold;
    }

    &:hover {
        background: $surface-lighten-1;
    }
}

.error-message {
    border-left: tall $error;
    background: $error 10%;

    & .message-header {
        color: $error;
        text-style: bold;
    }

    & .message-content {
        color: $error;
    }
}

.message-header {
    height: auto;
    padding: 0;
}

.message-content {
    height: auto;
    padding: 0;
    margin: 0;
    color: $foreground;
}

/* Typing indicator */
#typing-indicator {
    width: auto;
    height: auto;
    padding: 0 2;
    margin: 0 0 1 0;
    border-left: tall $secondary 50%;
    background: $surface;
    color: $text-muted;
    text-style: italic;
}

/* ============================================
   Log Panel
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
    overflow-x: auto;
}

/* ============================================
   Bottom Bar - Status + Input
   ============================================ */
#bottom-bar {
    height: auto;
    padding: 1 1 0 1;
    background: $panel;
    border-top: solid $border;
}

#status {
    height: 1;
    padding: 0 2;
    margin-bottom: 1;
    background: $surface;
    color: $foreground;
}

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
    margin: 0 0 0 1;
    min-width: 8;
    border: tall $success;
    background: $success;
    color: $foreground;
    text-style: bold;

    &:hover {
        background: $success-lighten-1;
    }

    &:disabled {
        background: $surface-lighten-1;
        border: tall $border;
        color: $text-muted;
        text-style: none;
    }
}

/* ============================================
   Chrome
   ============================================ */
Header {
    background: $panel;
    color: $foreground;
}

HeaderTitle {
    color: $primary;
    text-style: bold;
}

Toast {
    background: $surface;
    border: tall $border;
    padding: 0 1;

    &.-error {
        border: tall $error;
        background: $error 12%;
    }

    &.-warning {
        border: tall $warning;
        background: $warning 12%;
    }
}

MarkdownFence {
    background: $panel;
    border: round $border;
    margin: 1 0;
}

* {
    scrollbar-size: 1 1;
}
"""
