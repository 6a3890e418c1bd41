"""Color theme and styling for the TUI."""

# Urwid palette for the application
# Format: (name, foreground, background, mono, foreground_high, background_high)

PALETTE = [
    # Word card
    ("word", "white,bold", ""),
    ("word_active", "light magenta,bold", ""),
    ("word_paused", "dark gray,bold", ""),
    ("word_error", "light red,bold", ""),
    ("description", "light gray", ""),
    ("hint", "dark gray", ""),

    # Countdown bar
    ("countdown", "white,bold", ""),
    ("progress_normal", "white", "dark gray"),
    ("progress_complete", "white", "dark magenta"),
    ("progress_smooth", "dark magenta", "dark gray"),

    # UI elements
    ("header", "white", "dark blue"),
    ("footer", "white", "dark gray"),
    ("tab_active", "white,bold", "dark magenta"),
    ("tab_inactive", "light gray", "dark blue"),
    ("badge", "yellow,bold", "dark blue"),
]


def get_word_attr(snapshot) -> str:
    """Get attribute name for the word card."""
    from freestyle.core.models import LoadStatus
    if snapshot.load_status == LoadStatus.ERROR:
        return "word_error"
    if snapshot.is_paused:
        return "word_paused"
    if snapshot.is_running:
        return "word_active"
    return "word"


def get_button_label(is_running: bool) -> str:
    """Label of the start/stop action."""
    return "■ Stop" if is_running else "▶ Start"
