from __future__ import annotations

from rich.theme import Theme as RichTheme

from outlay.services.theme_service import Theme

# Tuple format: (Light Mode, Dark Mode)
_STYLES = {
    # Headings and labels
    "title": ("bold #2c3e50", "bold #e0e0e0"),
    "label": ("bold #000000", "bold #ffffff"),
    "muted": ("#666666", "#b0b0b0"),
    # Entities
    "date": ("#2980b9", "#5dade2"),
    "category": ("#8e44ad", "#c39bd3"),
    "partner": ("#16a085", "#48c9b0"),
    # Semantic
    "amount": ("bold #c0392b", "bold #ff6b6b"),
    "amount.total": ("bold #000000", "bold #ffffff"),
    "positive": ("#27ae60", "#2ecc71"),
    "negative": ("#e74c3c", "#ff6b6b"),
    "fixed": ("#d35400", "#f5b041"),
    "warning": ("#b9770e", "#f4d03f"),
    "error": ("bold #c0392b", "bold #ff6b6b"),
}


def rich_theme(theme: Theme) -> RichTheme:
    """Build the Rich style theme for the given display theme."""
    index = 1 if theme is Theme.dark else 0
    return RichTheme({name: pair[index] for name, pair in _STYLES.items()})
