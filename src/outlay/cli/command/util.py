from __future__ import annotations

from decimal import Decimal
from typing import Optional

from rich.console import Console
from rich.text import Text

from outlay.cli.theme import rich_theme
from outlay.services.theme_service import Theme

console = Console(theme=rich_theme(Theme.light))

# Whether apply_theme has pushed a palette onto the console's theme stack
_theme_pushed = False


def apply_theme(theme: Theme) -> None:
    """Switch console styles to the given display theme, replacing any earlier switch."""
    global _theme_pushed
    if _theme_pushed:
        console.pop_theme()
    console.push_theme(rich_theme(theme))
    _theme_pushed = True


def reset_theme() -> None:
    """Return the console to its base palette."""
    global _theme_pushed
    if _theme_pushed:
        console.pop_theme()
        _theme_pushed = False


def fmt_amount(amt: Decimal, style: str = "amount") -> Text:
    return Text(f"{amt:,.2f}", style=style)


def fmt_share(share: Optional[Decimal]) -> str:
    if share is None:
        return "—"
    return f"{share * 100:.1f}%"


def fmt_balance(balance: Optional[Decimal]) -> Text:
    if balance is None:
        return Text("—", style="muted")
    s = f"{balance:+,.2f}"
    if balance < 0:
        return Text(s, style="negative")
    elif balance > 0:
        return Text(s, style="positive")
    return Text(s)
