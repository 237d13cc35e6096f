"""Show or change the light/dark display preference."""

from __future__ import annotations

from typing import Optional

from outlay.errors import PreferenceError
from outlay.services.session import LedgerSession
from outlay.services.theme_service import Theme

from .util import apply_theme, console


def run(
    *,
    session: LedgerSession,
    toggle: bool = False,
    set_theme: Optional[str] = None,
) -> int:
    """Show the current theme, or toggle/set it and persist the choice.

    Returns:
        Exit code (0 = success, 1 = invalid value or write failure)
    """
    if toggle and set_theme:
        console.print("[error]Error:[/error] Use either --toggle or --set, not both")
        return 1

    prefs = session.theme
    try:
        if toggle:
            prefs.toggle()
        elif set_theme:
            try:
                theme = Theme(set_theme.strip().lower())
            except ValueError:
                console.print(f"[error]Error:[/error] Unknown theme '{set_theme}' (use light or dark)")
                return 1
            prefs.set(theme)
        else:
            console.print(f"Theme: [label]{prefs.theme.value}[/label]")
            return 0
    except PreferenceError as e:
        console.print(f"[error]Error:[/error] {e}")
        return 1

    apply_theme(prefs.theme)
    console.print(f"Theme set to [label]{prefs.theme.value}[/label]")
    console.print(f"[muted]Saved to {session.workspace.preferences_path}[/muted]")
    return 0
