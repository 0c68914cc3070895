# auditmemo/ui/theming/console_theme.py
# Pushes the memo theme onto the shared console, replacing any earlier one

from __future__ import annotations

from rich.theme import ThemeStackError

from ...memo_io.console import console
from .theme_engine import get_memo_theme


# * Swap the pushed theme for the current settings
def refresh_theme(name: str | None = None) -> None:
    try:
        console.pop_theme()
    except ThemeStackError:
        pass  # nothing pushed yet
    console.push_theme(get_memo_theme(name))
