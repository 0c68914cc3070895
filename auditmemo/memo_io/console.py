# auditmemo/memo_io/console.py
# The one Rich console every command prints through
#
# - Importers hold `console`, a stable handle; tests & piped runs swap the Console behind it
# - The memo theme is pushed by the CLI callback, not at import

from __future__ import annotations

from typing import Any, Optional

from rich.console import Console


class _SharedConsole:
    __slots__ = ("current",)

    def __init__(self, target: Console) -> None:
        self.current = target

    def __getattr__(self, name: str) -> Any:
        return getattr(self.current, name)


console = _SharedConsole(Console())


# * Swap in a Console built from the given options (None values left at Rich defaults)
def configure_console(
    width: Optional[int] = None,
    force_terminal: Optional[bool] = None,
    no_color: Optional[bool] = None,
    record: bool = False,
) -> Console:
    options: dict[str, Any] = {
        "width": width,
        "force_terminal": force_terminal,
        "no_color": no_color,
    }
    kwargs = {key: value for key, value in options.items() if value is not None}
    if record:
        kwargs["record"] = True
    if kwargs:
        console.current = Console(**kwargs)
    return console.current


def reset_console() -> Console:
    console.current = Console()
    return console.current


# * Re-push the memo theme, e.g. after `config set theme`
def refresh_theme(name: Optional[str] = None) -> None:
    # ! ui imports this module; resolve lazily
    from ..ui.theming.console_theme import refresh_theme as push_memo_theme

    push_memo_theme(name)


__all__ = ["console", "configure_console", "reset_console", "refresh_theme"]
