# auditmemo/ui/theming/theme_engine.py
# Builds the Rich Theme for the configured palette

from __future__ import annotations

from rich.theme import Theme

from .theme_definitions import THEMES, DEFAULT_THEME


def _configured_theme_name() -> str:
    # lazy import to avoid circular dependency w/ config
    from ...config.settings import settings_manager

    return settings_manager.load().theme


# * Rich Theme w/ memo.* styles; unknown names fall back to the default palette
def get_memo_theme(name: str | None = None) -> Theme:
    theme_name = name or _configured_theme_name()
    styles = THEMES.get(theme_name, THEMES[DEFAULT_THEME])
    return Theme(styles)
