# auditmemo/ui/theming/theme_definitions.py
# Named style palettes for memo rendering

from __future__ import annotations

# style name -> Rich style, one mapping per theme
THEMES: dict[str, dict[str, str]] = {
    "slate": {
        "memo.accent": "#2563eb",
        "memo.accent2": "#0891b2",
        "memo.header": "bold #1e3a8a",
        "memo.id": "dim #64748b",
        "memo.readonly": "#64748b",
        "memo.editable": "#0f172a",
        "memo.choice": "bold #0891b2",
        "memo.rule": "#cbd5e1",
        "memo.bullet": "#2563eb",
    },
    "forest": {
        "memo.accent": "#15803d",
        "memo.accent2": "#65a30d",
        "memo.header": "bold #14532d",
        "memo.id": "dim #6b7280",
        "memo.readonly": "#6b7280",
        "memo.editable": "#111827",
        "memo.choice": "bold #65a30d",
        "memo.rule": "#d1d5db",
        "memo.bullet": "#15803d",
    },
    "mono": {
        "memo.accent": "bold",
        "memo.accent2": "underline",
        "memo.header": "bold",
        "memo.id": "dim",
        "memo.readonly": "dim",
        "memo.editable": "none",
        "memo.choice": "bold",
        "memo.rule": "dim",
        "memo.bullet": "none",
    },
}

DEFAULT_THEME = "slate"
