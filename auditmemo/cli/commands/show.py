# auditmemo/cli/commands/show.py
# Read-only views: rendered memo w/ block ids, & column policy per table

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ...config.settings import get_settings
from ...core.blocks import BlockKind, TableBlock
from ...memo_io.console import console
from ...ui.render import policy_table, render_document
from ..app import app
from ..decorators import handle_memo_error
from ..helpers import session_document
from ..params import MemoArg, ShowIdsOpt


# * Render the memo; editable cells in normal style, read-only cells dimmed
@app.command(help="Render a memo w/ block ids & edit permissions")
@handle_memo_error
def show(
    ctx: typer.Context,
    memo: Optional[Path] = MemoArg(),
    ids: Optional[bool] = ShowIdsOpt(),
) -> None:
    settings = get_settings(ctx)
    doc = session_document(settings, memo)
    show_ids = settings.show_ids if ids is None else ids

    if not len(doc):
        console.print("[dim]Memo is empty[/]")
        return
    for renderable in render_document(doc, show_ids=show_ids):
        console.print(renderable)


# * Per-table column editability & input kind
@app.command(help="Show which table columns reviewers may edit")
@handle_memo_error
def columns(
    ctx: typer.Context,
    memo: Optional[Path] = MemoArg(),
) -> None:
    settings = get_settings(ctx)
    doc = session_document(settings, memo)
    tables = [b for b in doc.of_kind(BlockKind.TABLE) if isinstance(b, TableBlock)]

    if not tables:
        console.print("[dim]No tables in memo[/]")
        return
    for table in tables:
        console.print(policy_table(table))
