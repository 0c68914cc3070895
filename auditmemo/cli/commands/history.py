# auditmemo/cli/commands/history.py
# Undo & history inspection for a memo's persisted editing session

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.table import Table
from rich.text import Text

from ...config.settings import get_settings
from ...core.serializer import serialize
from ...core.session import MemoSession
from ...memo_io.console import console
from ...memo_io.documents import read_memo
from ..app import app
from ..decorators import handle_memo_error
from ..helpers import history_store_for, resolve_memo_path, run_session_edit
from ..params import MemoArg


# * Restore the previous snapshot & rewrite the memo; no-op at the start of history
@app.command(help="Undo the last edit to a memo")
@handle_memo_error
def undo(
    ctx: typer.Context,
    memo: Optional[Path] = MemoArg(),
    steps: int = typer.Option(1, "--steps", "-n", min=1, help="Number of edits to undo"),
) -> None:
    settings = get_settings(ctx)

    def apply(session: MemoSession) -> Optional[str]:
        published = None
        for _ in range(steps):
            text = session.undo()
            if text is None:
                break
            published = text
        return published

    session, published = run_session_edit(settings, memo, apply)
    if published is None:
        console.print("[dim]Nothing to undo[/]")
        return
    console.print(f"[green]✓[/] Undone [dim](history {session.history.position})[/]")


# * List snapshots for the memo's current generation, or clear them
@app.command(help="Show (or clear) a memo's edit history")
@handle_memo_error
def history(
    ctx: typer.Context,
    memo: Optional[Path] = MemoArg(),
    clear: bool = typer.Option(False, "--clear", help="Discard the saved history"),
) -> None:
    settings = get_settings(ctx)
    memo_path = resolve_memo_path(settings, memo)
    store = history_store_for(settings)

    if clear:
        removed = store.clear(memo_path)
        console.print("[green]✓[/] History cleared" if removed else "[dim]No saved history[/]")
        return

    session = store.open_session(memo_path, read_memo(memo_path))
    table = Table(box=box.SIMPLE, title=Text(str(memo_path)), title_justify="left")
    table.add_column("#", justify="right")
    table.add_column("Blocks", justify="right")
    table.add_column("Chars", justify="right")
    table.add_column("")

    for index, snapshot in enumerate(session.history.snapshots):
        marker = "[green]◀ current[/]" if index == session.history.position else ""
        table.add_row(str(index), str(len(snapshot)), str(len(serialize(snapshot))), marker)
    console.print(table)
