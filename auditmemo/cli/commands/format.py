# auditmemo/cli/commands/format.py
# Canonicalize a memo (parse + serialize) in place, to another file, or as a check

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ...config.settings import get_settings
from ...core.parser import parse
from ...core.serializer import serialize
from ...memo_io.console import console
from ...memo_io.documents import read_memo, write_memo
from ..app import app
from ..decorators import handle_memo_error
from ..helpers import resolve_memo_path
from ..params import MemoArg


@app.command(name="format", help="Rewrite a memo in canonical Markdown form")
@handle_memo_error
def format_memo(
    ctx: typer.Context,
    memo: Optional[Path] = MemoArg(),
    check: bool = typer.Option(
        False, "--check", help="Exit 1 if the memo is not canonical; write nothing"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write canonical text here instead of in place"
    ),
) -> None:
    settings = get_settings(ctx)
    memo_path = resolve_memo_path(settings, memo)
    raw = read_memo(memo_path)
    canonical = serialize(parse(raw))
    unchanged = raw.rstrip("\n") == canonical

    if check:
        if unchanged:
            console.print(f"[green]✓[/] {memo_path} is canonical")
            return
        console.print(f"[yellow]![/] {memo_path} would be reformatted")
        raise typer.Exit(1)

    target = output or memo_path
    if unchanged and output is None:
        console.print(f"[dim]{memo_path} already canonical[/]")
        return
    write_memo(target, canonical)
    console.print(f"[green]✓[/] Wrote {target}")
