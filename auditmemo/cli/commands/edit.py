# auditmemo/cli/commands/edit.py
# Edit subcommands: paragraph/header/list text & single table cells, recorded in the memo's history

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ...config.settings import get_settings
from ...core.blocks import BlockKind
from ...core.session import MemoSession
from ...core.validation import validate_block_edit, validate_cell_edit
from ...memo_io.console import console
from ..app import app
from ..decorators import handle_memo_error
from ..helpers import read_text_arg, report_validation, run_session_edit
from ..params import BlockIdArg, ForceOpt, MemoOpt, TextArg

edit_app = typer.Typer(
    rich_markup_mode="rich",
    help="Edit a memo block or table cell (undo w/ 'auditmemo undo')",
    no_args_is_help=True,
)
app.add_typer(edit_app, name="edit")


def _done(block_id: str, position: int) -> None:
    console.print(f"[green]✓[/] Updated [bold]{block_id}[/] [dim](history {position})[/]")


def _edit_text_block(
    ctx: typer.Context,
    memo: Optional[Path],
    block_id: str,
    text: str,
    kind: BlockKind,
) -> None:
    settings = get_settings(ctx)
    new_text = read_text_arg(text)

    def apply(session: MemoSession) -> str:
        report_validation(validate_block_edit(session.document, block_id, [kind]))
        if kind is BlockKind.PARAGRAPH:
            return session.update_paragraph(block_id, new_text)
        if kind is BlockKind.HEADER:
            return session.update_header(block_id, new_text)
        return session.update_list(block_id, new_text)

    session, _ = run_session_edit(settings, memo, apply)
    _done(block_id, session.history.position)


@edit_app.command(help="Replace a paragraph's text")
@handle_memo_error
def paragraph(
    ctx: typer.Context,
    block_id: str = BlockIdArg(),
    text: str = TextArg(),
    memo: Optional[Path] = MemoOpt(),
) -> None:
    _edit_text_block(ctx, memo, block_id, text, BlockKind.PARAGRAPH)


@edit_app.command(help="Replace a header's text (level is kept)")
@handle_memo_error
def header(
    ctx: typer.Context,
    block_id: str = BlockIdArg(),
    text: str = TextArg(),
    memo: Optional[Path] = MemoOpt(),
) -> None:
    _edit_text_block(ctx, memo, block_id, text, BlockKind.HEADER)


@edit_app.command(
    name="list", help="Replace a whole list; one item per line, leading '- ' optional"
)
@handle_memo_error
def list_items(
    ctx: typer.Context,
    block_id: str = BlockIdArg(),
    text: str = TextArg(),
    memo: Optional[Path] = MemoOpt(),
) -> None:
    _edit_text_block(ctx, memo, block_id, text, BlockKind.LIST)


@edit_app.command(help="Set one table cell (row & column are 0-based, header excluded)")
@handle_memo_error
def cell(
    ctx: typer.Context,
    block_id: str = BlockIdArg(),
    row: int = typer.Argument(..., help="Body row index (0-based)"),
    column: int = typer.Argument(..., help="Column index (0-based)"),
    value: str = TextArg(),
    memo: Optional[Path] = MemoOpt(),
    force: bool = ForceOpt(),
) -> None:
    settings = get_settings(ctx)
    new_value = read_text_arg(value)
    enforce = settings.enforce_policy and not force

    def apply(session: MemoSession) -> str:
        report_validation(
            validate_cell_edit(
                session.document, block_id, row, column, new_value, enforce_policy=enforce
            )
        )
        return session.update_table_cell(block_id, row, column, new_value)

    session, _ = run_session_edit(settings, memo, apply)
    _done(block_id, session.history.position)
