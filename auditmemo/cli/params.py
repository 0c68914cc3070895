# auditmemo/cli/params.py
# Shared CLI argument & option definitions

from __future__ import annotations

from typing import Any

import typer


def MemoArg() -> Any:
    return typer.Argument(
        None,
        help="Path to memo Markdown (defaults to data_dir/memo_filename from config)",
        dir_okay=False,
    )


def MemoOpt() -> Any:
    return typer.Option(
        None,
        "--memo",
        "-m",
        help="Path to memo Markdown (defaults to data_dir/memo_filename from config)",
        dir_okay=False,
    )


def BlockIdArg() -> Any:
    return typer.Argument(..., help="Block id as printed by 'auditmemo show' (e.g. b3)")


def TextArg() -> Any:
    return typer.Argument(..., help="New text; '-' reads it from stdin")


def ShowIdsOpt() -> Any:
    return typer.Option(
        None, "--ids/--no-ids", help="Prefix blocks w/ their ids (default from config)"
    )


def ForceOpt() -> Any:
    return typer.Option(
        False,
        "--force",
        "-f",
        help="Apply even if the column is read-only or the value is outside its choices",
    )
