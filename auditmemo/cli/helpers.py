# auditmemo/cli/helpers.py
# Shared CLI helpers: memo path resolution & persisted editing sessions

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import typer

from ..config.settings import MemoSettings
from ..core.blocks import Document
from ..core.session import MemoSession
from ..core.validation import ValidationResult, raise_for_result
from ..core.output import Category, get_output_manager
from ..core.debug import debug_print
from ..memo_io.documents import read_memo, write_memo
from ..memo_io.history_store import HistoryStore


# * Explicit path wins; otherwise the configured default memo
def resolve_memo_path(settings: MemoSettings, memo: Optional[Path]) -> Path:
    return memo if memo is not None else settings.memo_path


def history_store_for(settings: MemoSettings) -> HistoryStore:
    return HistoryStore(settings.history_dir, history_limit=settings.history_limit)


# * The document edits will address: the resumed session's, so shown ids match editable ids
def session_document(settings: MemoSettings, memo: Optional[Path]) -> Document:
    memo_path = resolve_memo_path(settings, memo)
    return history_store_for(settings).open_session(memo_path, read_memo(memo_path)).document


# * Read edit text from the argument, or stdin when given "-"
def read_text_arg(text: str) -> str:
    if text == "-":
        return typer.get_text_stream("stdin").read().rstrip("\n")
    return text


# * Print warnings; raise on errors
def report_validation(result: ValidationResult) -> None:
    for warning in result.warnings:
        get_output_manager().warning(warning)
    raise_for_result(result)


# * Open the memo's session, run `edit`, then persist memo text & history
def run_session_edit(
    settings: MemoSettings,
    memo: Optional[Path],
    edit: Callable[[MemoSession], Optional[str]],
) -> tuple[MemoSession, Optional[str]]:
    memo_path = resolve_memo_path(settings, memo)
    store = history_store_for(settings)
    session = store.open_session(memo_path, read_memo(memo_path))
    session.on_update = lambda text: write_memo(memo_path, text)

    published = edit(session)
    saved_to = store.save(memo_path, session)
    debug_print(f"Session saved to {saved_to}", Category.HISTORY)
    return session, published
