# auditmemo/memo_io/documents.py
# Memo file I/O: raw Markdown text in, canonical Markdown text out

from __future__ import annotations

from pathlib import Path

from ..core.exceptions import DocumentReadError, FileReadError
from .generics import read_text_safe, write_text_safe


# * Read memo Markdown; normalizes CRLF so line classification sees clean lines
def read_memo(path: Path) -> str:
    path = Path(path)
    if not path.exists():
        raise DocumentReadError(f"Memo file not found: {path}")
    if path.is_dir():
        raise DocumentReadError(f"Memo path is a directory: {path}")
    try:
        text = read_text_safe(path)
    except FileReadError as e:
        raise DocumentReadError(str(e)) from e
    return text.replace("\r\n", "\n")


# * Write canonical memo text w/ a single trailing newline
def write_memo(path: Path, text: str) -> None:
    write_text_safe(text + "\n" if text else "", Path(path))
