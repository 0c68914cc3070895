# auditmemo/memo_io/generics.py
# Filesystem helpers shared by memo, history & settings I/O

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

from ..core.exceptions import FileReadError, FileWriteError, JSONParsingError
from ..core.verbose import vlog_file_read, vlog_file_write


def ensure_parent(path: Union[Path, str]) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


# * Read UTF-8 text; OS & decode failures surface as FileReadError
def read_text_safe(path: Path) -> str:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(f"Cannot read {path}: {e}", path) from e
    vlog_file_read(Path(path), len(text))
    return text


# * Write UTF-8 text, creating parent dirs as needed
def write_text_safe(text: str, path: Path) -> None:
    try:
        ensure_parent(path)
        Path(path).write_text(text, encoding="utf-8")
    except OSError as e:
        raise FileWriteError(f"Cannot write {path}: {e}", path) from e
    vlog_file_write(Path(path), len(text))


def write_json_safe(obj: dict[str, Any], path: Path) -> None:
    write_text_safe(json.dumps(obj, indent=2), path)


# * Read JSON object; decode errors report a numbered snippet around the bad line
def read_json_safe(path: Path) -> dict[str, Any]:
    text = read_text_safe(path)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        lines = text.split("\n")
        line_num = e.lineno - 1
        snippet_start = max(0, line_num - 2)
        snippet_end = min(len(lines), line_num + 3)

        numbered_lines = []
        for i, line in enumerate(lines[snippet_start:snippet_end], start=snippet_start + 1):
            marker = ">>> " if i == e.lineno else "    "
            numbered_lines.append(f"{marker}{i:3}: {line}")

        snippet = "\n".join(numbered_lines)
        raise JSONParsingError(f"Invalid JSON in {path}:\n{snippet}\nError: {e.msg}") from e

    if not isinstance(data, dict):
        raise JSONParsingError(f"Expected a JSON object in {path}, got {type(data).__name__}")
    return data
