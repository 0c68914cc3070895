# auditmemo/memo_io/history_store.py
# Per-memo persistence of editing sessions so undo works across CLI invocations

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Any

from ..core.exceptions import HistoryCorruptError, HistoryError, JSONParsingError
from ..core.history import HistoryStack
from ..core.output import Category
from ..core.session import MemoSession
from ..core.verbose import vlog
from .generics import read_json_safe, write_json_safe

HISTORY_FORMAT_VERSION = 1


class HistoryStore:
    """Stores one session file per memo under ``directory``.

    The file name is derived from the memo's resolved path, so two memos with
    the same name in different folders never share history.
    """

    def __init__(self, directory: Path, history_limit: int = 0):
        self.directory = Path(directory)
        self.history_limit = history_limit

    def path_for(self, memo_path: Path) -> Path:
        resolved = str(Path(memo_path).resolve())
        digest = hashlib.sha1(resolved.encode("utf-8")).hexdigest()[:12]
        return self.directory / f"{Path(memo_path).stem}-{digest}.json"

    # * Saved session if it still owns `text`, else a fresh session (new generation)
    def open_session(self, memo_path: Path, text: str) -> MemoSession:
        saved = self.load(memo_path)
        if saved is not None and _owns(saved, text):
            # configured limit wins over the one the file was saved with
            saved.history.set_limit(self.history_limit)
            vlog(
                Category.HISTORY,
                f"Resumed session for {memo_path}",
                f"position {saved.history.position} of {len(saved.history) - 1}",
            )
            return saved

        if saved is not None:
            vlog(Category.HISTORY, f"Memo {memo_path} changed outside auditmemo; history reset")
        return MemoSession(text, history_limit=self.history_limit)

    def load(self, memo_path: Path) -> MemoSession | None:
        path = self.path_for(memo_path)
        if not path.exists():
            return None
        try:
            data = read_json_safe(path)
            return _session_from_dict(data)
        except (JSONParsingError, HistoryError, KeyError, TypeError, ValueError) as e:
            raise HistoryCorruptError(
                f"Cannot restore edit history from {path}: {e}", path
            ) from e

    def save(self, memo_path: Path, session: MemoSession) -> Path:
        path = self.path_for(memo_path)
        write_json_safe(_session_to_dict(memo_path, session), path)
        return path

    def clear(self, memo_path: Path) -> bool:
        path = self.path_for(memo_path)
        if path.exists():
            path.unlink()
            return True
        return False


# trailing newline is added by write_memo & not part of the canonical text
def _owns(session: MemoSession, text: str) -> bool:
    return session.matches(text) or (
        text.endswith("\n") and session.matches(text[:-1])
    )


def _session_to_dict(memo_path: Path, session: MemoSession) -> dict[str, Any]:
    return {
        "version": HISTORY_FORMAT_VERSION,
        "memo": str(memo_path),
        "source_text": session.source_text,
        "history": session.history.to_dict(),
    }


def _session_from_dict(data: dict[str, Any]) -> MemoSession:
    version = data.get("version")
    if version != HISTORY_FORMAT_VERSION:
        raise HistoryError(f"unsupported history format version {version!r}")
    history = HistoryStack.from_dict(data["history"])
    return MemoSession.restore(str(data["source_text"]), history)
