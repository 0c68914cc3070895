# auditmemo/core/history.py
# Linear undo history of Document snapshots for one editing session

from __future__ import annotations

from typing import Any

from .blocks import Document
from .exceptions import HistoryError
from .verbose import vlog_history


class HistoryStack:
    """Snapshots plus a current position.

    Recording after an undo discards the undone branch (no redo). Undo walks
    back one snapshot and never records, so repeated undos keep walking back.
    ``limit`` caps the number of retained snapshots (0 keeps everything);
    the oldest ones are dropped first.
    """

    def __init__(self, initial: Document, limit: int = 0):
        if limit < 0:
            raise HistoryError(f"history limit must be >= 0, got {limit}")
        self._snapshots: list[Document] = [initial]
        self._position = 0
        self.limit = limit

    @property
    def position(self) -> int:
        return self._position

    @property
    def current(self) -> Document:
        return self._snapshots[self._position]

    @property
    def snapshots(self) -> tuple[Document, ...]:
        return tuple(self._snapshots)

    @property
    def can_undo(self) -> bool:
        return self._position > 0

    def __len__(self) -> int:
        return len(self._snapshots)

    def record(self, document: Document) -> None:
        del self._snapshots[self._position + 1 :]
        self._snapshots.append(document)
        if self.limit and len(self._snapshots) > self.limit:
            del self._snapshots[: len(self._snapshots) - self.limit]
        self._position = len(self._snapshots) - 1
        vlog_history("record", self._position, len(self._snapshots))

    # * Step back one snapshot (no-op at the initial snapshot) & return the current one
    def undo(self) -> Document:
        if self._position > 0:
            self._position -= 1
            vlog_history("undo", self._position, len(self._snapshots))
        return self.current

    # * Change the cap; drops undone snapshots first, then the oldest, never the current one
    def set_limit(self, limit: int) -> None:
        if limit < 0:
            raise HistoryError(f"history limit must be >= 0, got {limit}")
        self.limit = limit
        if not limit or len(self._snapshots) <= limit:
            return
        del self._snapshots[self._position + 1 :]
        dropped = max(len(self._snapshots) - limit, 0)
        del self._snapshots[:dropped]
        self._position -= dropped
        vlog_history("limit", self._position, len(self._snapshots))

    def to_dict(self) -> dict[str, Any]:
        return {
            "position": self._position,
            "limit": self.limit,
            "snapshots": [doc.to_dict() for doc in self._snapshots],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HistoryStack":
        snapshots = [Document.from_dict(d) for d in data.get("snapshots", [])]
        if not snapshots:
            raise HistoryError("history has no snapshots")
        position = int(data.get("position", len(snapshots) - 1))
        if not 0 <= position < len(snapshots):
            raise HistoryError(
                f"history position {position} outside 0..{len(snapshots) - 1}"
            )
        stack = cls(snapshots[0], limit=int(data.get("limit", 0)))
        stack._snapshots = snapshots
        stack._position = position
        return stack


# * Boundary-style helpers mirroring the method API
def record_history(stack: HistoryStack, document: Document) -> None:
    stack.record(document)


def undo(stack: HistoryStack) -> Document:
    return stack.undo()
