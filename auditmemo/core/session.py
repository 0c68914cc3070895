# auditmemo/core/session.py
# One editing session per generated memo: edits recorded in history, canonical text published on every change

from __future__ import annotations

from typing import Callable, Optional

from .blocks import Document
from .edits import update_header, update_list, update_paragraph, update_table_cell
from .history import HistoryStack
from .parser import parse
from .serializer import serialize

# called w/ the new canonical Markdown after each accepted edit or undo
UpdateCallback = Callable[[str], None]


class MemoSession:
    """Document + history for a single memo generation.

    A regenerated or refined memo starts a new session; history is never
    carried across generations.
    """

    def __init__(
        self,
        text: str,
        on_update: Optional[UpdateCallback] = None,
        history_limit: int = 0,
    ):
        self.source_text = text
        self.on_update = on_update
        self.history = HistoryStack(parse(text), limit=history_limit)

    @classmethod
    def restore(
        cls,
        source_text: str,
        history: HistoryStack,
        on_update: Optional[UpdateCallback] = None,
    ) -> "MemoSession":
        session = cls.__new__(cls)
        session.source_text = source_text
        session.on_update = on_update
        session.history = history
        return session

    @property
    def document(self) -> Document:
        return self.history.current

    @property
    def markdown(self) -> str:
        return serialize(self.document)

    # * Whether externally held text still belongs to this session
    def matches(self, text: str) -> bool:
        if text == self.markdown:
            return True
        return self.history.position == 0 and text == self.source_text

    def update_paragraph(self, block_id: str, text: str) -> str:
        return self._commit(update_paragraph(self.document, block_id, text))

    def update_header(self, block_id: str, text: str) -> str:
        return self._commit(update_header(self.document, block_id, text))

    def update_list(self, block_id: str, text: str) -> str:
        return self._commit(update_list(self.document, block_id, text))

    def update_table_cell(
        self, block_id: str, row_index: int, column_index: int, value: str
    ) -> str:
        return self._commit(
            update_table_cell(self.document, block_id, row_index, column_index, value)
        )

    # * Step back & republish w/o recording; None when already at the initial snapshot
    def undo(self) -> Optional[str]:
        if not self.history.can_undo:
            return None
        self.history.undo()
        return self._publish()

    def _commit(self, document: Document) -> str:
        self.history.record(document)
        return self._publish()

    def _publish(self) -> str:
        text = self.markdown
        if self.on_update is not None:
            self.on_update(text)
        return text
