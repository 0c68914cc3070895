# auditmemo/core/parser.py
# Line-oriented parser for the memo Markdown subset; total (never raises)

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Optional

from .blocks import (
    Block,
    BlockIdFactory,
    Document,
    HeaderBlock,
    ListBlock,
    ParagraphBlock,
    SeparatorBlock,
    TableBlock,
)
from .verbose import vlog_parse

# * Grammar patterns
HEADER_RE = re.compile(r"^(#{1,6})\s+(.*)$")
# unescaped pipe; "\|" stays inside the cell
CELL_SPLIT_RE = re.compile(r"(?<!\\)\|")
# table header/body separator cell: ---, :---, ---:, :---:
DASH_CELL_RE = re.compile(r"^:?-{3,}:?$")

SEPARATOR_LINES = ("---", "***")
LIST_MARKERS = ("- ", "* ")
# "- " trimmed; an empty list item
BARE_LIST_MARKERS = ("-", "*")


# * Split a "|"-led line into trimmed cells
def split_table_row(line: str) -> list[str]:
    segments = CELL_SPLIT_RE.split(line)
    # leading segment is whatever precedes the first "|" (empty for "|"-led lines)
    segments = segments[1:]
    if segments and segments[-1].strip() == "":
        segments = segments[:-1]
    return [s.strip() for s in segments]


# * True for the "| --- | :---: |" row between table header & body
def is_table_separator_row(cells: list[str]) -> bool:
    return bool(cells) and all(DASH_CELL_RE.match(c) for c in cells)


@dataclass
class _ParseState:
    blocks: list[Block] = field(default_factory=list)
    # open handles hold indexes into blocks; builders are immutable so rows/items accumulate here
    table_index: Optional[int] = None
    table_rows: list[tuple[str, ...]] = field(default_factory=list)
    list_index: Optional[int] = None
    list_items: list[str] = field(default_factory=list)

    def close_table(self) -> None:
        if self.table_index is not None:
            table = self.blocks[self.table_index]
            assert isinstance(table, TableBlock)
            self.blocks[self.table_index] = TableBlock(
                table.id, table.headers, tuple(self.table_rows)
            )
        self.table_index = None
        self.table_rows = []

    def close_list(self) -> None:
        if self.list_index is not None:
            self.blocks[self.list_index] = ListBlock(
                self.blocks[self.list_index].id, tuple(self.list_items)
            )
        self.list_index = None
        self.list_items = []


class MarkdownParser:
    """Single forward pass over lines with at most one open table and one open list.

    Line classes are checked in a fixed order: table row, header, separator,
    list item, blank, paragraph. A ``|``-led line closes the open list; any
    other line closes the open table; anything that is not a list item closes
    the open list.
    """

    def __init__(self, id_factory: Callable[[], str] | None = None):
        self._new_id = id_factory or BlockIdFactory()

    def parse(self, text: str) -> Document:
        lines = text.split("\n")
        state = _ParseState()

        for raw in lines:
            line = raw.strip()

            if line.startswith("|"):
                state.close_list()
                self._table_line(state, line)
                continue
            state.close_table()

            match = HEADER_RE.match(line)
            if match:
                state.close_list()
                state.blocks.append(
                    HeaderBlock(self._new_id(), len(match.group(1)), match.group(2))
                )
                continue

            if line in SEPARATOR_LINES:
                state.close_list()
                state.blocks.append(SeparatorBlock(self._new_id()))
                continue

            if line.startswith(LIST_MARKERS) or line in BARE_LIST_MARKERS:
                self._list_line(state, line[2:])
                continue
            state.close_list()

            if line:
                state.blocks.append(ParagraphBlock(self._new_id(), line))

        state.close_table()
        state.close_list()

        document = Document(tuple(state.blocks))
        counts = Counter(b.kind.value for b in document)
        vlog_parse(len(lines), dict(counts))
        return document

    def _table_line(self, state: _ParseState, line: str) -> None:
        cells = split_table_row(line)
        if state.table_index is None:
            state.blocks.append(TableBlock(self._new_id(), tuple(cells)))
            state.table_index = len(state.blocks) - 1
            return
        if is_table_separator_row(cells) or not cells:
            return
        state.table_rows.append(tuple(cells))

    def _list_line(self, state: _ParseState, item: str) -> None:
        if state.list_index is None:
            state.blocks.append(ListBlock(self._new_id()))
            state.list_index = len(state.blocks) - 1
        state.list_items.append(item)


# * Parse memo text into a Document w/ fresh sequential block ids
def parse(text: str) -> Document:
    return MarkdownParser().parse(text)
