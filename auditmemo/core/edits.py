# auditmemo/core/edits.py
# Copy-on-write edit operations: each returns a new Document w/ exactly one leaf changed

from __future__ import annotations

import re
from dataclasses import replace
from typing import TypeVar

from .blocks import (
    Block,
    BlockKind,
    Document,
    HeaderBlock,
    ListBlock,
    ParagraphBlock,
    TableBlock,
)
from .exceptions import BlockKindError, BlockShapeError, CellAddressError
from .parser import MarkdownParser
from .serializer import render_block
from .verbose import vlog_edit

B = TypeVar("B", HeaderBlock, ParagraphBlock, ListBlock, TableBlock)

LIST_MARKER_RE = re.compile(r"^- ")
LINE_BREAK_RE = re.compile(r"\s*\n\s*")
BARE_PIPE_RE = re.compile(r"(?<!\\)\|")


# =============================================================================
# Leaf normalization
# =============================================================================


# * Collapse embedded newlines & trim, matching what the parser keeps of a line
def single_line(text: str) -> str:
    return LINE_BREAK_RE.sub(" ", text).strip()


# * Cell text safe inside a pipe row: one line, bare "|" escaped
def cell_text(value: str) -> str:
    return BARE_PIPE_RE.sub(r"\\|", single_line(value))


# * Textarea-style list text -> items; strips "- " & whitespace per line
def list_items_from_text(text: str) -> tuple[str, ...]:
    items = tuple(LIST_MARKER_RE.sub("", line).strip() for line in text.split("\n"))
    return items or ("",)


# =============================================================================
# Lookup & shape checks
# =============================================================================


def _expect(doc: Document, block_id: str, block_type: type[B]) -> B:
    block: Block = doc.find(block_id)
    if not isinstance(block, block_type):
        expected = block_type.kind.value
        raise BlockKindError(
            f"Block '{block_id}' is a {block.kind.value}, not a {expected}",
            block_id,
            expected,
            block.kind.value,
        )
    return block


def _describe(kinds: list[str]) -> str:
    return " + ".join(kinds) if kinds else "nothing"


# * An edited block must re-parse from its own Markdown as exactly itself
def _ensure_stable(block: B) -> B:
    rendered = render_block(block)
    reparsed = MarkdownParser(id_factory=lambda: block.id).parse(rendered)
    kinds = [b.kind.value for b in reparsed]
    if kinds != [block.kind.value] or render_block(reparsed.blocks[0]) != rendered:
        raise BlockShapeError(
            f"Text for {block.kind.value} '{block.id}' would be saved as "
            f"{_describe(kinds)}: {rendered!r}",
            block.id,
            block.kind.value,
            kinds,
        )
    return block


# =============================================================================
# Operations
# =============================================================================


def update_paragraph(doc: Document, block_id: str, text: str) -> Document:
    block = _expect(doc, block_id, ParagraphBlock)
    edited = _ensure_stable(replace(block, text=single_line(text)))
    vlog_edit("update_paragraph", block_id)
    return doc.replace_block(edited)


# * Header text only; level is structural & never edited
def update_header(doc: Document, block_id: str, text: str) -> Document:
    block = _expect(doc, block_id, HeaderBlock)
    edited = _ensure_stable(replace(block, text=single_line(text)))
    vlog_edit("update_header", block_id)
    return doc.replace_block(edited)


# * Whole-list edit from multi-line text; one item per line
def update_list(doc: Document, block_id: str, text: str) -> Document:
    block = _expect(doc, block_id, ListBlock)
    items = list_items_from_text(text)
    edited = _ensure_stable(replace(block, items=items))
    vlog_edit("update_list", block_id, f"{len(block.items)} -> {len(items)} items")
    return doc.replace_block(edited)


def update_table_cell(
    doc: Document, block_id: str, row_index: int, column_index: int, value: str
) -> Document:
    block = _expect(doc, block_id, TableBlock)

    if not 0 <= row_index < len(block.rows):
        raise CellAddressError(
            f"Row {row_index} out of range for table '{block_id}' "
            f"({len(block.rows)} rows)",
            block_id,
            row_index,
            column_index,
        )
    row = block.rows[row_index]
    width = max(block.column_count, len(row))
    if not 0 <= column_index < width:
        raise CellAddressError(
            f"Column {column_index} out of range for table '{block_id}' "
            f"({block.column_count} columns)",
            block_id,
            row_index,
            column_index,
        )

    cells = list(row)
    if column_index >= len(cells):
        cells.extend([""] * (column_index + 1 - len(cells)))
    cells[column_index] = cell_text(value)

    rows = block.rows[:row_index] + (tuple(cells),) + block.rows[row_index + 1 :]
    edited = _ensure_stable(replace(block, rows=rows))
    vlog_edit(
        "update_table_cell", block_id, f"row={row_index}, column={column_index}"
    )
    return doc.replace_block(edited)


# * Dispatch a text edit by block kind (cells need update_table_cell)
def update_block_text(doc: Document, block_id: str, text: str) -> Document:
    kind = doc.find(block_id).kind
    if kind is BlockKind.PARAGRAPH:
        return update_paragraph(doc, block_id, text)
    if kind is BlockKind.HEADER:
        return update_header(doc, block_id, text)
    if kind is BlockKind.LIST:
        return update_list(doc, block_id, text)
    raise BlockKindError(
        f"Block '{block_id}' ({kind.value}) has no editable text",
        block_id,
        "paragraph|header|list",
        kind.value,
    )
