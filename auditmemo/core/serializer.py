# auditmemo/core/serializer.py
# Canonical Markdown rendering of a Document (inverse of parser.parse)

from __future__ import annotations

from typing import Iterable

from .blocks import (
    Block,
    Document,
    HeaderBlock,
    ListBlock,
    ParagraphBlock,
    SeparatorBlock,
    TableBlock,
)

BLOCK_SEPARATOR = "\n\n"
RULE = "---"


# * "| a | b |"; a zero-cell row collapses to "|"
def render_table_row(cells: Iterable[str]) -> str:
    cells = list(cells)
    if not cells:
        return "|"
    return "| " + " | ".join(cells) + " |"


def render_table(block: TableBlock) -> str:
    lines = [
        render_table_row(block.headers),
        render_table_row(RULE for _ in block.headers),
    ]
    lines.extend(render_table_row(block.padded_row(i)) for i in range(len(block.rows)))
    return "\n".join(lines)


# * Render one block w/o surrounding blank lines
def render_block(block: Block) -> str:
    if isinstance(block, HeaderBlock):
        return f"{'#' * block.level} {block.text}"
    if isinstance(block, ParagraphBlock):
        return block.text
    if isinstance(block, SeparatorBlock):
        return RULE
    if isinstance(block, ListBlock):
        return "\n".join(f"- {item}" for item in block.items)
    if isinstance(block, TableBlock):
        return render_table(block)
    raise TypeError(f"Unsupported block type: {type(block).__name__}")


# * Blocks joined by one blank line; no trailing newline
def serialize(document: Document) -> str:
    return BLOCK_SEPARATOR.join(render_block(b) for b in document)
