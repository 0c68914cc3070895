# auditmemo/ui/render.py
# Rich renderables for memo documents & table column policies

from __future__ import annotations

import re
from typing import List

from rich import box
from rich.console import Group, RenderableType
from rich.padding import Padding
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from ..core.blocks import (
    Block,
    Document,
    HeaderBlock,
    ListBlock,
    ParagraphBlock,
    SeparatorBlock,
    TableBlock,
)
from ..core.column_policy import CellKind, cell_policy, classify_table, editable_columns

# **bold** spans; unterminated markers stay literal
BOLD_SPAN_RE = re.compile(r"(\*\*.*?\*\*)")


# * Text w/ **bold** spans rendered bold & markers removed
def styled_text(text: str, style: str = "") -> Text:
    result = Text(style=style)
    for part in BOLD_SPAN_RE.split(text):
        if len(part) >= 4 and part.startswith("**") and part.endswith("**"):
            result.append(part[2:-2], style="bold")
        elif part:
            result.append(part)
    return result


def _id_label(block: Block) -> Text:
    return Text(f"[{block.id}] ", style="memo.id")


def render_header(block: HeaderBlock, show_ids: bool = True) -> Text:
    label = _id_label(block) if show_ids else Text()
    marker = "#" * block.level + " "
    return Text.assemble(label, (marker, "memo.id"), styled_text(block.text, "memo.header"))


def render_paragraph(block: ParagraphBlock, show_ids: bool = True) -> Text:
    label = _id_label(block) if show_ids else Text()
    return Text.assemble(label, styled_text(block.text, "memo.editable"))


def render_list(block: ListBlock, show_ids: bool = True) -> RenderableType:
    lines: List[RenderableType] = []
    if show_ids:
        lines.append(_id_label(block))
    for item in block.items:
        lines.append(Text.assemble(("  • ", "memo.bullet"), styled_text(item)))
    return Group(*lines)


# * Cell text styled by policy; choice cells list their options
def _render_cell(block: TableBlock, row_index: int, column_index: int) -> Text:
    row = block.padded_row(row_index)
    cell = row[column_index] if column_index < len(row) else ""
    policy = cell_policy(block.headers, row, column_index)
    if policy.kind is CellKind.READONLY:
        return styled_text(cell, "memo.readonly")
    if policy.kind is CellKind.CHOICE and policy.choices is not None:
        options = " / ".join(policy.choices.options)
        return Text.assemble(
            (policy.choices.value or "-", "memo.choice"), ("\n", ""), (f"[{options}]", "memo.id")
        )
    return styled_text(cell, "memo.editable")


def render_table(block: TableBlock, show_ids: bool = True) -> RenderableType:
    title = Text(f"[{block.id}]", style="memo.id") if show_ids else None
    table = Table(
        title=title,
        title_justify="left",
        box=box.SIMPLE_HEAVY,
        show_lines=False,
        expand=False,
    )
    mask = editable_columns(block.headers)
    for header, editable in zip(block.headers, mask):
        table.add_column(
            styled_text(header, "memo.accent" if editable else "memo.readonly"),
            overflow="fold",
        )
    for row_index in range(len(block.rows)):
        table.add_row(
            *(_render_cell(block, row_index, c) for c in range(block.column_count))
        )
    return table


# * Renderable for one block
def render_block(block: Block, show_ids: bool = True) -> RenderableType:
    if isinstance(block, HeaderBlock):
        return render_header(block, show_ids)
    if isinstance(block, ParagraphBlock):
        return render_paragraph(block, show_ids)
    if isinstance(block, ListBlock):
        return render_list(block, show_ids)
    if isinstance(block, TableBlock):
        return render_table(block, show_ids)
    if isinstance(block, SeparatorBlock):
        return Rule(style="memo.rule")
    raise TypeError(f"Unsupported block type: {type(block).__name__}")


# * Renderables for the whole document, one blank line between blocks
def render_document(doc: Document, show_ids: bool = True) -> List[RenderableType]:
    return [Padding(render_block(b, show_ids), (0, 0, 1, 0)) for b in doc]


# * Per-column summary of a table's editability & choice columns
def policy_table(block: TableBlock) -> Table:
    shape = classify_table(block.headers)
    table = Table(
        title=Text(f"[{block.id}] {shape.value}", style="memo.id"),
        title_justify="left",
        box=box.SIMPLE,
    )
    table.add_column("#", justify="right")
    table.add_column("Header")
    table.add_column("Editable")
    table.add_column("Input")

    for index, (header, editable) in enumerate(
        zip(block.headers, editable_columns(block.headers))
    ):
        kinds = {
            cell_policy(block.headers, block.padded_row(r), index).kind
            for r in range(len(block.rows))
        } or {cell_policy(block.headers, (), index).kind}
        if CellKind.CHOICE in kinds and CellKind.TEXT in kinds:
            input_kind = "choice (some rows)"
        elif CellKind.CHOICE in kinds:
            input_kind = "choice"
        elif editable:
            input_kind = "text"
        else:
            input_kind = "-"
        table.add_row(
            Text(str(index), style="memo.id"),
            styled_text(header),
            Text("yes", style="memo.accent") if editable else Text("no", style="memo.readonly"),
            input_kind,
        )
    return table
