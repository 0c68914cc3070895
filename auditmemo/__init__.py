# auditmemo/__init__.py
# Structured Markdown engine for reviewer-editable audit memos

from .core.blocks import (
    BlockKind,
    HeaderBlock,
    ParagraphBlock,
    ListBlock,
    TableBlock,
    SeparatorBlock,
    Document,
)
from .core.parser import parse
from .core.serializer import serialize
from .core.column_policy import is_column_editable, cell_choices
from .core.edits import (
    update_paragraph,
    update_header,
    update_list,
    update_table_cell,
)
from .core.history import HistoryStack, record_history, undo
from .core.session import MemoSession

__version__ = "0.1.0"

__all__ = [
    "BlockKind",
    "HeaderBlock",
    "ParagraphBlock",
    "ListBlock",
    "TableBlock",
    "SeparatorBlock",
    "Document",
    "parse",
    "serialize",
    "is_column_editable",
    "cell_choices",
    "update_paragraph",
    "update_header",
    "update_list",
    "update_table_cell",
    "HistoryStack",
    "record_history",
    "undo",
    "MemoSession",
]
