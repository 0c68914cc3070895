# auditmemo/core/column_policy.py
# Header-driven edit permissions & constrained choices for memo tables (pure functions)

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

# * Header keywords (compared lowercase)
SECTION_HEADER = "section"
CONTENT_HEADER = "content"
TEST_SHEET_MARKERS = ("test attribute", "tickmark")
TEST_SHEET_EDITABLE = ("tickmark", "note", "reference")
TICKMARK_MARKER = "tickmark"
CONCLUSION_ROW_MARKER = "conclusion summary"

# * Enumerated values for dropdown-like cells
TICKMARK_CHOICES: tuple[str, ...] = ("Pass", "Fail", "N/A")
CONCLUSION_CHOICES: tuple[str, ...] = ("Effective", "Ineffective", "Insufficient Evidence")


# * Recognized table layouts, in classification order
class TableShape(Enum):
    SECTION_CONTENT = "section_content"  # key/value summary, label column fixed
    TEST_SHEET = "test_sheet"  # attribute rows w/ reviewer disposition columns
    GENERIC = "generic"  # unrecognized; everything editable


class ChoiceKind(Enum):
    TICKMARK = "tickmark"
    CONCLUSION = "conclusion"


class CellKind(Enum):
    READONLY = "readonly"
    TEXT = "text"
    CHOICE = "choice"


@dataclass(frozen=True)
class CellChoices:
    kind: ChoiceKind
    options: tuple[str, ...]
    value: str

    def accepts(self, value: str) -> bool:
        return value in self.options


@dataclass(frozen=True)
class CellPolicy:
    kind: CellKind
    choices: Optional[CellChoices] = None

    @property
    def editable(self) -> bool:
        return self.kind is not CellKind.READONLY


def _lower(headers: Sequence[str]) -> list[str]:
    return [h.lower() for h in headers]


def _header_at(headers: Sequence[str], column_index: int) -> str:
    if 0 <= column_index < len(headers):
        return headers[column_index].lower()
    return ""


# * Remove **bold** markers & surrounding whitespace
def strip_emphasis(text: str) -> str:
    return text.replace("**", "").strip()


# * Identify the table layout from its header row; first match wins
def classify_table(headers: Sequence[str]) -> TableShape:
    lowered = _lower(headers)
    if SECTION_HEADER in lowered and CONTENT_HEADER in lowered:
        return TableShape.SECTION_CONTENT
    if any(marker in h for h in lowered for marker in TEST_SHEET_MARKERS):
        return TableShape.TEST_SHEET
    return TableShape.GENERIC


# * Whether reviewers may edit a column; depends on headers only, never on cell content
def is_column_editable(headers: Sequence[str], column_index: int) -> bool:
    shape = classify_table(headers)
    header = _header_at(headers, column_index)
    if shape is TableShape.SECTION_CONTENT:
        return header == CONTENT_HEADER
    if shape is TableShape.TEST_SHEET:
        return any(marker in header for marker in TEST_SHEET_EDITABLE)
    return True


def editable_columns(headers: Sequence[str]) -> list[bool]:
    return [is_column_editable(headers, i) for i in range(len(headers))]


def _tickmark_choices(cell: str) -> CellChoices:
    value = strip_emphasis(cell)
    options = TICKMARK_CHOICES
    # keep unrecognized existing content selectable
    if value and value not in TICKMARK_CHOICES:
        options = (value,) + TICKMARK_CHOICES
    return CellChoices(ChoiceKind.TICKMARK, options, value)


# * Constrained choice set for one editable cell, or None for free text / read-only
def cell_choices(
    headers: Sequence[str], row: Sequence[str], column_index: int
) -> Optional[CellChoices]:
    if not is_column_editable(headers, column_index):
        return None

    header = _header_at(headers, column_index)
    cell = row[column_index] if column_index < len(row) else ""

    is_conclusion_row = bool(row) and CONCLUSION_ROW_MARKER in row[0].lower()
    if is_conclusion_row and header == CONTENT_HEADER:
        return CellChoices(ChoiceKind.CONCLUSION, CONCLUSION_CHOICES, cell)

    if TICKMARK_MARKER in header:
        return _tickmark_choices(cell)

    return None


# * Combined editability + choice classification for one cell
def cell_policy(
    headers: Sequence[str], row: Sequence[str], column_index: int
) -> CellPolicy:
    if not is_column_editable(headers, column_index):
        return CellPolicy(CellKind.READONLY)
    choices = cell_choices(headers, row, column_index)
    if choices is not None:
        return CellPolicy(CellKind.CHOICE, choices)
    return CellPolicy(CellKind.TEXT)
