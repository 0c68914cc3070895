# auditmemo/core/validation.py
# Pure validation of reviewer edits against the column policy (no I/O)

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .blocks import BlockKind, Document, TableBlock
from .column_policy import cell_policy, CellKind
from .exceptions import EditValidationError


# * Standard result type for validation operations
@dataclass
class ValidationResult:
    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def _result(errors: list[str], warnings: list[str] | None = None) -> ValidationResult:
    return ValidationResult(not errors, errors, warnings or [])


# * Block exists & is one of the expected kinds
def validate_block_edit(
    doc: Document, block_id: str, kinds: Sequence[BlockKind]
) -> ValidationResult:
    block = doc.get(block_id)
    if block is None:
        return _result([f"No block with id '{block_id}'"])
    if block.kind not in kinds:
        wanted = "|".join(k.value for k in kinds)
        return _result([f"Block '{block_id}' is a {block.kind.value}, expected {wanted}"])
    return _result([])


# * Address, editability & choice checks for a single table cell edit
def validate_cell_edit(
    doc: Document,
    block_id: str,
    row_index: int,
    column_index: int,
    value: str,
    enforce_policy: bool = True,
) -> ValidationResult:
    result = validate_block_edit(doc, block_id, [BlockKind.TABLE])
    if not result.is_valid:
        return result

    table = doc.find(block_id)
    assert isinstance(table, TableBlock)
    if not 0 <= row_index < len(table.rows):
        return _result([f"Row {row_index} out of range (table has {len(table.rows)} rows)"])
    if not 0 <= column_index < table.column_count:
        return _result(
            [f"Column {column_index} out of range (table has {table.column_count} columns)"]
        )

    errors: list[str] = []
    warnings: list[str] = []
    header = table.headers[column_index]
    policy = cell_policy(table.headers, table.padded_row(row_index), column_index)

    if policy.kind is CellKind.READONLY:
        msg = f"Column '{header}' is read-only for this table"
        (errors if enforce_policy else warnings).append(msg)
    elif policy.choices is not None and not policy.choices.accepts(value):
        options = ", ".join(policy.choices.options)
        msg = f"'{value}' is not a valid {policy.choices.kind.value} value (choose: {options})"
        (errors if enforce_policy else warnings).append(msg)

    if "\n" in value:
        warnings.append("Line breaks in cell values are collapsed to spaces")
    return _result(errors, warnings)


# * Raise EditValidationError for an invalid result
def raise_for_result(result: ValidationResult) -> None:
    if not result.is_valid:
        raise EditValidationError(result.errors, recoverable=False)
