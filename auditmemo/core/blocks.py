# auditmemo/core/blocks.py
# Immutable block model for memo documents (header/paragraph/list/table/separator)

from __future__ import annotations

import itertools
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, ClassVar, Iterator, Union

from .exceptions import BlockNotFoundError


# * Tag for each block variant; values double as the persisted "kind" field
class BlockKind(Enum):
    HEADER = "header"
    PARAGRAPH = "paragraph"
    LIST = "list"
    TABLE = "table"
    SEPARATOR = "separator"


@dataclass(frozen=True)
class HeaderBlock:
    id: str
    level: int
    text: str
    kind: ClassVar[BlockKind] = BlockKind.HEADER

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "id": self.id, "level": self.level, "text": self.text}


@dataclass(frozen=True)
class ParagraphBlock:
    id: str
    text: str
    kind: ClassVar[BlockKind] = BlockKind.PARAGRAPH

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "id": self.id, "text": self.text}


# items is never empty; an emptied list holds a single "" item
@dataclass(frozen=True)
class ListBlock:
    id: str
    items: tuple[str, ...] = ("",)
    kind: ClassVar[BlockKind] = BlockKind.LIST

    def __post_init__(self) -> None:
        items = tuple(self.items)
        object.__setattr__(self, "items", items if items else ("",))

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "id": self.id, "items": list(self.items)}


# rows may be shorter than headers; padding happens at serialization time
@dataclass(frozen=True)
class TableBlock:
    id: str
    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = ()
    kind: ClassVar[BlockKind] = BlockKind.TABLE

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", tuple(self.headers))
        object.__setattr__(self, "rows", tuple(tuple(r) for r in self.rows))

    @property
    def column_count(self) -> int:
        return len(self.headers)

    # * Row right-padded w/ "" to the header count (longer rows kept whole)
    def padded_row(self, row_index: int) -> tuple[str, ...]:
        row = self.rows[row_index]
        missing = self.column_count - len(row)
        return row + ("",) * missing if missing > 0 else row

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "id": self.id,
            "headers": list(self.headers),
            "rows": [list(r) for r in self.rows],
        }


@dataclass(frozen=True)
class SeparatorBlock:
    id: str
    kind: ClassVar[BlockKind] = BlockKind.SEPARATOR

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "id": self.id}


Block = Union[HeaderBlock, ParagraphBlock, ListBlock, TableBlock, SeparatorBlock]


# * Rebuild a block from its to_dict() form
def block_from_dict(data: dict[str, Any]) -> Block:
    kind = BlockKind(data["kind"])
    block_id = str(data["id"])
    if kind is BlockKind.HEADER:
        return HeaderBlock(block_id, int(data["level"]), str(data["text"]))
    if kind is BlockKind.PARAGRAPH:
        return ParagraphBlock(block_id, str(data["text"]))
    if kind is BlockKind.LIST:
        return ListBlock(block_id, tuple(str(i) for i in data["items"]))
    if kind is BlockKind.TABLE:
        return TableBlock(
            block_id,
            tuple(str(h) for h in data["headers"]),
            tuple(tuple(str(c) for c in row) for row in data["rows"]),
        )
    return SeparatorBlock(block_id)


# * Sequential id source; one factory per parse keeps ids unique within a document
class BlockIdFactory:
    def __init__(self, prefix: str = "b", start: int = 1):
        self.prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        return f"{self.prefix}{next(self._counter)}"


@dataclass(frozen=True)
class Document:
    """Ordered, immutable sequence of blocks.

    Edits never mutate a Document in place: ``replace_block`` returns a new
    Document that shares every untouched block with the original, which is
    what lets the history keep old snapshots valid.
    """

    blocks: tuple[Block, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "blocks", tuple(self.blocks))

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    def __getitem__(self, index: int) -> Block:
        return self.blocks[index]

    def ids(self) -> list[str]:
        return [b.id for b in self.blocks]

    def index_of(self, block_id: str) -> int:
        for i, block in enumerate(self.blocks):
            if block.id == block_id:
                return i
        raise BlockNotFoundError(f"No block with id '{block_id}'", block_id)

    def find(self, block_id: str) -> Block:
        return self.blocks[self.index_of(block_id)]

    def get(self, block_id: str) -> Block | None:
        return next((b for b in self.blocks if b.id == block_id), None)

    # * New document w/ the block of the same id swapped for `block`
    def replace_block(self, block: Block) -> "Document":
        index = self.index_of(block.id)
        blocks = self.blocks[:index] + (block,) + self.blocks[index + 1 :]
        return replace(self, blocks=blocks)

    def of_kind(self, kind: BlockKind) -> list[Block]:
        return [b for b in self.blocks if b.kind is kind]

    def to_dict(self) -> dict[str, Any]:
        return {"blocks": [b.to_dict() for b in self.blocks]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Document":
        return cls(tuple(block_from_dict(b) for b in data.get("blocks", [])))
