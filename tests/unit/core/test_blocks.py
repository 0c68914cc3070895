# tests/unit/core/test_blocks.py
# Unit tests for the block model & Document container

import dataclasses

import pytest

from auditmemo.core.blocks import (
    BlockIdFactory,
    BlockKind,
    Document,
    HeaderBlock,
    ListBlock,
    ParagraphBlock,
    SeparatorBlock,
    TableBlock,
    block_from_dict,
)
from auditmemo.core.exceptions import BlockNotFoundError


class TestBlocks:
    def test_blocks_are_frozen(self):
        block = ParagraphBlock("b1", "text")
        with pytest.raises(dataclasses.FrozenInstanceError):
            block.text = "other"

    def test_kind_tags(self):
        assert HeaderBlock("b1", 1, "t").kind is BlockKind.HEADER
        assert SeparatorBlock("b1").kind is BlockKind.SEPARATOR

    def test_empty_list_gets_one_empty_item(self):
        assert ListBlock("b1", ()).items == ("",)

    def test_table_lists_become_tuples(self):
        table = TableBlock("b1", ["A"], [["1"]])
        assert table.headers == ("A",)
        assert table.rows == (("1",),)

    def test_padded_row(self):
        table = TableBlock("b1", ("A", "B", "C"), (("1",), ("1", "2", "3", "4")))
        assert table.padded_row(0) == ("1", "", "")
        assert table.padded_row(1) == ("1", "2", "3", "4")

    @pytest.mark.parametrize(
        "block",
        [
            HeaderBlock("b1", 2, "t"),
            ParagraphBlock("b2", "p"),
            ListBlock("b3", ("a", "")),
            TableBlock("b4", ("A", "B"), (("1",),)),
            SeparatorBlock("b5"),
        ],
    )
    def test_dict_round_trip(self, block):
        assert block_from_dict(block.to_dict()) == block


class TestBlockIdFactory:
    def test_sequence(self):
        factory = BlockIdFactory()
        assert [factory(), factory(), factory()] == ["b1", "b2", "b3"]

    def test_prefix_and_start(self):
        factory = BlockIdFactory(prefix="x", start=10)
        assert factory() == "x10"


class TestDocument:
    def test_sequence_protocol(self, sample_doc):
        assert len(sample_doc) == 7
        assert sample_doc[0].id == "b1"
        assert [b.id for b in sample_doc] == sample_doc.ids()

    def test_find_and_get(self, sample_doc):
        assert sample_doc.find("b3").kind is BlockKind.PARAGRAPH
        assert sample_doc.get("missing") is None
        with pytest.raises(BlockNotFoundError):
            sample_doc.find("missing")

    def test_replace_block_returns_new_document(self, sample_doc):
        updated = sample_doc.replace_block(ParagraphBlock("b3", "new"))
        assert updated is not sample_doc
        assert sample_doc.find("b3").text != "new"
        assert updated.find("b3").text == "new"

    def test_replace_unknown_block(self, sample_doc):
        with pytest.raises(BlockNotFoundError):
            sample_doc.replace_block(ParagraphBlock("b77", "x"))

    def test_of_kind(self, sample_doc):
        assert [b.id for b in sample_doc.of_kind(BlockKind.TABLE)] == ["b2", "b7"]

    def test_dict_round_trip(self, sample_doc):
        assert Document.from_dict(sample_doc.to_dict()) == sample_doc
