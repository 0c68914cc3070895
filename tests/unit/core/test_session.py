# tests/unit/core/test_session.py
# Unit tests for MemoSession: edits, undo & publishing canonical text

import pytest

from auditmemo.core.exceptions import BlockNotFoundError, BlockShapeError
from auditmemo.core.history import HistoryStack
from auditmemo.core.parser import parse
from auditmemo.core.session import MemoSession


@pytest.fixture
def published():
    return []


@pytest.fixture
def session(sample_memo_text, published):
    return MemoSession(sample_memo_text, on_update=published.append)


class TestMemoSession:
    def test_initial_document(self, session, sample_memo_text):
        assert session.markdown == sample_memo_text
        assert session.history.position == 0

    def test_edit_publishes_canonical_text(self, session, published):
        text = session.update_table_cell("b7", 1, 2, "Fail")
        assert published == [text]
        assert "| B | Timely review | Fail | Late by 2 days | WP-2 |" in text

    def test_each_edit_records_history(self, session):
        session.update_paragraph("b3", "one")
        session.update_header("b1", "Overview")
        session.update_list("b4", "- x")
        assert session.history.position == 3

    def test_undo_publishes_previous_text(self, session, published, sample_memo_text):
        session.update_paragraph("b3", "Changed")
        assert session.undo() == sample_memo_text
        assert published[-1] == sample_memo_text

    def test_undo_at_start_publishes_nothing(self, session, published):
        assert session.undo() is None
        assert published == []

    def test_failed_edit_leaves_history(self, session, published):
        with pytest.raises(BlockNotFoundError):
            session.update_paragraph("b42", "x")
        assert session.history.position == 0
        assert published == []

    # * Test text that would change the block's kind is refused before recording
    @pytest.mark.parametrize("text", ["", "- a list now", "# a header now", "---"])
    def test_unstable_text_not_recorded(self, session, published, text):
        with pytest.raises(BlockShapeError):
            session.update_paragraph("b3", text)
        assert len(session.history) == 1
        assert published == []

    # * Test a fresh parse of every published text numbers blocks like the session does
    def test_published_text_keeps_block_ids(self, session, published):
        session.update_paragraph("b3", "Rewritten")
        session.update_header("b6", "Revised Sheet")
        session.update_list("b4", "only item")
        session.update_table_cell("b7", 0, 2, "N/A")

        for text in published:
            reparsed = parse(text)
            assert reparsed.ids() == session.document.ids()
            assert [b.kind for b in reparsed] == [b.kind for b in session.document]
        assert parse(published[-1]) == session.document

    def test_without_callback(self, sample_memo_text):
        session = MemoSession(sample_memo_text)
        assert "New words" in session.update_paragraph("b3", "New words")

    def test_history_limit_passed_through(self, sample_memo_text):
        session = MemoSession(sample_memo_text, history_limit=2)
        session.update_paragraph("b3", "a")
        session.update_paragraph("b3", "b")
        assert len(session.history) == 2


class TestMatches:
    def test_matches_current_markdown(self, session):
        text = session.update_paragraph("b3", "Changed")
        assert session.matches(text)

    def test_non_canonical_source_matches_before_edits(self):
        session = MemoSession("# T\nbody")
        assert session.markdown == "# T\n\nbody"
        assert session.matches("# T\nbody")

    def test_source_no_longer_matches_after_edit(self):
        session = MemoSession("# T\nbody")
        session.update_paragraph("b2", "other")
        assert not session.matches("# T\nbody")

    def test_other_text_does_not_match(self, session):
        assert not session.matches("# Something else")


class TestRestore:
    def test_restore_keeps_position(self, session, sample_memo_text):
        session.update_paragraph("b3", "a")
        session.update_paragraph("b3", "b")
        session.undo()

        history = HistoryStack.from_dict(session.history.to_dict())
        restored = MemoSession.restore(sample_memo_text, history)
        assert restored.markdown == session.markdown
        assert restored.undo() == sample_memo_text
