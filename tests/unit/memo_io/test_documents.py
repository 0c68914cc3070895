# tests/unit/memo_io/test_documents.py
# Unit tests for memo file reading/writing & the generic file helpers

import pytest

from auditmemo.core.exceptions import DocumentReadError, JSONParsingError
from auditmemo.memo_io.documents import read_memo, write_memo
from auditmemo.memo_io.generics import read_json_safe, write_json_safe


# * Test memo reading
class TestReadMemo:

    def test_reads_text(self, memo_file, sample_memo_text):
        assert read_memo(memo_file) == sample_memo_text + "\n"

    # * Test CRLF line endings are normalized
    def test_crlf_normalized(self, tmp_path):
        path = tmp_path / "memo.md"
        path.write_bytes(b"# T\r\n\r\nbody\r\n")
        assert read_memo(path) == "# T\n\nbody\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentReadError, match="not found"):
            read_memo(tmp_path / "absent.md")

    def test_directory(self, tmp_path):
        with pytest.raises(DocumentReadError, match="directory"):
            read_memo(tmp_path)

    # * Test undecodable bytes surface as DocumentReadError
    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "memo.md"
        path.write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(DocumentReadError):
            read_memo(path)


# * Test memo writing
class TestWriteMemo:

    def test_single_trailing_newline(self, tmp_path):
        path = tmp_path / "out" / "memo.md"
        write_memo(path, "# T")
        assert path.read_text(encoding="utf-8") == "# T\n"

    def test_empty_text(self, tmp_path):
        path = tmp_path / "memo.md"
        write_memo(path, "")
        assert path.read_text(encoding="utf-8") == ""


# * Test JSON helpers
class TestJsonHelpers:

    def test_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "data.json"
        write_json_safe({"a": [1, 2]}, path)
        assert read_json_safe(path) == {"a": [1, 2]}

    # * Test invalid JSON reports a numbered snippet
    def test_invalid_json_snippet(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{\n  "a": 1,\n  "b": oops\n}', encoding="utf-8")

        with pytest.raises(JSONParsingError) as exc:
            read_json_safe(path)

        assert ">>>   3:" in str(exc.value)

    def test_non_object_rejected(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(JSONParsingError, match="JSON object"):
            read_json_safe(path)
