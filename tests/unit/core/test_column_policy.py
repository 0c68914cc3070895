# tests/unit/core/test_column_policy.py
# Unit tests for table classification, column editability & cell choices

import pytest

from auditmemo.core.column_policy import (
    CONCLUSION_CHOICES,
    TICKMARK_CHOICES,
    CellKind,
    ChoiceKind,
    TableShape,
    cell_choices,
    cell_policy,
    classify_table,
    editable_columns,
    is_column_editable,
    strip_emphasis,
)

SECTION_HEADERS = ["Section", "Content"]
SHEET_HEADERS = [
    "Test Attribute",
    "Test Attribute Description",
    "Tickmark",
    "Testing Notes",
    "Reference",
]


class TestClassifyTable:
    @pytest.mark.parametrize(
        "headers, shape",
        [
            (["Section", "Content"], TableShape.SECTION_CONTENT),
            (["SECTION", "content", "Extra"], TableShape.SECTION_CONTENT),
            (SHEET_HEADERS, TableShape.TEST_SHEET),
            (["Step", "Tickmark"], TableShape.TEST_SHEET),
            (["Name", "Value"], TableShape.GENERIC),
            ([], TableShape.GENERIC),
        ],
    )
    def test_shapes(self, headers, shape):
        assert classify_table(headers) is shape

    def test_section_content_checked_before_test_sheet(self):
        assert classify_table(["Section", "Content", "Tickmark"]) is TableShape.SECTION_CONTENT

    def test_section_requires_exact_header(self):
        # "Sections" is not "section"
        assert classify_table(["Sections", "Content"]) is TableShape.GENERIC


class TestEditability:
    def test_section_content_only_content_editable(self):
        assert editable_columns(SECTION_HEADERS) == [False, True]

    def test_test_sheet_columns(self):
        assert editable_columns(SHEET_HEADERS) == [False, False, True, True, True]

    def test_generic_all_editable(self):
        assert editable_columns(["A", "B", "C"]) == [True, True, True]

    def test_out_of_range_column_in_shaped_table(self):
        assert is_column_editable(SECTION_HEADERS, 5) is False
        assert is_column_editable(SHEET_HEADERS, -1) is False

    def test_out_of_range_column_in_generic_table(self):
        assert is_column_editable(["A"], 3) is True


class TestStripEmphasis:
    @pytest.mark.parametrize(
        "raw, clean",
        [("**Pass**", "Pass"), ("  Fail ", "Fail"), ("**N/A", "N/A"), ("", "")],
    )
    def test_strip(self, raw, clean):
        assert strip_emphasis(raw) == clean


class TestCellChoices:
    def test_tickmark_bold_value_recognized(self):
        choices = cell_choices(SHEET_HEADERS, ["A", "d", "**Pass**", "", ""], 2)
        assert choices.kind is ChoiceKind.TICKMARK
        assert choices.value == "Pass"
        assert choices.options == TICKMARK_CHOICES

    def test_tickmark_unknown_value_prepended(self):
        choices = cell_choices(SHEET_HEADERS, ["B", "d", "Exception noted", "", ""], 2)
        assert choices.value == "Exception noted"
        assert choices.options == ("Exception noted",) + TICKMARK_CHOICES

    def test_tickmark_empty_cell(self):
        choices = cell_choices(SHEET_HEADERS, ["C", "d"], 2)
        assert choices.value == ""
        assert choices.options == TICKMARK_CHOICES

    def test_conclusion_row(self):
        row = ["**Conclusion Summary**", "Effective"]
        choices = cell_choices(SECTION_HEADERS, row, 1)
        assert choices.kind is ChoiceKind.CONCLUSION
        assert choices.options == CONCLUSION_CHOICES
        assert choices.value == "Effective"

    def test_conclusion_unknown_value_has_no_fallback(self):
        choices = cell_choices(SECTION_HEADERS, ["Conclusion Summary", "Mostly ok"], 1)
        assert choices.value == "Mostly ok"
        assert choices.options == CONCLUSION_CHOICES

    def test_plain_content_row_is_free_text(self):
        assert cell_choices(SECTION_HEADERS, ["Control Name", "FIN-001"], 1) is None

    def test_readonly_column_has_no_choices(self):
        assert cell_choices(SHEET_HEADERS, ["A", "d", "Pass", "", ""], 0) is None

    def test_generic_table_content_header_conclusion(self):
        # content header outside a section/content table still drives choices
        choices = cell_choices(["Item", "Content"], ["Conclusion Summary", ""], 1)
        assert choices.kind is ChoiceKind.CONCLUSION


class TestCellPolicy:
    def test_readonly(self):
        policy = cell_policy(SECTION_HEADERS, ["Control Name", "x"], 0)
        assert policy.kind is CellKind.READONLY
        assert policy.editable is False

    def test_text(self):
        policy = cell_policy(SHEET_HEADERS, ["A", "d", "Pass", "note", "WP"], 3)
        assert policy.kind is CellKind.TEXT
        assert policy.choices is None

    def test_choice(self):
        policy = cell_policy(SHEET_HEADERS, ["A", "d", "Fail", "", ""], 2)
        assert policy.kind is CellKind.CHOICE
        assert policy.choices.accepts("N/A")
        assert not policy.choices.accepts("Maybe")

    def test_policy_depends_on_headers_not_cells(self, sample_doc):
        sheet = sample_doc.blocks[6]
        kinds = {
            cell_policy(sheet.headers, sheet.padded_row(r), 1).kind
            for r in range(len(sheet.rows))
        }
        assert kinds == {CellKind.READONLY}
