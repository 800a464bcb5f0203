"""End-to-end tests for the text-table pipeline (lines in, rendered lines out)."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from flattab.errors import UnknownColumn
from flattab.justified import pipeline
from flattab.justified.policy import DelimiterPolicy, TableOptions, WhitespaceMode

SIMPLE = ["A   B", "1   22"]

PEOPLE = [
    "Name        Age",
    "John Smith  42",
    "Jane Doe    37",
]

BOXED = [
    "+------+-----+",
    "| Name | Age |",
    "+------+-----+",
    "| Ann  | 31  |",
    "+------+-----+",
]


def convert(lines: list[str], **kwargs) -> list[str]:
    """Run the pipeline and collect its output lines."""
    return list(pipeline.run(lines, TableOptions(**kwargs)))


class TestHeaderMode:

    def test_header_and_one_data_row(self):
        assert convert(SIMPLE, header=True) == ["A,B\n", "1,22\n"]

    def test_select_by_name(self):
        assert convert(SIMPLE, header=True, columns=["B"]) == ["B\n", "22\n"]

    def test_select_ignore_case_reorders(self):
        assert convert(SIMPLE, header=True, columns=["b", "a"], ignore_case=True) == ["B,A\n", "22,1\n"]

    def test_unknown_column_raised_before_output(self):
        with pytest.raises(UnknownColumn):
            pipeline.run(SIMPLE, TableOptions(header=True, columns=["Z"]))

    def test_leading_blank_lines_skipped_for_header(self):
        assert convert(["", "A   B", "1   22"], header=True) == ["A,B\n", "1,22\n"]

    def test_header_only_input(self):
        assert convert(["A   B"], header=True) == ["A,B\n"]


class TestPositionalMode:

    def test_every_line_is_data(self):
        assert convert(SIMPLE) == ["A,B\n", "1,22\n"]

    def test_select_by_index(self):
        assert convert(SIMPLE, columns=["1"]) == ["B\n", "22\n"]

    def test_header_name_not_usable_without_header(self):
        with pytest.raises(UnknownColumn):
            pipeline.run(SIMPLE, TableOptions(columns=["A"]))

    def test_blank_line_in_middle_emits_empty_fields(self):
        assert convert(["a b", "", "c d"]) == ["a,b\n", ",\n", "c,d\n"]

    def test_line_endings_stripped(self):
        assert convert(["A   B\n", "1   22\r\n"]) == ["A,B\n", "1,22\n"]

    def test_short_line_gives_empty_field(self):
        assert convert(["aa bb cc", "x"]) == ["aa,bb,cc\n", "x,,\n"]


class TestInferenceModes:

    def test_double_whitespace_keeps_names_whole(self):
        policy = DelimiterPolicy(whitespace=WhitespaceMode.DOUBLE)
        assert convert(PEOPLE, policy=policy, header=True) == ["Name,Age\n", "John Smith,42\n", "Jane Doe,37\n"]

    def test_border_table(self):
        policy = DelimiterPolicy(borders=True)
        assert convert(BOXED, policy=policy, header=True) == ["Name,Age\n", "Ann,31\n"]

    def test_border_table_keeps_hyphenated_values(self):
        lines = ["| Date       | X |", "| 2020-01-02 | 1 |", "| 2021-03-04 | 2 |"]
        expected = ["Date,X\n", "2020-01-02,1\n", "2021-03-04,2\n"]
        assert convert(lines, policy=DelimiterPolicy(borders=True), header=True) == expected

    def test_border_table_keeps_placeholder_row(self):
        lines = ["| A | B |", "| 1 | 2 |", "| - | - |"]
        expected = ["A,B\n", "1,2\n", "-,-\n"]
        assert convert(lines, policy=DelimiterPolicy(borders=True), header=True) == expected

    def test_extra_delimiters(self):
        policy = DelimiterPolicy(delimiters=":")
        assert convert(["root:x:0", "bins:y:1"], policy=policy) == ["root,x,0\n", "bins,y,1\n"]

    def test_header_only_inference(self):
        lines = ["ID  NAME", "1   alpha beta", "22  gamma"]
        expected = ["ID,NAME\n", "1,alpha beta\n", "22,gamma\n"]
        assert convert(lines, header=True, header_only=True) == expected


class TestOutputSeparators:

    def test_control_characters(self):
        policy = DelimiterPolicy(unit_separator=True, record_separator=True)
        assert convert(SIMPLE, policy=policy) == ["A\x1fB\x1e", "1\x1f22\x1e"]

    def test_explicit_separators(self):
        policy = DelimiterPolicy(output_delimiter="\t", line_delimiter="\r\n")
        assert convert(SIMPLE, policy=policy) == ["A\tB\r\n", "1\t22\r\n"]


class TestEmptyResults:

    def test_empty_input(self):
        assert convert([]) == []

    def test_only_blank_lines(self):
        assert convert(["", "   "], header=True) == []

    def test_zero_spans_ignores_requested_columns(self):
        assert convert(["   "], columns=["missing"]) == []
