import io

import pytest

from spotifind.csvline import (
    MAX_FIELDS,
    MAX_LINE_LENGTH,
    parse_csv_line,
    read_csv_rows,
    split_string,
)


def test_plain_fields():
    assert parse_csv_line("a,b,c", ",") == ["a", "b", "c"]


def test_quoted_field_keeps_separator():
    assert parse_csv_line('"x,y",z', ",") == ["x,y", "z"]


def test_trailing_newline_removed():
    assert parse_csv_line("a,b\n", ",") == ["a", "b"]


def test_text_after_newline_ignored():
    assert parse_csv_line("a\nb,c", ",") == ["a"]


def test_adjacent_separators_collapse_once():
    assert parse_csv_line("a,,b", ",") == ["a", "b"]
    assert parse_csv_line("a,,,b", ",") == ["a", "", "b"]


def test_empty_line_has_no_fields():
    assert parse_csv_line("", ",") == []
    assert parse_csv_line("\n", ",") == []


def test_other_separator():
    assert parse_csv_line("a;b", ";") == ["a", "b"]


def test_field_count_limited():
    line = ",".join(str(i) for i in range(MAX_FIELDS + 100))
    fields = parse_csv_line(line, ",")
    assert len(fields) == MAX_FIELDS - 1
    assert fields[0] == "0"


def test_read_rows_from_stream():
    stream = io.StringIO("h1,h2\n1,2\n")
    assert list(read_csv_rows(stream, ",")) == [["h1", "h2"], ["1", "2"]]


def test_long_line_read_in_pieces():
    stream = io.StringIO("x" * (MAX_LINE_LENGTH + 6) + "\n")
    rows = list(read_csv_rows(stream, ","))
    assert rows[0] == ["x" * (MAX_LINE_LENGTH - 1)]
    assert rows[1] == ["x" * 7]
    assert len(rows) == 2


@pytest.mark.parametrize(
    "text, expected",
    [
        ("A; B ;C", ["A", "B", "C"]),
        (";;A;;", ["A"]),
        ("solo", ["solo"]),
    ],
)
def test_split_string(text, expected):
    assert split_string(text, ";") == expected


def test_split_string_spaces_only_piece_becomes_empty():
    assert split_string("  ;B", ";") == ["", "B"]


def test_split_string_multiple_delimiters():
    assert split_string("a,b;c", ",;") == ["a", "b", "c"]