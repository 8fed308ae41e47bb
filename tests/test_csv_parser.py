import pytest

from csv_parser import Table, parse


def test_parse_ragged_rows():
    table = parse("a,b,c\nd,e\n")
    assert table.rows == (("a", "b", "c"), ("d", "e"))
    assert table.column_count == 3
    assert table.row_count == 2


def test_empty_string_gives_empty_table():
    table = parse("")
    assert table.rows == ()
    assert table.column_count == 0


@pytest.mark.parametrize("text, expected_rows", [
    ("a,b\n\n", 1),
    ("\n\n\n", 0),
    ("a\n\nb\n\n\nc", 3),
    ("x,y", 1),
])
def test_blank_lines_are_dropped(text, expected_rows):
    assert parse(text).row_count == expected_rows


def test_empty_fields_are_kept():
    table = parse("a,,c")
    assert table.rows == (("a", "", "c"),)


def test_fields_are_not_trimmed_or_unquoted():
    table = parse(' a , "b,c"\r\n')
    assert table.rows == ((" a ", ' "b', 'c"\r'),)
    assert table.column_count == 3


def test_comma_only_line():
    table = parse(",\n")
    assert table.rows == (("", ""),)
    assert table.column_count == 2


def test_column_count_is_longest_row():
    table = parse("a\nb,c,d,e\nf,g")
    assert table.column_count == max(len(row) for row in table.rows) == 4


def test_table_is_immutable():
    table = parse("a,b")
    with pytest.raises(AttributeError):
        table.rows = ()
