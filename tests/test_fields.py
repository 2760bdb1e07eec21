import pytest

from datasift.ingest.fields import parse_float, parse_line, parse_table
from datasift.schema import Delimiter


def test_comma_line_is_split_and_trimmed():
    assert parse_line("1880,-0.12", Delimiter.COMMA) == ("1880", "-0.12")
    assert parse_line(" a , b ", Delimiter.COMMA) == ("a", "b")


def test_quoted_comma_stays_in_one_field():
    assert parse_line('"Smith, J",42', Delimiter.COMMA) == ("Smith, J", "42")


def test_csv_desync_degrades_to_empty_record():
    assert parse_line('1,"2"x', Delimiter.COMMA) == ()


def test_space_runs_count_as_one_separator():
    assert parse_line("1   2  3", Delimiter.SPACE) == ("1", "2", "3")
    assert parse_line("   1 2   ", Delimiter.SPACE) == ("1", "2")


def test_tab_runs_count_as_one_separator():
    assert parse_line("a\t\tb\t c ", Delimiter.TAB) == ("a", "b", "c")


@pytest.mark.parametrize("delimiter", list(Delimiter))
def test_blank_line_gives_empty_record(delimiter):
    assert parse_line("", delimiter) == ()


def test_parse_table_keeps_every_line_in_order():
    table = parse_table("title\n1,2\n\n3,4\n", Delimiter.COMMA)
    assert table == (("title",), ("1", "2"), (), ("3", "4"))


def test_parse_table_handles_crlf():
    table = parse_table("a b\r\n1 2\r\n", Delimiter.SPACE)
    assert table == (("a", "b"), ("1", "2"))


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1.5", 1.5),
        (" -2 ", -2.0),
        ("1e3", 1000.0),
        ("abc", None),
        ("", None),
        ("nan", None),
        ("inf", None),
        ("-Infinity", None),
    ],
)
def test_parse_float(text, expected):
    assert parse_float(text) == expected


def test_parse_table_splits_on_line_feed_only():
    assert parse_table("a b\n1\x0c 2\n", Delimiter.SPACE) == (("a", "b"), ("1", "2"))
    assert parse_table("x,y\u2028z\n", Delimiter.COMMA) == (("x", "y\u2028z"),)


def test_parse_table_keeps_inner_blank_lines():
    assert parse_table("a\n\n", Delimiter.SPACE) == (("a",), ())
    assert parse_table("", Delimiter.SPACE) == ()
