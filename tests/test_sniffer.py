import pytest

from datasift.ingest.sniffer import DelimiterProfile, detect_delimiter, profile_delimiters
from datasift.schema import Delimiter


def test_tab_wins_when_it_outnumbers_spaces():
    assert detect_delimiter("a\tb\tc\n1\t2\t3") is Delimiter.TAB


def test_comma_wins_when_it_outnumbers_spaces_and_tabs():
    assert detect_delimiter("Year,Value\n1880,-0.12") is Delimiter.COMMA


def test_space_is_the_fallback():
    assert detect_delimiter("") is Delimiter.SPACE
    assert detect_delimiter("1 2 3\n4 5 6") is Delimiter.SPACE


def test_ties_fall_back_to_space():
    # tab == space, no commas
    assert detect_delimiter("a\tb c") is Delimiter.SPACE
    # comma == space
    assert detect_delimiter("a, b") is Delimiter.SPACE


def test_tab_beats_comma_when_tabs_outnumber_spaces():
    assert detect_delimiter("a\tb,c,d,e") is Delimiter.TAB


def test_profile_counts_whole_input():
    profile = profile_delimiters("a b\tc,d\ne f")
    assert profile == DelimiterProfile(space=2, tab=1, comma=1)


@pytest.mark.parametrize(
    "text_a,text_b",
    [
        ("1,2,3 x", "x 1,,23"),
        ("\t\ta b", "a\tb \t"),
        ("a b c", "abc  "),
    ],
)
def test_detection_depends_only_on_counts(text_a, text_b):
    assert profile_delimiters(text_a) == profile_delimiters(text_b)
    assert detect_delimiter(text_a) is detect_delimiter(text_b)
