import pytest
from opath import match


@pytest.mark.parametrize(
    "pattern, text, expected",
    [
        ("*.txt", "file.txt", True),
        ("*.txt", "file.log", False),
        ("test?.txt", "test1.txt", True),
        ("test?.txt", "test12.txt", False),
        ("*", "anything", True),
        ("*", "", True),
        ("", "", True),
        ("", "a", False),
        ("abc", "abc", True),
        ("abc", "abcd", False),
        ("abcd", "abc", False),
        ("?", "", False),
        ("a*", "a", True),
        ("a**", "a", True),
        ("*a", "", False),
        ("a*b", "ab", True),
        ("a*b", "axxxb", True),
        ("a*b", "axxxbc", False),
        ("*.tar.gz", "archive.tar.gz", True),
        ("*a*b*c*", "xxaxxbxxcxx", True),
        ("*a*b*c*", "xxaxxcxxbxx", False),
        ("???", "abc", True),
        ("???", "ab", False),
    ],
)
def test_match_table(pattern, text, expected):
    assert match(pattern, text) is expected


def test_star_backtracks_past_first_candidate():
    # first "." is not the one that lets the rest match
    assert match("*.gz", "a.tar.gz")


def test_literal_comparison_is_case_sensitive():
    assert not match("*.TXT", "file.txt")


def test_no_character_classes():
    assert match("[ab].txt", "[ab].txt")
    assert not match("[ab].txt", "a.txt")


def test_no_escaping():
    assert match("\\*", "\\anything")
