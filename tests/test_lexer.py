import pytest

from hsh.lexer import split_line


def test_splits_on_spaces_and_strips_newline():
    assert split_line("ls -l /tmp\n") == ["ls", "-l", "/tmp"]


def test_tabs_and_runs_of_separators():
    assert split_line("\t echo  \t hello\t\tworld \n") == ["echo", "hello", "world"]


@pytest.mark.parametrize("line", ["", "\n", "   ", " \t \n"])
def test_blank_lines_give_no_words(line):
    assert split_line(line) == []


def test_other_whitespace_is_not_a_separator():
    assert split_line("a\rb c\n") == ["a\rb", "c"]


@pytest.mark.parametrize("words", [["a"], ["echo", "x", "y"], ["/bin/ls", "-la"]])
def test_join_then_split_round_trip(words):
    assert split_line(" ".join(words) + "\n") == words