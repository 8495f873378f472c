import io

import pytest

from cisfun.parser import ParsedCommand, count_words, parse_cmd, read_command


def test_count_words_ignores_repeated_spaces():
    assert count_words("  ls   -l  /tmp ") == 3


def test_count_words_empty():
    assert count_words("") == 0


@pytest.mark.parametrize("line", ["ls", "ls -l /tmp", "  echo  a b  c  "])
def test_count_matches_parsed_args(line):
    assert count_words(line) == len(parse_cmd(line).args)


def test_parse_cmd_splits_words():
    assert parse_cmd("ls -l  /tmp") == ParsedCommand("ls", ["ls", "-l", "/tmp"])


def test_parse_cmd_only_splits_on_spaces():
    parsed = parse_cmd("a\tb")
    assert parsed.name == "a\tb"
    assert parsed.args == ["a\tb"]


@pytest.mark.parametrize("line", ["", "    ", "# a comment", "  #ls -l"])
def test_parse_cmd_no_command(line):
    assert parse_cmd(line) is None


def test_read_command_sequence():
    stream = io.StringIO("ls -l\n\nlast")
    assert read_command(stream) == "ls -l"
    assert read_command(stream) == ""
    assert read_command(stream) == "last"
    assert read_command(stream) is None


def test_read_command_ctrl_d():
    assert read_command(io.StringIO("\x04ls\n")) is None