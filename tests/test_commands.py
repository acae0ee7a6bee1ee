import pytest

from commands import CommandType, interpret, is_confirmation


@pytest.mark.parametrize("line,expected", [
    ("exit", CommandType.QUIT),
    ("EXIT", CommandType.QUIT),
    ("please exit now", CommandType.QUIT),
    ("n", CommandType.NEXT),
    ("Next", CommandType.NEXT),
    ("continue", CommandType.NEXT),
    ("  n  ", CommandType.NEXT),
    ("p", CommandType.PREV),
    ("prev", CommandType.PREV),
    ("previous", CommandType.PREV),
    ("pass", CommandType.PREV),
    ("stop", CommandType.QUIT),
    ("finish", CommandType.QUIT),
    ("Finished", CommandType.QUIT),
    ("end", CommandType.QUIT),
    ("help", CommandType.HELP),
    ("H", CommandType.HELP),
    ("howto", CommandType.HOWTO),
    ("", CommandType.REPEAT),
])
def test_classification(line, expected):
    assert interpret(line).type is expected


def test_exit_wins_over_prev_prefix():
    assert interpret("please exit").type is CommandType.QUIT


def test_next_must_be_exact():
    assert interpret("next one").type is CommandType.INVALID


def test_end_must_be_exact():
    assert interpret("ending").type is CommandType.INVALID


def test_goto():
    command = interpret("goto 12")
    assert command.type is CommandType.JUMP
    assert command.target == 12


def test_goto_is_case_insensitive():
    assert interpret("GOTO 3").target == 3


def test_goto_without_number_is_invalid():
    assert interpret("goto x").type is CommandType.INVALID


def test_answer_is_order_independent():
    assert interpret("c,a").choices == interpret("a, c").choices == {0, 2}


def test_answer_duplicates_collapse():
    assert interpret("a,a,B").choices == {0, 1}


@pytest.mark.parametrize("line", ["ab", "a,1", "a,,c", "a c", "?"])
def test_malformed_answer_is_invalid(line):
    command = interpret(line)
    assert command.type is CommandType.INVALID
    assert command.choices == frozenset()


@pytest.mark.parametrize("line,expected", [
    ("y", True),
    ("YES", True),
    (" yes ", True),
    ("n", False),
    ("nay", False),
    ("", False),
])
def test_is_confirmation(line, expected):
    assert is_confirmation(line) is expected
