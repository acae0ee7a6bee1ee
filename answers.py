"""Answer key parsing: turn answer records into sets of choice indices."""

import re
from typing import FrozenSet, List, Sequence

# "**A12:** (a) (c)" or "A12. (B)" at the start of a line
ANSWER_LINE_RE = re.compile(r"^(?:\*\*)?A\d+[:.].*$", re.MULTILINE)
CHOICE_RE = re.compile(r"\(([a-zA-Z])\)")


def letter_to_index(letter: str) -> int:
    return ord(letter.lower()) - ord("a")


def index_to_letter(index: int) -> str:
    return chr(ord("a") + index)


def format_choices(choices: FrozenSet[int]) -> str:
    """Render a choice set as sorted letters, e.g. {2, 0} -> 'a,c'."""
    return ",".join(index_to_letter(i) for i in sorted(choices))


def parse_answer_record(record: str) -> FrozenSet[int]:
    """Parse one answer record into zero-based choice indices.

    "(a) (c)" on the answer line gives {0, 2}. A record without an answer
    line, or whose answer line holds no parenthesised letters, gives an
    empty set; callers detect those with find_unwinnable().
    """
    match = ANSWER_LINE_RE.search(record)
    if not match:
        return frozenset()
    return frozenset(letter_to_index(letter) for letter in CHOICE_RE.findall(match.group(0)))


def find_unwinnable(answer_key: Sequence[FrozenSet[int]]) -> List[int]:
    """Indices whose correct-answer set is empty (no input can match)."""
    return [i for i, correct in enumerate(answer_key) if not correct]
