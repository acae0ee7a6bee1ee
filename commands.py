"""Classification of a raw input line into an exam command."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional

from answers import letter_to_index


class CommandType(str, Enum):
    NEXT = "next"
    PREV = "prev"
    REPEAT = "repeat"
    JUMP = "jump"
    HELP = "help"
    HOWTO = "howto"
    QUIT = "quit"
    ANSWER = "answer"
    INVALID = "invalid"


@dataclass(frozen=True)
class Command:
    type: CommandType
    target: Optional[int] = None                  # JUMP: one-based question number
    choices: FrozenSet[int] = frozenset()         # ANSWER: choice indices
    raw: str = ""


# Checked in order; the first match wins.
_PATTERNS = (
    (re.compile(r"exit", re.IGNORECASE), CommandType.QUIT),
    (re.compile(r"^(?:n|next|continue)$", re.IGNORECASE), CommandType.NEXT),
    (re.compile(r"^(?:p|previous|prev$)", re.IGNORECASE), CommandType.PREV),
    (re.compile(r"^goto (\d+)$", re.IGNORECASE), CommandType.JUMP),
    (re.compile(r"^(?:stop|finish|end$)", re.IGNORECASE), CommandType.QUIT),
    (re.compile(r"^(?:help|h)$", re.IGNORECASE), CommandType.HELP),
    (re.compile(r"^howto$", re.IGNORECASE), CommandType.HOWTO),
)

_CONFIRM_RE = re.compile(r"^(?:yes|y)$", re.IGNORECASE)
_LETTER_RE = re.compile(r"^[a-zA-Z]$")

COMMAND_REFERENCE = """\
# Available commands
- `howto` - print the text that was printed at start (doesn't restart the exam)
- `n` or `next` or `continue` - go to the next question in order
- `p` or `prev` or `previous` - go to the previous question in order
- `goto N` - go to question number N
- `stop` or `finish` or `end` or `exit` - finish the exam and print your results
- `h` or `help` - print this text

Answer with letters separated by commas, e.g. `a,c`.
"""


def interpret(line: str) -> Command:
    text = line.strip()
    for pattern, command_type in _PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        if command_type is CommandType.JUMP:
            return Command(CommandType.JUMP, target=int(match.group(1)), raw=text)
        return Command(command_type, raw=text)

    if not text:
        return Command(CommandType.REPEAT, raw=text)
    return parse_answer(text)


def parse_answer(text: str) -> Command:
    """Comma-separated letters become an ANSWER; anything else is INVALID."""
    tokens = [token.strip() for token in text.split(",")]
    if not all(_LETTER_RE.match(token) for token in tokens):
        return Command(CommandType.INVALID, raw=text)
    return Command(
        CommandType.ANSWER,
        choices=frozenset(letter_to_index(token) for token in tokens),
        raw=text,
    )


def is_confirmation(line: str) -> bool:
    return bool(_CONFIRM_RE.match(line.strip()))
