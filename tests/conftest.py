import io

import pytest
from rich.console import Console

from display import Screen, custom_theme
from line_reader import TimeExpired
from models import QuestionBank


class ScriptedReader:
    """Stands in for LineReader: hands out scripted lines, then EOF.

    An exception instance in the script is raised instead of returned, which
    is how tests simulate Ctrl-C (KeyboardInterrupt) or a timeout.
    """

    def __init__(self, lines):
        self.lines = list(lines)
        self.reads = 0

    def read_line(self, cancel=None):
        if cancel is not None and cancel.is_set():
            raise TimeExpired()
        if not self.lines:
            raise EOFError()
        self.reads += 1
        item = self.lines.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


class RecordingScreen(Screen):
    def __init__(self):
        self.buffer = io.StringIO()
        super().__init__(Console(file=self.buffer, width=120, theme=custom_theme))

    @property
    def text(self) -> str:
        return self.buffer.getvalue()


@pytest.fixture
def screen():
    return RecordingScreen()


@pytest.fixture
def scripted_reader():
    return ScriptedReader


@pytest.fixture
def small_bank():
    return QuestionBank(
        kind="silver",
        language="en",
        questions=(
            "**Q1.** Pick the empty array literals.",
            "**Q2.** What does upcase return?",
            "**Q3.** Which keyword defines a method?",
        ),
        answer_key=(frozenset({0, 2}), frozenset({0}), frozenset({1})),
    )


@pytest.fixture
def bank_dir(tmp_path):
    """A data directory with a three-question silver bank and its documents."""
    (tmp_path / "silver.md").write_text(
        "Q1 text\n------------- 2\nQ2 text\n------------- 3\nQ3 text\n", encoding="utf-8"
    )
    (tmp_path / "silver_answers.md").write_text(
        "**A1:** (a) (c)\n------------- 2\n**A2:** (a)\n------------- 3\n**A3:** (b)\n",
        encoding="utf-8",
    )
    (tmp_path / "test_readme.md").write_text("# How to\nAnswer with letters.\n", encoding="utf-8")
    (tmp_path / "test_help.md").write_text("# exam-runner usage\n", encoding="utf-8")
    return tmp_path
