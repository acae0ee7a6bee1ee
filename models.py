from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, FrozenSet, List, Optional, Tuple

if TYPE_CHECKING:
    from session import ExamSession


class FinishReason(str, Enum):
    COMPLETED = "completed"        # reached the end of the window
    QUIT = "quit"                  # user confirmed exit/stop/finish
    TIMEOUT = "timeout"            # exam timer ran out
    DECLINED = "declined"          # did not start from the intro screen
    INPUT_CLOSED = "input_closed"  # stdin reached end of file


FINISH_MESSAGES = {
    FinishReason.COMPLETED: "You've reached the last question of the exam.",
    FinishReason.QUIT: "You've finished the exam.",
    FinishReason.TIMEOUT: "Time for the exam has run out.",
    FinishReason.DECLINED: "The exam was not started.",
    FinishReason.INPUT_CLOSED: "Input was closed, the exam has ended.",
}


@dataclass(frozen=True)
class QuestionBank:
    kind: str = ""
    language: str = "en"
    questions: Tuple[str, ...] = ()
    answer_key: Tuple[FrozenSet[int], ...] = ()
    unwinnable: Tuple[int, ...] = ()  # indices whose answer record had no choices

    @property
    def size(self) -> int:
        return len(self.questions)


@dataclass
class ExamReport:
    """Aggregated scores for a finished exam."""
    total_questions: int = 0
    answered_count: int = 0
    correct_count: int = 0
    incorrect_indices: List[int] = field(default_factory=list)
    percent_correct: float = 0.0
    passed: bool = False

    @property
    def verdict(self) -> str:
        return "pass" if self.passed else "fail"

    @property
    def missed_question_numbers(self) -> List[int]:
        return [i + 1 for i in self.incorrect_indices]


@dataclass
class ExamOutcome:
    reason: FinishReason
    session: Optional["ExamSession"] = None  # None if the exam never started
    report: Optional[ExamReport] = None
