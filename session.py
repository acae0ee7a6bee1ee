"""Exam session state: position within the window and recorded answers."""

from typing import Dict, FrozenSet, Iterable, Optional, Sequence

from config import ConfigurationError


class ExamSession:
    """Position, answers and results for one run through a question window.

    The window is the zero-based half-open range [start_index, end_index).
    current_index only moves through advance(), retreat() and jump(); once
    it reaches end_index the window is exhausted.
    """

    def __init__(
        self,
        answer_key: Sequence[FrozenSet[int]],
        start_index: int,
        end_index: int,
    ):
        if not 0 <= start_index < end_index <= len(answer_key):
            raise ConfigurationError(
                f"Invalid question window [{start_index}, {end_index}) "
                f"for {len(answer_key)} questions."
            )
        self.answer_key = answer_key
        self.start_index = start_index
        self.end_index = end_index
        self.current_index = start_index
        self.user_answers: Dict[int, FrozenSet[int]] = {}
        self.results: Dict[int, bool] = {}

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @property
    def is_exhausted(self) -> bool:
        return self.current_index >= self.end_index

    def advance(self) -> bool:
        """Move to the next question. Returns False at the window boundary."""
        if self.is_exhausted:
            return False
        self.current_index += 1
        return not self.is_exhausted

    def retreat(self) -> None:
        """Go back one question; stays put on the first question."""
        if self.current_index > self.start_index:
            self.current_index -= 1

    def jump(self, question_number: int) -> bool:
        """Go to a one-based question number inside the window."""
        if not self.start_index + 1 <= question_number <= self.end_index:
            return False
        self.current_index = question_number - 1
        return True

    # ------------------------------------------------------------------
    # Answers
    # ------------------------------------------------------------------

    def record_answer(self, index: int, choices: Iterable[int]) -> bool:
        """Store the user's choices for a question and return correctness."""
        if not 0 <= index < len(self.answer_key):
            raise IndexError(f"Question index {index} is out of range")
        choice_set = frozenset(choices)
        self.user_answers[index] = choice_set
        self.results[index] = choice_set == frozenset(self.answer_key[index])
        return self.results[index]

    def previous_answer_for(self, index: int) -> Optional[FrozenSet[int]]:
        return self.user_answers.get(index)
