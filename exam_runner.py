"""Exam session orchestration: intro, question loop, and final report."""

import logging
import threading
from typing import Optional

import scoring
from answers import format_choices
from commands import COMMAND_REFERENCE, Command, CommandType, interpret, is_confirmation
from config import ExamConfig
from display import Screen
from line_reader import LineReader, TimeExpired
from models import ExamOutcome, FinishReason, QuestionBank
from session import ExamSession
from timer import Timer

logger = logging.getLogger("exam.runner")

ANSWER_PROMPT = "Write your answers separated by commas:"
CONFIRM_PROMPT = "Are you sure you want to finish the exam? (Enter `yes` to exit)"
START_PROMPT = "To start the test enter `y`:"
CONTINUE_PROMPT = "Press enter to continue"
INVALID_ANSWER_NOTICE = (
    "Answers are single letters separated by commas, e.g. `a,c`. Type `help` for commands."
)


class ExamRunner:
    def __init__(
        self,
        bank: QuestionBank,
        exam_config: ExamConfig,
        reader: LineReader,
        screen: Optional[Screen] = None,
        timer: Optional[Timer] = None,
        howto: str = "",
    ):
        exam_config.check_bank_size(bank.size)
        self.bank = bank
        self.exam_config = exam_config
        self.reader = reader
        self.screen = screen if screen is not None else Screen()
        self.timer = timer
        self.howto = howto
        self._notice: Optional[str] = None

    @property
    def _cancel(self) -> Optional[threading.Event]:
        return self.timer.time_up if self.timer else None

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def run(self) -> ExamOutcome:
        """Run the exam to completion and render the report."""
        session = ExamSession(
            self.bank.answer_key,
            self.exam_config.start_index,
            self.exam_config.end_index,
        )

        if not self._show_intro():
            return self._finish(FinishReason.DECLINED, None)

        if self.timer:
            self.timer.start()
        try:
            reason = self._run_questions(session)
        finally:
            if self.timer:
                self.timer.stop()

        return self._finish(reason, session)

    def _finish(self, reason: FinishReason, session: Optional[ExamSession]) -> ExamOutcome:
        report = None
        if session is not None:
            report = scoring.summarize(session.results, self.bank.size)

        if report:
            logger.info(
                "Exam finished (%s): %d/%d correct, %d answered",
                reason.value, report.correct_count, report.total_questions,
                report.answered_count,
            )
        else:
            logger.info("Exam finished (%s) with no answers", reason.value)

        self.screen.clear()
        self.screen.show_report(report, reason)
        return ExamOutcome(reason=reason, session=session, report=report)

    # ------------------------------------------------------------------
    # Intro
    # ------------------------------------------------------------------

    def _show_intro(self) -> bool:
        """First presentation of the howto; the user must type 'y' to start."""
        self.screen.clear()
        self.screen.render(self.howto)
        if self.bank.unwinnable:
            self.screen.show_warning(
                "These questions have no readable answer and can't be scored as correct: "
                + ", ".join(str(i + 1) for i in self.bank.unwinnable)
            )
        self.screen.prompt(START_PROMPT)
        try:
            answer = self.reader.read_line()
        except (EOFError, KeyboardInterrupt):
            return False
        return answer.strip().lower() == "y"

    def _show_howto(self) -> None:
        self.screen.clear()
        self.screen.render(self.howto)
        self._wait_for_enter()

    def _wait_for_enter(self) -> None:
        self.screen.prompt(CONTINUE_PROMPT)
        self.reader.read_line(self._cancel)

    # ------------------------------------------------------------------
    # Core question loop
    # ------------------------------------------------------------------

    def _run_questions(self, session: ExamSession) -> FinishReason:
        while not session.is_exhausted:
            try:
                reason = self._handle_input(session)
            except TimeExpired:
                return FinishReason.TIMEOUT
            except EOFError:
                return FinishReason.INPUT_CLOSED
            if reason is not None:
                return reason
        return FinishReason.COMPLETED

    def _show_question(self, session: ExamSession) -> None:
        index = session.current_index
        previous = session.previous_answer_for(index)

        self.screen.clear()
        self.screen.show_question(
            index + 1,
            session.end_index,
            self.bank.questions[index],
            previous_answer=format_choices(previous) if previous is not None else None,
            time_remaining=self.timer.get_remaining() if self.timer else None,
            notice=self._notice,
        )
        self._notice = None

    def _handle_input(self, session: ExamSession) -> Optional[FinishReason]:
        """Show the question, then read one command and apply it.

        Returns a reason when the exam ends. Ctrl-C anywhere in between
        goes through the quit confirmation.
        """
        try:
            self._show_question(session)
            self.screen.prompt(ANSWER_PROMPT)
            return self._apply(session, interpret(self.reader.read_line(self._cancel)))
        except KeyboardInterrupt:
            return self._apply(session, Command(CommandType.QUIT, raw="^C"))

    def _apply(self, session: ExamSession, command: Command) -> Optional[FinishReason]:
        if command.type is CommandType.QUIT:
            if self._confirm_quit():
                return FinishReason.QUIT

        elif command.type is CommandType.NEXT:
            session.advance()

        elif command.type is CommandType.PREV:
            session.retreat()

        elif command.type is CommandType.JUMP:
            if not session.jump(command.target):
                logger.debug("Rejected jump to question %s", command.target)

        elif command.type is CommandType.HELP:
            self.screen.render(COMMAND_REFERENCE)
            self._wait_for_enter()

        elif command.type is CommandType.HOWTO:
            self._show_howto()

        elif command.type is CommandType.ANSWER:
            session.record_answer(session.current_index, command.choices)
            session.advance()

        elif command.type is CommandType.INVALID:
            logger.debug("Invalid answer input: %r", command.raw)
            self._notice = INVALID_ANSWER_NOTICE

        return None

    def _confirm_quit(self) -> bool:
        self.screen.render(f"**{CONFIRM_PROMPT}**")
        try:
            return is_confirmation(self.reader.read_line(self._cancel))
        except KeyboardInterrupt:
            # a second Ctrl-C confirms
            return True
