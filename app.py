#!/usr/bin/env python3
"""Terminal exam runner: main entry point."""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

import config
from bank import BankLoadError, load_bank, read_document
from config import ConfigurationError, ExamConfig
from display import Screen
from exam_runner import ExamRunner
from line_reader import LineReader
from timer import Timer

logger = logging.getLogger("exam.app")


def setup_logging(level: str = config.LOG_LEVEL, log_file: str = config.LOG_FILE) -> None:
    """Log to a file when one is configured, otherwise to stderr through rich."""
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(level=level, handlers=[handler], force=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exam-runner",
        description="Take a timed multiple-choice practice exam in the terminal.",
    )
    parser.add_argument(
        "kind", nargs="?", default=config.DEFAULT_KIND,
        help="question bank to use (e.g. silver, gold), or 'help'",
    )
    parser.add_argument(
        "language", nargs="?", default=config.DEFAULT_LANGUAGE,
        help="language of the bank (e.g. en, ja)",
    )
    parser.add_argument("--start", type=int, default=1, help="first question number")
    parser.add_argument("--end", type=int, default=None, help="last question number")
    parser.add_argument(
        "--minutes", type=int, default=config.EXAM_DURATION_MINUTES,
        help="time limit in minutes",
    )
    parser.add_argument("--no-timer", action="store_true", help="disable the time limit")
    return parser


def show_help_document(screen: Screen) -> int:
    try:
        screen.render(read_document(config.HELP_FILENAME))
    except BankLoadError as e:
        screen.show_error(str(e))
        return 1
    return 0


def main(argv: Optional[List[str]] = None, reader: Optional[LineReader] = None,
         screen: Optional[Screen] = None) -> int:
    """Entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    setup_logging()
    screen = screen or Screen()

    if args.kind.lower() == "help":
        return show_help_document(screen)

    try:
        bank = load_bank(args.kind, args.language)
        end_position = args.end if args.end is not None else min(bank.size, config.QUESTION_BANK_SIZE)
        exam_config = ExamConfig(
            kind=args.kind,
            language=args.language,
            start_position=args.start,
            end_position=end_position,
        )
        exam_config.check_bank_size(bank.size)
        howto = read_document(config.HOWTO_FILENAME)
    except ConfigurationError as e:
        screen.show_error(str(e))
        return 2
    except BankLoadError as e:
        screen.show_error(str(e))
        return 1

    timer = None
    if config.TIMER_ENABLED and not args.no_timer:
        timer = Timer(
            args.minutes * 60,
            on_warning=lambda seconds: screen.show_warning(
                f"{seconds // 60} minute(s) left for the exam."
            ),
        )

    runner = ExamRunner(
        bank,
        exam_config,
        reader or LineReader(),
        screen=screen,
        timer=timer,
        howto=howto,
    )
    outcome = runner.run()
    logger.debug("Exam ended with reason %s", outcome.reason.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
