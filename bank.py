"""Loading question and answer banks from markdown files."""

import logging
import re
from pathlib import Path
from typing import List, Optional

import config
from answers import find_unwinnable, parse_answer_record
from models import QuestionBank

logger = logging.getLogger("exam.bank")

# Blocks are separated by a line starting with 13 dashes
SEPARATOR_RE = re.compile(r"^-------------.*\n", re.MULTILINE)


class BankLoadError(Exception):
    """Raised when a question or answer file is missing or inconsistent."""


def split_blocks(text: str, limit: int = config.QUESTION_BANK_SIZE) -> List[str]:
    blocks = SEPARATOR_RE.split(text)
    # a separator closing the file leaves no block behind it
    while blocks and not blocks[-1]:
        blocks.pop()
    return blocks[:limit]


def bank_path(data_dir: Path, name: str, language: str) -> Path:
    suffix = "" if language == config.DEFAULT_LANGUAGE else f"_{language}"
    return Path(data_dir) / f"{name}{suffix}.md"


def _read_blocks(path: Path) -> List[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise BankLoadError(f"Bank file not found: {path}")
    return split_blocks(text)


def load_bank(kind: str, language: str, data_dir: Optional[Path] = None) -> QuestionBank:
    """Load the question bank for an exam kind and language."""
    data_dir = Path(data_dir) if data_dir is not None else config.DATA_DIR

    questions = _read_blocks(bank_path(data_dir, kind, language))
    records = _read_blocks(bank_path(data_dir, f"{kind}_answers", language))

    if len(questions) != len(records):
        raise BankLoadError(
            f"{kind} bank has {len(questions)} questions but {len(records)} answers"
        )

    answer_key = [parse_answer_record(record) for record in records]
    unwinnable = find_unwinnable(answer_key)
    if unwinnable:
        logger.warning(
            "%s/%s: no parsable answer for questions %s",
            kind, language, ", ".join(str(i + 1) for i in unwinnable),
        )

    logger.info("Loaded %d questions for %s/%s", len(questions), kind, language)
    return QuestionBank(
        kind=kind,
        language=language,
        questions=tuple(questions),
        answer_key=tuple(answer_key),
        unwinnable=tuple(unwinnable),
    )


def read_document(filename: str, data_dir: Optional[Path] = None) -> str:
    """Read a static markdown document (howto or help text)."""
    data_dir = Path(data_dir) if data_dir is not None else config.DATA_DIR
    path = data_dir / filename
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise BankLoadError(f"Document not found: {path}")
