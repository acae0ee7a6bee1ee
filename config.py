import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).parent / ".env")


class ConfigurationError(ValueError):
    """Raised when an exam window or setting is invalid."""


# ---------------------------------------------------------------------------
# Helper: read from the environment with a default
# ---------------------------------------------------------------------------
def _get_setting(key: str, default: str = "") -> str:
    return os.getenv(key, default)


# ---------------------------------------------------------------------------
# Environment-driven settings
# ---------------------------------------------------------------------------
DATA_DIR: Path = Path(_get_setting("EXAM_DATA_DIR") or Path(__file__).parent / "data")
EXAM_DURATION_MINUTES: int = int(_get_setting("EXAM_DURATION_MINUTES", "90"))
TIMER_ENABLED: bool = _get_setting("EXAM_TIMER_ENABLED", "true").lower() == "true"
LOG_LEVEL: str = _get_setting("EXAM_LOG_LEVEL", "WARNING").upper()
LOG_FILE: str = _get_setting("EXAM_LOG_FILE", "")

# ---------------------------------------------------------------------------
# Exam structure constants
# ---------------------------------------------------------------------------
QUESTION_BANK_SIZE = 50      # questions per bank file
PASS_THRESHOLD = 75          # correct answers needed to pass (absolute count)
DEFAULT_KIND = "silver"
DEFAULT_LANGUAGE = "en"
WARNING_SECONDS = (300, 60)  # timer warnings at 5 minutes and 1 minute

# ---------------------------------------------------------------------------
# Data file paths
# ---------------------------------------------------------------------------
HOWTO_FILENAME = "test_readme.md"
HELP_FILENAME = "test_help.md"


@dataclass(frozen=True)
class ExamConfig:
    kind: str = DEFAULT_KIND
    language: str = DEFAULT_LANGUAGE
    start_position: int = 1                   # one-based, inclusive
    end_position: int = QUESTION_BANK_SIZE    # one-based, inclusive

    def __post_init__(self):
        if self.start_position >= self.end_position:
            raise ConfigurationError("Start position must be less than end position.")
        for position in (self.start_position, self.end_position):
            if not 1 <= position <= QUESTION_BANK_SIZE:
                raise ConfigurationError(
                    f"Positions must be between 1 and {QUESTION_BANK_SIZE}."
                )

    @property
    def start_index(self) -> int:
        """Zero-based index of the first question in the window."""
        return self.start_position - 1

    @property
    def end_index(self) -> int:
        """Zero-based exclusive bound of the window."""
        return self.end_position

    @property
    def window_size(self) -> int:
        return self.end_index - self.start_index

    def check_bank_size(self, bank_size: int) -> None:
        """Reject a window that runs past the end of a shorter bank."""
        if self.end_position > bank_size:
            raise ConfigurationError(
                f"End position {self.end_position} is past the last question "
                f"({bank_size}) of the {self.kind} bank."
            )
