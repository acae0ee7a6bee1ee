"""Scoring engine: counts, percentage and pass/fail verdict."""

from typing import Mapping, Optional

import config
from models import ExamReport


def summarize(
    results: Mapping[int, bool],
    total_questions: int,
    pass_threshold: int = config.PASS_THRESHOLD,
) -> Optional[ExamReport]:
    """Aggregate per-question results into an ExamReport.

    Returns None when nothing was answered. The percentage is taken over the
    whole bank, not just the window that was presented, and the verdict
    compares the raw correct count against pass_threshold.
    """
    if not results:
        return None

    correct = sum(1 for ok in results.values() if ok)
    incorrect = sorted(i for i, ok in results.items() if not ok)
    percent = round(correct / total_questions * 100, 2) if total_questions > 0 else 0.0

    return ExamReport(
        total_questions=total_questions,
        answered_count=len(results),
        correct_count=correct,
        incorrect_indices=incorrect,
        percent_correct=percent,
        passed=correct >= pass_threshold,
    )
