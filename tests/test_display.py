from models import ExamReport, FinishReason


def test_report_shows_pass_verdict(screen):
    report = ExamReport(total_questions=100, answered_count=80, correct_count=75,
                        incorrect_indices=[3], percent_correct=75.0, passed=True)
    screen.show_report(report, FinishReason.COMPLETED)

    assert "PASS" in screen.text
    assert "You've passed the test exam." in screen.text
    assert "Missed questions" in screen.text


def test_report_without_results(screen):
    screen.show_report(None, FinishReason.TIMEOUT)

    assert "Time for the exam has run out." in screen.text
    assert "No result available" in screen.text
    assert "Verdict" not in screen.text
