from typing import Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.theme import Theme

from models import FINISH_MESSAGES, ExamReport, FinishReason

custom_theme = Theme({
    "correct": "bold green",
    "wrong": "bold red",
    "skip": "dim",
    "needs_work": "bold yellow",
    "info": "bold cyan",
    "header": "bold magenta",
    "timer_ok": "bold green",
    "timer_warn": "bold yellow",
    "timer_critical": "bold red",
})

console = Console(theme=custom_theme)


class Screen:
    """Everything the exam shows on the terminal goes through here."""

    def __init__(self, output: Optional[Console] = None):
        self.console = output if output is not None else console

    # ------------------------------------------------------------------
    # General UI
    # ------------------------------------------------------------------

    def clear(self) -> None:
        self.console.clear()

    def render(self, markdown_text: str) -> None:
        self.console.print(Markdown(markdown_text))

    def prompt(self, text: str) -> None:
        self.console.print(f"[bold]{text}[/bold] ", end="")

    def show_error(self, message: str) -> None:
        self.console.print(f"  [wrong]Error:[/wrong] {message}")

    def show_info(self, message: str) -> None:
        self.console.print(f"  [info]{message}[/info]")

    def show_warning(self, message: str) -> None:
        self.console.print(f"  [needs_work]Warning:[/needs_work] {message}")

    # ------------------------------------------------------------------
    # Question display
    # ------------------------------------------------------------------

    def show_question(
        self,
        question_number: int,
        last_number: int,
        question_text: str,
        previous_answer: Optional[str] = None,
        time_remaining: Optional[int] = None,
        notice: Optional[str] = None,
    ) -> None:
        """Render a question with its header and any earlier answer."""
        header_parts = [f"Question {question_number}/{last_number}"]
        if time_remaining is not None:
            header_parts.append(f"Time: {format_time_remaining(time_remaining)}")
        header = "  |  ".join(header_parts)

        self.console.print(Rule(f"[header]{header}[/header]", style="blue"))
        self.render(question_text)

        if previous_answer:
            self.console.print(
                f"  [info]Your previously entered answer is ({previous_answer})[/info]"
            )
        if notice:
            self.show_warning(notice)
        self.console.print()

    # ------------------------------------------------------------------
    # Score display
    # ------------------------------------------------------------------

    def show_report(self, report: Optional[ExamReport], reason: FinishReason) -> None:
        self.console.print()
        self.console.print(Panel(
            f"[bold]{FINISH_MESSAGES[reason]}[/bold]",
            border_style="red" if reason is FinishReason.TIMEOUT else "blue",
            padding=(0, 2),
        ))

        if report is None:
            self.show_info("No result available, you haven't answered any question.")
            return

        table = Table(title="Exam Results", border_style="blue")
        table.add_column("Metric", style="bold")
        table.add_column("Value", justify="right")

        table.add_row("Score", f"{report.correct_count}/{report.total_questions}")
        table.add_row("Correct (of answered)", f"{report.correct_count}/{report.answered_count}")
        table.add_row("Percent correct", f"{report.percent_correct:.2f}%")
        missed = ", ".join(str(n) for n in report.missed_question_numbers)
        table.add_row("Missed questions", missed or "-")
        verdict_style = "correct" if report.verdict == "pass" else "wrong"
        table.add_row("Verdict", f"[{verdict_style}]{report.verdict.upper()}[/{verdict_style}]")

        self.console.print(table)
        self.console.print()

        if report.verdict == "pass":
            self.console.print("  [correct]You've passed the test exam.[/correct]")
        else:
            self.console.print("  [wrong]You've failed the test exam.[/wrong]")
            self.console.print("  [dim]Don't give up! You can do it![/dim]")
        self.console.print()


# ---------------------------------------------------------------------------
# Timer display
# ---------------------------------------------------------------------------

def format_time_remaining(seconds: int) -> str:
    """Return formatted time string with color based on remaining time."""
    mins = seconds // 60
    secs = seconds % 60
    time_str = f"{mins:02d}:{secs:02d}"

    if seconds <= 60:
        return f"[timer_critical]{time_str}[/timer_critical]"
    elif seconds <= 300:
        return f"[timer_warn]{time_str}[/timer_warn]"
    else:
        return f"[timer_ok]{time_str}[/timer_ok]"
