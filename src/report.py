"""
Console reporting for validation runs.

Renders the banner, per-file results and the final summary with rich.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape

from config.constants import BANNER_TITLE, BANNER_RULE, FILE_SEPARATOR, STATUS_STYLES
from src.scanner import FileReport, RunSummary


class ReportPrinter:
    """Prints validation output to a rich console."""

    def __init__(self, console: Optional[Console] = None, color: bool = True):
        """
        Args:
            console: Console to print to (default: stdout)
            color: If False, status markers are printed without color
        """
        self.console = console or Console(highlight=False, emoji=False, no_color=not color)
        self.color = color

    def _print(self, text: str = "") -> None:
        self.console.print(text, soft_wrap=True, highlight=False, emoji=False)

    def print_status(self, status: str, message: str) -> None:
        """Print a message prefixed with the marker for pass/fail/warn/info."""
        message = escape(message)
        if status not in STATUS_STYLES:
            self._print(f"  {message}")
            return

        style, glyph = STATUS_STYLES[status]
        if self.color:
            self._print(f"[{style}]{glyph}[/{style}] {message}")
        else:
            self._print(f"{glyph} {message}")

    def print_banner(self) -> None:
        self._print(BANNER_RULE)
        self._print(f"  {BANNER_TITLE}")
        self._print(BANNER_RULE)

    def print_file_report(self, report: FileReport) -> None:
        """Print the header, every defect and the status line for one file."""
        self._print()
        self._print(f"Validating: {escape(str(report.path))}")
        self._print(FILE_SEPARATOR)

        for _, errors in report.failures:
            for error in errors:
                self.print_status("fail", error)

        if report.passed:
            self.print_status("pass", f"All {report.total_lines} lines valid")
        else:
            self.print_status(
                "fail", f"{report.failed_lines} of {report.total_lines} lines have errors"
            )

    def print_summary(self, summary: RunSummary) -> None:
        self._print()
        self._print(BANNER_RULE)
        self._print("  Summary")
        self._print(BANNER_RULE)
        self._print(f"Files checked: {summary.total_files}")
        self._print(f"Files passed:  {summary.passed_files}")
        self._print(f"Files failed:  {summary.failed_files}")
        self._print(f"Total lines:   {summary.total_lines}")
        self._print(f"Failed lines:  {summary.failed_lines}")
        self._print()

        if summary.passed:
            self.print_status("pass", "All validations passed!")
        else:
            self.print_status("fail", "Validation failed!")
