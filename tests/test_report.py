"""Tests for the report printer."""

import io
import pytest

from rich.console import Console

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.report import ReportPrinter
from src.scanner import FileReport, RunSummary


def make_printer(color: bool = False):
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, color_system=None, highlight=False)
    return ReportPrinter(console=console, color=color), buffer


class TestReportPrinter:
    """Tests for ReportPrinter output layout."""

    def test_status_markers(self):
        printer, buffer = make_printer()

        printer.print_status("pass", "ok")
        printer.print_status("fail", "bad")
        printer.print_status("warn", "hmm")
        printer.print_status("info", "note")

        assert buffer.getvalue().splitlines() == ["✓ ok", "✗ bad", "⚠ hmm", "  note"]

    def test_markup_in_message_is_literal(self):
        printer, buffer = make_printer(color=True)

        printer.print_status("fail", "Line 1: contents[0].parts[2] missing 'text' field [bold]x[/bold]")

        assert buffer.getvalue().strip() == (
            "✗ Line 1: contents[0].parts[2] missing 'text' field [bold]x[/bold]"
        )

    def test_banner(self):
        printer, buffer = make_printer()

        printer.print_banner()

        assert buffer.getvalue().splitlines() == [
            "=" * 40,
            "  JSONL Validator for Gemini Fine-tuning",
            "=" * 40,
        ]

    def test_failed_file_report(self):
        printer, buffer = make_printer()
        report = FileReport(
            path=Path("data/train.jsonl"),
            total_lines=4,
            failed_lines=1,
            failures=[(5, ["Line 5: Missing required field 'contents'"])],
        )

        printer.print_file_report(report)

        assert buffer.getvalue().splitlines() == [
            "",
            "Validating: data/train.jsonl",
            "-" * 40,
            "✗ Line 5: Missing required field 'contents'",
            "✗ 1 of 4 lines have errors",
        ]

    def test_passed_file_report(self):
        printer, buffer = make_printer()

        printer.print_file_report(FileReport(path=Path("ok.jsonl"), total_lines=3))

        assert buffer.getvalue().splitlines()[-1] == "✓ All 3 lines valid"

    def test_emoji_codes_are_literal(self):
        printer, buffer = make_printer()
        report = FileReport(path=Path("data/:fire:.jsonl"), total_lines=1)

        printer.print_file_report(report)

        assert "Validating: data/:fire:.jsonl" in buffer.getvalue()

    def test_default_console_keeps_emoji_codes(self, capsys):
        ReportPrinter(color=False).print_status("fail", "File not found: :fire:.jsonl")

        assert "✗ File not found: :fire:.jsonl" in capsys.readouterr().out

    def test_summary(self):
        printer, buffer = make_printer()
        summary = RunSummary(total_files=2, passed_files=1, failed_files=1, total_lines=7, failed_lines=1)

        printer.print_summary(summary)

        assert buffer.getvalue().splitlines() == [
            "",
            "=" * 40,
            "  Summary",
            "=" * 40,
            "Files checked: 2",
            "Files passed:  1",
            "Files failed:  1",
            "Total lines:   7",
            "Failed lines:  1",
            "",
            "✗ Validation failed!",
        ]

    def test_summary_passed(self):
        printer, buffer = make_printer()

        printer.print_summary(RunSummary(total_files=1, passed_files=1, total_lines=2))

        assert buffer.getvalue().splitlines()[-1] == "✓ All validations passed!"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
