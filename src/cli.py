"""
Command-line entry point for validating Gemini fine-tuning JSONL files.

Usage:
    validate-jsonl [file.jsonl ...]

With no files, every .jsonl file in the data/ directory is validated.
Exits 0 when everything passed (or nothing was found), 1 otherwise.
"""

import argparse
import logging
from pathlib import Path
from typing import Optional

from config.settings import settings
from src.discovery import check_environment, discover_files, resolve_inputs
from src.errors import ValidatorError
from src.report import ReportPrinter
from src.scanner import RunSummary, scan_files

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate JSONL files for Gemini fine-tuning"
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="JSONL files to validate (paths, or names inside the data directory)"
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory for bare filenames and discovery (default: data/)"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker processes across files (0 = auto, default: 1)"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored status markers"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: from settings)"
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write log records to this file"
    )
    return parser


def setup_logging(level: str, log_file: Optional[Path] = None) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        filename=str(log_file) if log_file else None,
    )


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level or settings.log_level, args.log_file or settings.log_file)

    config = settings.validation
    data_dir = args.data_dir or config.data_dir
    if args.workers is not None:
        config = config.model_copy(update={"workers": args.workers})
    workers = config.effective_workers

    printer = ReportPrinter(color=config.color and not args.no_color)
    printer.print_banner()

    try:
        check_environment()

        if args.files:
            files = resolve_inputs(args.files, data_dir)
        else:
            files = discover_files(data_dir, config.file_pattern)
            if not files:
                printer.print_status("warn", f"No .jsonl files found in {data_dir}")
                return 0

        summary = RunSummary()
        for report in scan_files(files, workers=workers):
            printer.print_file_report(report)
            summary.add(report)
    except ValidatorError as e:
        logger.error(str(e))
        printer.print_status("fail", str(e))
        return 1

    printer.print_summary(summary)
    return 0 if summary.passed else 1


if __name__ == "__main__":
    exit(main())
