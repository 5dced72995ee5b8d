"""
File scanning for JSONL validation.

Reads files line by line, validates each non-blank line and aggregates
per-file reports into a run summary.
"""

import logging
import multiprocessing as mp
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Union

from src.errors import InputNotFoundError
from src.validator import validate_line

logger = logging.getLogger(__name__)


@dataclass
class FileReport:
    """Validation results for one file."""
    path: Path
    total_lines: int = 0
    failed_lines: int = 0
    # (line_num, defects) for each failed line, in file order
    failures: list[tuple[int, list[str]]] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.failed_lines == 0


@dataclass
class RunSummary:
    """Totals across every file in a run."""
    total_files: int = 0
    passed_files: int = 0
    failed_files: int = 0
    total_lines: int = 0
    failed_lines: int = 0

    def add(self, report: FileReport) -> None:
        """Fold one file report into the totals."""
        self.total_files += 1
        if report.passed:
            self.passed_files += 1
        else:
            self.failed_files += 1
        self.total_lines += report.total_lines
        self.failed_lines += report.failed_lines

    @property
    def passed(self) -> bool:
        return self.failed_files == 0


def scan_file(path: Union[str, Path]) -> FileReport:
    """
    Validate every non-blank line of a JSONL file.

    Blank and whitespace-only lines are skipped but still advance the
    physical line number used in defect messages.

    Raises:
        InputNotFoundError: If the path is not an existing file.
    """
    path = Path(path)
    if not path.is_file():
        raise InputNotFoundError(path)

    report = FileReport(path=path)

    # newline='\n' so a stray '\r' never splits a physical line
    with open(path, 'r', encoding='utf-8', errors='replace', newline='\n') as f:
        for line_num, line in enumerate(f, 1):
            if not line.strip():
                continue

            report.total_lines += 1
            errors = validate_line(line, line_num)
            if errors:
                report.failed_lines += 1
                report.failures.append((line_num, errors))

    logger.debug(f"{path}: {report.failed_lines} of {report.total_lines} lines failed")
    return report


def scan_files(paths: Iterable[Union[str, Path]], workers: int = 1) -> Iterator[FileReport]:
    """
    Validate files, yielding reports in input order.

    With workers > 1 the files are spread over a process pool; the
    order-preserving map keeps the output identical to a sequential run.
    """
    paths = [Path(p) for p in paths]
    workers = min(workers, len(paths))

    if workers <= 1:
        for path in paths:
            yield scan_file(path)
        return

    logger.debug(f"Scanning {len(paths)} files with {workers} workers")
    with mp.Pool(processes=workers) as pool:
        yield from pool.imap(scan_file, paths)
