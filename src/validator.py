"""
Record validation for Gemini fine-tuning JSONL files.

Each non-blank line must be a JSON object with a non-empty ``contents`` array
of turns (``role`` + ``parts`` with ``text``) and an optional
``systemInstruction`` carrying ``role`` and a ``parts`` array.
"""

import json
from typing import Any

from config.constants import (
    CONTENTS_FIELD, SYSTEM_INSTRUCTION_FIELD,
    ROLE_FIELD, PARTS_FIELD, TEXT_FIELD,
    INVALID_JSON, MISSING_CONTENTS, CONTENTS_NOT_ARRAY, CONTENTS_EMPTY,
    CONTENT_MISSING_ROLE_OR_PARTS, CONTENT_PARTS_NOT_ARRAY, PART_MISSING_TEXT,
    SYSTEM_MISSING_ROLE, SYSTEM_MISSING_PARTS, SYSTEM_PARTS_NOT_ARRAY,
)


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def _field(value: Any, name: str) -> Any:
    """Return ``value[name]``, or None when value is not an object."""
    if isinstance(value, dict):
        return value.get(name)
    return None


def _present(value: Any) -> bool:
    # Top-level and systemInstruction fields treat false like null
    return value is not None and value is not False


class RecordValidator:
    """Validates single JSONL lines against the fine-tuning schema."""

    @staticmethod
    def parse(line: str) -> Any:
        """Parse one line of strict JSON (NaN / Infinity rejected, integers kept as strings)."""
        # Number values are never inspected; long integers exceed int() digit limits
        return json.loads(line, parse_int=str, parse_constant=_reject_constant)

    @staticmethod
    def validate(line: str, line_num: int) -> list[str]:
        """
        Validate one JSONL line.

        Args:
            line: Raw line text
            line_num: 1-based physical line number, used in messages

        Returns:
            Ordered defect messages; empty if the line is valid or blank.
            Invalid JSON short-circuits to a single defect.
        """
        if isinstance(line_num, bool) or not isinstance(line_num, int) or line_num < 1:
            raise ValueError(f"line_num must be a positive integer, got {line_num!r}")

        if not line or not line.strip():
            return []

        try:
            record = RecordValidator.parse(line)
        except (ValueError, RecursionError):
            return [INVALID_JSON.format(line_num=line_num)]

        errors = RecordValidator._check_contents(record, line_num)
        errors.extend(RecordValidator._check_system_instruction(record, line_num))
        return errors

    @staticmethod
    def _check_contents(record: Any, line_num: int) -> list[str]:
        contents = _field(record, CONTENTS_FIELD)
        if not _present(contents):
            return [MISSING_CONTENTS.format(line_num=line_num)]

        if not isinstance(contents, list):
            return [CONTENTS_NOT_ARRAY.format(line_num=line_num)]

        errors = []
        if not contents:
            errors.append(CONTENTS_EMPTY.format(line_num=line_num))

        for index, item in enumerate(contents):
            if _field(item, ROLE_FIELD) is None or _field(item, PARTS_FIELD) is None:
                errors.append(CONTENT_MISSING_ROLE_OR_PARTS.format(line_num=line_num, index=index))

        for index, item in enumerate(contents):
            parts = _field(item, PARTS_FIELD)
            if parts is None:
                continue
            if not isinstance(parts, list):
                errors.append(CONTENT_PARTS_NOT_ARRAY.format(line_num=line_num, index=index))
                continue
            for part_index, part in enumerate(parts):
                if _field(part, TEXT_FIELD) is None:
                    errors.append(PART_MISSING_TEXT.format(
                        line_num=line_num, index=index, part_index=part_index
                    ))

        return errors

    @staticmethod
    def _check_system_instruction(record: Any, line_num: int) -> list[str]:
        system = _field(record, SYSTEM_INSTRUCTION_FIELD)
        if not _present(system):
            return []

        errors = []
        if not _present(_field(system, ROLE_FIELD)):
            errors.append(SYSTEM_MISSING_ROLE.format(line_num=line_num))

        # Entries are not checked for 'text', only the array type
        parts = _field(system, PARTS_FIELD)
        if not _present(parts):
            errors.append(SYSTEM_MISSING_PARTS.format(line_num=line_num))
        elif not isinstance(parts, list):
            errors.append(SYSTEM_PARTS_NOT_ARRAY.format(line_num=line_num))

        return errors


def validate_line(line: str, line_num: int) -> list[str]:
    """Validate one JSONL line; see RecordValidator.validate."""
    return RecordValidator.validate(line, line_num)
