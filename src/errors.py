"""Fatal error types for the JSONL validator.

Per-line schema and syntax problems are never raised; they are returned as
defect messages by the validator. Only conditions that abort the whole run
are exceptions.
"""

from pathlib import Path
from typing import Union


class ValidatorError(Exception):
    """Base class for errors that abort a validation run."""


class EnvironmentCheckError(ValidatorError):
    """The JSON processing capability is unavailable or broken."""


class InputNotFoundError(ValidatorError):
    """A requested input cannot be resolved to a file."""

    def __init__(self, path: Union[str, Path]):
        self.path = path
        super().__init__(path)

    def __str__(self) -> str:
        return f"File not found: {self.path}"
