"""
Input resolution for the JSONL validator.

Arguments are either direct file paths or bare filenames inside the data
directory. With no arguments, the data directory is searched for JSONL files.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Union

from config.constants import DEFAULT_FILE_PATTERN, JSON_PROBE
from src.errors import EnvironmentCheckError, InputNotFoundError

logger = logging.getLogger(__name__)


def check_environment() -> None:
    """
    Verify the JSON decoder works before touching any input.

    Raises:
        EnvironmentCheckError: If the probe document cannot be decoded.
    """
    try:
        probe = json.loads(JSON_PROBE)
    except (ValueError, RecursionError) as e:
        raise EnvironmentCheckError(f"JSON decoder is not usable: {e}") from e

    if probe.get('contents', [{}])[0].get('parts') != [{'text': 'probe'}]:
        raise EnvironmentCheckError("JSON decoder returned an unexpected result")


def resolve_inputs(args: Iterable[str], data_dir: Union[str, Path]) -> list[Path]:
    """
    Resolve CLI arguments to existing files.

    Each argument is tried as a path first, then as a name inside data_dir.
    All arguments are resolved before any validation runs.

    Raises:
        InputNotFoundError: On the first argument matching neither.
    """
    data_dir = Path(data_dir)
    files = []

    for arg in args:
        direct = Path(arg)
        if direct.is_file():
            files.append(direct)
        elif (data_dir / arg).is_file():
            files.append(data_dir / arg)
        else:
            raise InputNotFoundError(arg)

    return files


def discover_files(data_dir: Union[str, Path], pattern: str = DEFAULT_FILE_PATTERN) -> list[Path]:
    """List matching files directly inside data_dir (non-recursive), sorted."""
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        logger.debug(f"Data directory does not exist: {data_dir}")
        return []

    files = sorted(p for p in data_dir.glob(pattern) if p.is_file())
    logger.debug(f"Discovered {len(files)} files in {data_dir}")
    return files
