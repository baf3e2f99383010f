"""File writer for model generation."""
import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from modelgen.core.config import settings
from modelgen.core.errors import GeneratorFailure
from modelgen.generators.types import FileOperation, OutputRecord

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


def file_operation_record(filename: PathLike) -> OutputRecord:
    """Describe what writing ``filename`` would do right now, without logging it."""
    filename = Path(filename)
    if filename.exists():
        return OutputRecord(status="ok", operation=FileOperation.OVERWRITING, file=filename)
    return OutputRecord(status="ok", operation=FileOperation.CREATING, file=filename)


def record_file_operation(filename: PathLike, output: Optional[List[OutputRecord]] = None) -> List[OutputRecord]:
    """
    Append what writing ``filename`` is going to do to the output log.

    Nothing is written to disk.

    Args:
        filename: Target file path
        output: Operation log to append to (a new one is created if None)

    Returns:
        The same output log
    """
    if output is None:
        output = []

    output.append(file_operation_record(filename))

    return output


def check_overwrite(filename: PathLike, force: bool) -> None:
    """Refuse to touch an existing file unless ``force`` is set."""
    filename = Path(filename)
    if filename.exists() and not force:
        raise GeneratorFailure(f"Cannot overwrite file '{filename}' without --force option.")


def save_file(
    filename: PathLike,
    content: str,
    encoding: Optional[str] = None,
    mode: Optional[int] = None,
) -> None:
    """
    Write generated content, creating parent directories if needed.

    An existing file is overwritten; use check_overwrite() first to guard it.

    Args:
        filename: Target file path
        content: File contents
        encoding: Text encoding (defaults to settings.file_encoding)
        mode: Mode for created directories (defaults to settings.directory_mode)
    """
    filename = Path(filename)
    directory = filename.parent

    if not directory.exists():
        try:
            os.makedirs(directory, mode if mode is not None else settings.directory_mode, exist_ok=True)
        except OSError as e:
            raise GeneratorFailure(f"Could not create directory '{directory}'.") from e
        log.debug("Created directory %s", directory)

    try:
        filename.write_text(content, encoding=encoding or settings.file_encoding)
    except OSError as e:
        raise GeneratorFailure(f"Could not open '{filename}' for writing.") from e

    log.info("Wrote %s (%d chars)", filename, len(content))
