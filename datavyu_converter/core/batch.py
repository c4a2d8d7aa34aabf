"""Batch driver: convert every Datavyu export in a directory.

WHY: A coding session produces one export per participant, and they are
converted together at the end of the day. A bad file (an unreadable
export, a locked output sheet) must not stop the rest of the batch, and
the caller needs to know afterwards which files made it.

HOW: Three layers:
  list_input_files — the files directly inside the input directory
  convert_file     — read → extract trial starts → format → write, one file
  run_batch        — convert_file for every listed file, collected into a
                     BatchSummary

RULES:
- Files are processed one at a time, in os.listdir order (not sorted)
- Subdirectories are skipped; there is no extension filter
- convert_file never raises for per-file problems; it returns a FileResult
- A file that cannot be read still gets a header-only output written
- Row parse errors quarantine the row; the file is still written
- The output directory must already exist; it is never created
"""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from datavyu_converter.config import ConverterConfig
from datavyu_converter.core.ir import ReadResult, RowError
from datavyu_converter.core.reader import read_file
from datavyu_converter.core.trials import extract_start_times
from datavyu_converter.formatters.base import BaseFormatter, FormatterOutput
from datavyu_converter.formatters.supercoder import SupercoderFormatter

logger = logging.getLogger(__name__)

# Errors that mean "this input file could not be read at all"
_READ_ERRORS = (OSError, UnicodeDecodeError)


class FileStatus(str, enum.Enum):
    """Outcome of converting one file.

    RULES:
    - success: every row converted and the output was written
    - parse_error: some rows were quarantined; output written from the rest
    - io_error: the input could not be read or the output could not be written
    - failed: an unexpected error escaped the pipeline for this file
    """

    SUCCESS = "success"
    PARSE_ERROR = "parse_error"
    IO_ERROR = "io_error"
    FAILED = "failed"


@dataclass
class FileResult:
    """What happened to one input file.

    RULES:
    - output_path is None when nothing was written
    - error holds the read or write error message for io_error results
    - row_errors lists quarantined rows (parse_error results)
    """

    source: Path
    status: FileStatus
    output_path: Optional[Path] = None
    records: int = 0
    trials: int = 0
    row_errors: List[RowError] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == FileStatus.SUCCESS


@dataclass
class BatchSummary:
    """Per-file results of one batch run, in processing order."""

    results: List[FileResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> List[FileResult]:
        return [r for r in self.results if not r.ok]

    @property
    def ok(self) -> bool:
        return not self.failed


def list_input_files(input_dir: Path) -> List[Path]:
    """List the files directly inside input_dir, in directory order.

    Raises:
        FileNotFoundError: If input_dir does not exist.
        NotADirectoryError: If input_dir is a file.
    """
    files: List[Path] = []
    for name in os.listdir(input_dir):
        path = input_dir / name
        if path.is_dir():
            logger.debug("Skipping directory %s", path)
            continue
        files.append(path)
    return files


def write_output(output: FormatterOutput, output_dir: Path) -> Path:
    """Write a formatter output into output_dir, replacing any existing file.

    Raises:
        OSError: If the directory is missing or the file cannot be written.
    """
    path = output_dir / output.filename
    # newline="" keeps the formatter's "\n" line endings on every platform
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(output.content)
    return path


def _read(path: Path) -> Tuple[ReadResult, Optional[str]]:
    """Read a file, turning read failures into an empty result plus message."""
    try:
        return read_file(path), None
    except _READ_ERRORS as e:
        logger.exception("Failed to read %s", path.name)
        return ReadResult(path=path), str(e)


def convert_file(
    path: Path,
    config: ConverterConfig,
    formatter: Optional[BaseFormatter] = None,
) -> FileResult:
    """Convert one Datavyu export and write the result.

    Args:
        path: The Datavyu export to convert.
        config: Run settings (output directory, frame rate, start code).
        formatter: Formatter to render the output. Defaults to a
            SupercoderFormatter built from config.

    Returns:
        FileResult describing the outcome. Never raises for read, parse,
        or write problems with this file.
    """
    if formatter is None:
        formatter = SupercoderFormatter(
            frame_rate=config.frame_rate,
            prefix=config.output_prefix,
        )

    read_result, read_error = _read(path)
    start_times = extract_start_times(read_result.records, config.start_code)

    result = FileResult(
        source=path,
        status=FileStatus.SUCCESS,
        records=len(read_result.records),
        trials=len(start_times),
        row_errors=list(read_result.row_errors),
    )
    if read_error is not None:
        result.status = FileStatus.IO_ERROR
        result.error = read_error
    elif read_result.row_errors:
        result.status = FileStatus.PARSE_ERROR

    output = formatter.format(read_result.records, start_times, path.name)
    try:
        result.output_path = write_output(output, config.output_dir)
    except OSError as e:
        logger.error("Could not write %s: %s", output.filename, e)
        result.status = FileStatus.IO_ERROR
        if result.error is None:
            result.error = str(e)
        return result

    logger.info(
        "Converted %s -> %s (%d records, %d trials)",
        path.name, result.output_path, result.records, result.trials,
    )
    return result


def run_batch(
    config: ConverterConfig,
    formatter: Optional[BaseFormatter] = None,
) -> BatchSummary:
    """Convert every file in config.input_dir.

    RULES:
    - An unexpected exception for one file is logged with its traceback and
      recorded as a FAILED result; the next file is still processed

    Raises:
        FileNotFoundError: If the input directory does not exist.
    """
    summary = BatchSummary()
    for path in list_input_files(config.input_dir):
        try:
            result = convert_file(path, config, formatter)
        except Exception as e:
            logger.exception("Conversion failed for %s", path.name)
            result = FileResult(source=path, status=FileStatus.FAILED, error=str(e))
        summary.results.append(result)
    return summary
